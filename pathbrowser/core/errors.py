"""
Domain-specific exception hierarchy for pathbrowser.

All predictable failures raise subclasses of PathBrowserError. The CLI layer
catches PathBrowserError and prints friendly messages instead of raw stack
traces.

A lookup that simply finds nothing is not an error: the browser returns None
(or an empty mapping) for that case.
"""

class PathBrowserError(Exception):
    """Base class for all known, user-facing errors in pathbrowser.

    Any exception that should result in a friendly CLI message (rather than
    a full stack trace) should inherit from this.
    """

# ---------------------------------------------------------------------------
# Path / file system related errors
# ---------------------------------------------------------------------------

class FileSystemError(PathBrowserError):
    """Base class for errors related to paths and file system operations.

    Also raised when the underlying directory layer fails (read, write, stat,
    delete...). The original OSError is chained as the cause.
    """


class InvalidPathError(FileSystemError):
    """Raised when a path value cannot be used.

    Examples:
    - constructing a File from an empty string.
    - asking `File("var").get_child("/etc/passwd")`: children must be relative.
    """


class NotInSearchPathError(FileSystemError):
    """Raised when a file is not located under any include directory.

    Example: `browser.get_relative_file("/etc/passwd")` while the include
    directories are `/srv/app` and `/srv/vendor`.
    """


class PathNotFoundError(FileSystemError):
    """Raised when a provided root path does not exist.

    Example: user runs `pathbrowser scan /not/a/real/path`.
    """


class PathNotDirectoryError(FileSystemError):
    """Raised when a provided root path exists but is not a directory.

    Example: user passes a file instead of a folder as include directory.
    """


class NoFilesFoundError(FileSystemError):
    """Raised when a scan completes successfully but finds no files.

    The CLI treats this as a soft error and prints 'No files found under ...'.
    """


# ---------------------------------------------------------------------------
# Platform / command errors
# ---------------------------------------------------------------------------

class PlatformError(PathBrowserError):
    """Base class for errors related to the host operating system."""


class UnsupportedPlatformError(PlatformError):
    """Raised when the operating system family is neither Unix nor Windows.

    No file system implementation can be selected in that case.
    """


class CommandError(PlatformError):
    """Raised when a command could not be executed.

    Examples:
    - the command string is empty.
    - the shell reports exit code 127 (command not found).
    - a multi-command script is requested on a non-Unix system.
    """


# ---------------------------------------------------------------------------
# Configuration / environment errors
# ---------------------------------------------------------------------------

class ConfigError(PathBrowserError):
    """Raised when the environment configuration is malformed.

    Example: PATHBROWSER_INCLUDE_PATH is set but contains no directories, or
    PATHBROWSER_PUBLIC_PATH is absolute.
    """


class LoggingError(PathBrowserError):
    """Raised when the tool fails to write its lookup log.

    Example: log directory is not writable or the CSV cannot be created.
    """
