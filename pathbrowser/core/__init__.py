from .browser import FileBrowser, GenericFileBrowser
from .directory import Directory, LocalDirectory
from .errors import (
    CommandError,
    ConfigError,
    FileSystemError,
    InvalidPathError,
    NotInSearchPathError,
    PathBrowserError,
    UnsupportedPlatformError,
)
from .file import File
from .filesystem import FileSystem
from .system import System
from .unix import UnixFileSystem
from .windows import WindowsFileSystem

__all__ = [
    "CommandError",
    "ConfigError",
    "Directory",
    "File",
    "FileBrowser",
    "FileSystem",
    "FileSystemError",
    "GenericFileBrowser",
    "InvalidPathError",
    "LocalDirectory",
    "NotInSearchPathError",
    "PathBrowserError",
    "System",
    "UnixFileSystem",
    "UnsupportedPlatformError",
    "WindowsFileSystem",
]
