"""
File value object for pathbrowser.

A File is an immutable, `/`-separated path string bound to the FileSystem
that created it. It knows whether it denotes a root path and whether it
descends into an archive (a `.phar` file used as a virtual directory tree).

Paths inside an archive always carry the `phar://` protocol prefix:

    File(fs, "test.phar/file.txt").path        -> "phar://test.phar/file.txt"
    File(fs, "phar://test.phar/file.txt").path -> "phar://test.phar/file.txt"
    File(fs, "test.phar").path                 -> "test.phar"

Everything that touches the disk is delegated to the file system.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Dict, Iterable, Optional, Union

from .errors import InvalidPathError

if TYPE_CHECKING:
    from .filesystem import FileSystem

DIRECTORY_SEPARATOR = "/"

PHAR_PROTOCOL = "phar://"
PHAR_EXTENSION = "phar"

# Marks the point where a path enters an archive.
PHAR_BOUNDARY = "." + PHAR_EXTENSION + DIRECTORY_SEPARATOR


class File:
    """
    Path of a file or directory on a FileSystem.

    Equality is based on the normalized path (and the file system variant),
    so two File objects for "test/" and "test" are equal.
    """

    DIRECTORY_SEPARATOR = DIRECTORY_SEPARATOR

    def __init__(self, file_system: FileSystem, path: Union[str, File]) -> None:
        """
        Construct a file object.

        Parameters
        ----------
        file_system : FileSystem
            File system this path belongs to.
        path : str | File
            Path string (backslashes are accepted) or another File.

        Raises
        ------
        InvalidPathError
            If the path is empty or not a string.
        """
        self._fs = file_system

        self._set_path(path)

        self._archive = self._lookup_archive()
        if self._archive is not None and not self.has_phar_protocol():
            self._path = PHAR_PROTOCOL + self._path

    def _set_path(self, path: Union[str, File]) -> None:
        if isinstance(path, File):
            path = path.path
        elif not isinstance(path, str) or not path.strip():
            raise InvalidPathError(
                "Could not set path: provided path is invalid or empty"
            )
        else:
            path = path.replace("\\", DIRECTORY_SEPARATOR)

            # a prefix is never nested, "phar://phar://x" is "phar://x"
            if path.startswith(PHAR_PROTOCOL):
                while path.startswith(PHAR_PROTOCOL):
                    path = path[len(PHAR_PROTOCOL):]

                path = PHAR_PROTOCOL + path

        self._is_root = self._fs.is_root_path(path)
        if not self._is_root:
            stripped = path.rstrip(DIRECTORY_SEPARATOR)
            if not stripped:
                # only separators, e.g. "//"
                stripped = DIRECTORY_SEPARATOR
                self._is_root = self._fs.is_root_path(stripped)

            path = stripped

        self._path = path

    def _lookup_archive(self) -> Optional[File]:
        position = self._path.find(PHAR_BOUNDARY)
        if position == -1:
            return None

        archive = self._path[:position + len(PHAR_EXTENSION) + 1]
        if self.has_phar_protocol(archive):
            archive = archive[len(PHAR_PROTOCOL):]

        return self._fs.get_file(archive)

    # ------------------------------------------------------------------
    # Value object protocol
    # ------------------------------------------------------------------

    def __str__(self) -> str:
        return self._path

    def __repr__(self) -> str:
        return f"File({self._path!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, File):
            return NotImplemented

        return self._path == other._path and type(self._fs) is type(other._fs)

    def __hash__(self) -> int:
        return hash(self._path)

    @property
    def path(self) -> str:
        """Normalized path string."""
        return self._path

    @property
    def file_system(self) -> FileSystem:
        return self._fs

    @property
    def archive(self) -> Optional[File]:
        """The (unprefixed) archive this path descends into, if any."""
        return self._archive

    # ------------------------------------------------------------------
    # Path manipulation
    # ------------------------------------------------------------------

    def get_child(self, path: Union[str, File]) -> File:
        """
        Get a child of this file.

        The child's own `phar://` prefix is dropped before joining; the
        joined path is normalized again so a new archive boundary is
        detected.

        Raises
        ------
        InvalidPathError
            If the provided path is empty or absolute.
        """
        child = self._fs.get_file(path)
        if child.is_absolute():
            raise InvalidPathError(
                f"Could not get child for {child.path}: path cannot be absolute"
            )

        child_path = child.path
        if child.has_phar_protocol():
            child_path = child_path[len(PHAR_PROTOCOL):]

        if not self._is_root:
            child_path = DIRECTORY_SEPARATOR + child_path

        return self._fs.get_file(self._path + child_path)

    def get_name(self, trim_extension: bool = False) -> str:
        """
        Get the name of the file.

        For a path like /var/www/site, the name is `site`.
        """
        separator = self._path.rfind(DIRECTORY_SEPARATOR)
        if separator == -1:
            name = self._path
        else:
            name = self._path[separator + 1:]

        if not trim_extension:
            return name

        extension = self.get_extension()
        if not extension:
            return name

        return name[:len(name) - len(extension) - 1]

    def get_parent(self) -> File:
        """For a path like /var/www/site, the parent is /var/www."""
        return self._fs.get_parent(self)

    def get_extension(self) -> str:
        """Lower-cased extension of the name, empty string if there is none."""
        name = self.get_name()

        separator = name.rfind(".")
        if separator == -1:
            return ""

        return name[separator + 1:].lower()

    def has_extension(self, extension: Union[str, Iterable[str]]) -> bool:
        """Check the extension against one extension or a list of them."""
        if isinstance(extension, str):
            extension = [extension]

        return self.get_extension() in extension

    def get_copy_file(self) -> File:
        """
        Get a file name for a copy which does not overwrite an existing file.

        When document.txt exists, the copy file is document-1.txt. If that
        one also exists, document-2.txt and so on.
        """
        if not self.exists():
            return self

        base_name = self.get_name()
        parent = self.get_parent()
        extension = self.get_extension()

        if extension:
            base_name = base_name[:-(len(extension) + 1)]
            extension = "." + extension

        index = 0
        while True:
            index += 1
            copy_file = parent.get_child(f"{base_name}-{index}{extension}")
            if not copy_file.exists():
                return copy_file

    def get_absolute_path(self) -> str:
        return self._fs.get_absolute_path(self)

    def is_absolute(self) -> bool:
        return self._fs.is_absolute(self)

    def is_root_path(self) -> bool:
        """Check whether this path is a root path (/, C:/, /C/)."""
        return self._is_root

    def is_phar(self) -> bool:
        """Check whether this file is an archive, based on its extension."""
        return self.get_extension() == PHAR_EXTENSION

    def is_in_phar(self) -> Optional[File]:
        """Get the archive this path descends into, None when not in one."""
        return self._archive

    def has_phar_protocol(self, path: Optional[str] = None) -> bool:
        """
        Check if a path is prefixed with the `phar://` protocol.

        When no path is provided, the path of this file is checked.
        """
        if path is None:
            path = self._path

        return path.startswith(PHAR_PROTOCOL)

    # ------------------------------------------------------------------
    # Disk access, delegated to the file system
    # ------------------------------------------------------------------

    def exists(self) -> bool:
        return self._fs.exists(self)

    def is_directory(self) -> bool:
        return self._fs.is_directory(self)

    def is_readable(self) -> bool:
        return self._fs.is_readable(self)

    def is_writable(self) -> bool:
        return self._fs.is_writable(self)

    def get_modification_time(self) -> int:
        return self._fs.get_modification_time(self)

    def get_size(self) -> int:
        return self._fs.get_size(self)

    def get_permissions(self) -> int:
        """Permission bits of the file, e.g. 0o755."""
        return self._fs.get_permissions(self)

    def set_permissions(self, permissions: int) -> None:
        self._fs.set_permissions(self, permissions)

    def read(self, recursive: bool = False) -> Union[bytes, Dict[str, File]]:
        """
        Read the file or directory.

        A file returns its content. A directory returns a mapping of child
        path -> File; with `recursive` the subdirectories are read as well.
        """
        return self._fs.read(self, recursive)

    def write(self, content: Union[str, bytes] = b"", append: bool = False) -> None:
        """Create or update this file, creating the parent directory if needed."""
        self._fs.write(self, content, append)

    def create(self) -> None:
        """Create this path as a directory."""
        self._fs.create(self)

    def delete(self) -> None:
        """Delete this file, or this directory with everything in it."""
        self._fs.delete(self)

    def copy(self, destination: File) -> None:
        self._fs.copy(self, destination)

    def move(self, destination: File) -> None:
        self._fs.move(self, destination)
