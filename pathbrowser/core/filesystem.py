"""
File system base for pathbrowser.

A FileSystem is a stateless strategy shared by every File created through
it. The platform variants (UnixFileSystem, WindowsFileSystem) decide:

- which strings are root paths
- which paths are absolute
- which prefix of an absolute path is kept verbatim (`/`, `C:/`, `/C/`)

The resolution of absolute paths (working directory anchoring, dot segments,
archive boundaries) and all disk operations are shared and implemented here.
Disk access goes through an injected Directory (LocalDirectory by default).
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Dict, List, Optional, Tuple, Union

from .directory import Directory, LocalDirectory
from .errors import FileSystemError
from .file import DIRECTORY_SEPARATOR, PHAR_PROTOCOL, File

logger = logging.getLogger(__name__)

CURRENT_DIRECTORY = "."
PARENT_DIRECTORY = ".."


class FileSystem(ABC):
    """
    Base class for the platform file systems.

    Parameters
    ----------
    directory : Directory, optional
        Storage to operate on. Defaults to the host operating system.
    """

    def __init__(self, directory: Optional[Directory] = None) -> None:
        self.directory = directory if directory is not None else LocalDirectory()

    # ------------------------------------------------------------------
    # Platform specific
    # ------------------------------------------------------------------

    @abstractmethod
    def is_root_path(self, path: str) -> bool:
        """Check whether a path string is a root path."""

    @abstractmethod
    def is_absolute_path(self, path: str) -> bool:
        """Check whether an unprefixed path string is absolute."""

    @abstractmethod
    def split_root(self, path: str) -> Tuple[str, str]:
        """
        Split an absolute path in the prefix kept verbatim and the rest.

        The rest is folded segment by segment by get_absolute_path.
        """

    # ------------------------------------------------------------------
    # Path resolution
    # ------------------------------------------------------------------

    def get_file(self, path: Union[str, File]) -> File:
        return File(self, path)

    def get_working_directory(self) -> str:
        return self.directory.getcwd().replace("\\", DIRECTORY_SEPARATOR)

    def is_absolute(self, file: File) -> bool:
        """Check whether a file has an absolute path, ignoring `phar://`."""
        path = file.path
        if file.has_phar_protocol():
            path = path[len(PHAR_PROTOCOL):]

        return self.is_absolute_path(path)

    def get_absolute_path(self, file: File) -> str:
        """
        Get the absolute path of a file.

        Steps:
        - A path inside an archive is rewritten to the absolute path of the
          archive followed by the path inside the archive.
        - The `phar://` prefix is stripped and remembered.
        - Relative paths are anchored on the working directory.
        - Segments are folded: empty and `.` are skipped, `..` drops the
          previous segment (never past the root).
        - When an archive was involved, the result is normalized as a File
          again so the `phar://` prefix is restored where it applies.
        """
        path = file.path

        archive = file.archive
        if archive is not None:
            inner_path = path[len(PHAR_PROTOCOL) + len(archive.path):]
            path = (
                self.get_absolute_path(archive)
                + DIRECTORY_SEPARATOR
                + inner_path.lstrip(DIRECTORY_SEPARATOR)
            )

        has_phar_protocol = path.startswith(PHAR_PROTOCOL)
        if has_phar_protocol:
            path = path[len(PHAR_PROTOCOL):]

        if not self.is_absolute_path(path):
            path = self.get_working_directory() + DIRECTORY_SEPARATOR + path

        root, path = self.split_root(path)

        segments: List[str] = []
        for segment in path.split(DIRECTORY_SEPARATOR):
            if segment == "" or segment == CURRENT_DIRECTORY:
                continue

            if segment == PARENT_DIRECTORY:
                if segments:
                    segments.pop()

                continue

            segments.append(segment)

        absolute_path = root + DIRECTORY_SEPARATOR.join(segments)

        if archive is not None or has_phar_protocol:
            resolved = self.get_file(absolute_path)

            absolute_path = resolved.path
            if has_phar_protocol and not resolved.has_phar_protocol() and resolved.is_phar():
                absolute_path = PHAR_PROTOCOL + absolute_path

        return absolute_path

    def get_parent(self, file: File) -> File:
        """
        Get the parent of the provided file.

        For a path like /var/www/site, the parent is /var/www. A name without
        separator has the working directory as parent; the parent of a root
        is the root itself.
        """
        path = file.path

        if DIRECTORY_SEPARATOR not in path:
            return self.get_file(self.get_absolute_path(self.get_file(CURRENT_DIRECTORY)))

        name = file.get_name()

        parent = path[:len(path) - len(name) - 1]
        if not parent:
            return self.get_file(DIRECTORY_SEPARATOR)

        return self.get_file(parent)

    def get_temporary_file(self, name: str = "temp") -> File:
        """Create a temporary file with the provided name prefix."""
        try:
            path = self.directory.temporary_file(name)
        except OSError as exc:
            raise FileSystemError(f"Could not create a temporary file: {exc}") from exc

        return self.get_file(path)

    # ------------------------------------------------------------------
    # Inspection
    # ------------------------------------------------------------------

    def exists(self, file: File) -> bool:
        return self.directory.exists(self.get_absolute_path(file))

    def is_directory(self, file: File) -> bool:
        if not self.exists(file):
            return False

        return self.directory.is_directory(self.get_absolute_path(file))

    def is_readable(self, file: File) -> bool:
        if not self.exists(file):
            return False

        return self.directory.is_readable(self.get_absolute_path(file))

    def is_writable(self, file: File) -> bool:
        """
        Check whether a file is writable.

        When the file does not exist, its parent directory is checked.
        """
        if self.exists(file):
            return self.directory.is_writable(self.get_absolute_path(file))

        if file.is_root_path():
            return False

        return self.is_writable(self.get_parent(file))

    def get_modification_time(self, file: File) -> int:
        if not self.exists(file):
            raise FileSystemError(
                f"Could not get the modification time of {file.get_absolute_path()}: "
                "file does not exist"
            )

        path = self.get_absolute_path(file)
        try:
            return self.directory.stat(path).mtime
        except OSError as exc:
            raise FileSystemError(f"Could not get the modification time of {path}: {exc}") from exc

    def get_size(self, file: File) -> int:
        if self.is_directory(file):
            raise FileSystemError(
                f"Could not get the size of {file.get_absolute_path()}: file is a directory"
            )

        path = self.get_absolute_path(file)
        try:
            return self.directory.stat(path).size
        except OSError as exc:
            raise FileSystemError(f"Could not get the size of {path}: {exc}") from exc

    def get_permissions(self, file: File) -> int:
        if not self.exists(file):
            raise FileSystemError(
                f"Could not get the permissions of {file.get_absolute_path()}: "
                "file does not exist"
            )

        path = self.get_absolute_path(file)
        try:
            mode = self.directory.stat(path).permissions
        except OSError as exc:
            raise FileSystemError(f"Could not get the permissions of {path}: {exc}") from exc

        # drop the file type, setuid, setgid and sticky bits
        return mode & 0o777

    def set_permissions(self, file: File, permissions: int) -> None:
        if not self.exists(file):
            raise FileSystemError(
                f"Could not set the permissions of {file.get_absolute_path()} "
                f"to {permissions:o}: file does not exist"
            )

        path = self.get_absolute_path(file)
        try:
            self.directory.chmod(path, permissions)
        except OSError as exc:
            raise FileSystemError(
                f"Could not set the permissions of {path} to {permissions:o}: {exc}"
            ) from exc

    # ------------------------------------------------------------------
    # Reading and writing
    # ------------------------------------------------------------------

    def read(self, file: File, recursive: bool = False) -> Union[bytes, Dict[str, File]]:
        """
        Read a file or directory.

        Returns the content of a file, or a mapping of path -> File for the
        children of a directory (archives are read as directories).
        """
        if self.is_directory(file) or file.is_phar():
            return self._read_directory(file, recursive)

        return self._read_file(file)

    def _read_file(self, file: File) -> bytes:
        path = self.get_absolute_path(file)
        try:
            return self.directory.read_bytes(path)
        except OSError as exc:
            raise FileSystemError(f"Could not read {path}: {exc}") from exc

    def _read_directory(self, directory: File, recursive: bool = False) -> Dict[str, File]:
        path = self.get_absolute_path(directory)
        if directory.is_phar() and not directory.has_phar_protocol(path):
            path = PHAR_PROTOCOL + path

        try:
            names = self.directory.list_children(path)
        except OSError as exc:
            raise FileSystemError(f"Could not read {path}: {exc}") from exc

        files: Dict[str, File] = {}
        for name in names:
            if name in (CURRENT_DIRECTORY, PARENT_DIRECTORY):
                continue

            child = directory.get_child(name)
            files[child.path] = child

            if recursive and child.is_directory():
                files.update(self._read_directory(child, True))

        return files

    def write(self, file: File, content: Union[str, bytes] = b"", append: bool = False) -> None:
        if isinstance(content, str):
            content = content.encode("utf-8")

        path = self.get_absolute_path(file)

        self.create(self.get_parent(file))

        try:
            self.directory.write_bytes(path, content, append)
        except OSError as exc:
            raise FileSystemError(f"Could not write {path}: {exc}") from exc

    def create(self, directory: File) -> None:
        """Create a directory and its missing parents."""
        if self.exists(directory):
            return

        path = self.get_absolute_path(directory)
        try:
            self.directory.make_directories(path)
        except OSError as exc:
            raise FileSystemError(f"Could not create {path}: {exc}") from exc

    def delete(self, file: File) -> None:
        if self.is_directory(file):
            self._delete_directory(file)
        else:
            self._delete_file(file)

    def _delete_file(self, file: File) -> None:
        path = self.get_absolute_path(file)
        try:
            self.directory.remove_file(path)
        except OSError as exc:
            raise FileSystemError(f"Could not delete {path}: {exc}") from exc

    def _delete_directory(self, directory: File) -> None:
        path = self.get_absolute_path(directory)
        try:
            names = self.directory.list_children(path)
        except OSError as exc:
            raise FileSystemError(
                f"Could not delete {path}: directory could not be read"
            ) from exc

        for name in names:
            self.delete(directory.get_child(name))

        try:
            self.directory.remove_directory(path)
        except OSError as exc:
            raise FileSystemError(f"Could not delete {path}: {exc}") from exc

    def copy(self, source: File, destination: File) -> None:
        """Copy a file or directory to another destination."""
        if self.is_directory(source):
            self._copy_directory(source, destination)
        else:
            self._copy_file(source, destination)

    def _copy_file(self, source: File, destination: File) -> None:
        self.create(destination.get_parent())

        source_path = source.get_absolute_path()
        destination_path = destination.get_absolute_path()
        if source_path == destination_path:
            return

        try:
            self.directory.copy_file(source_path, destination_path)
        except OSError as exc:
            raise FileSystemError(
                f"Could not copy {source_path} to {destination_path}: {exc}"
            ) from exc

    def _copy_directory(self, source: File, destination: File) -> None:
        source_path = source.get_absolute_path()
        try:
            names = self.directory.list_children(source_path)
        except OSError as exc:
            raise FileSystemError(f"Could not read {source_path}: {exc}") from exc

        if not names:
            # copying an empty directory copies nothing, create the destination
            self.create(destination)

        for name in names:
            self.copy(source.get_child(name), destination.get_child(name))

    def move(self, source: File, destination: File) -> None:
        """Move a file or directory by copying it and deleting the source."""
        if source.get_absolute_path() == destination.get_absolute_path():
            return

        logger.debug("Moving %s to %s", source, destination)

        self.copy(source, destination)
        self.delete(source)
