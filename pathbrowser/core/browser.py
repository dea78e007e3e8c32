"""
File browser for pathbrowser.

A file browser finds files in a structure of include directories, the way an
include path or a class path works:

- include directories are searched in order, the first match wins
- the application directory is always the first include directory
- the public directory is a separate channel for publicly served files,
  optionally backed by a public path inside the include directories

It also maps an absolute file back to its path relative to the include
directory it lives in.

Configure the browser completely before the first lookup; lookups only read
the configuration.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Dict, Iterator, Optional, Union

from .errors import FileSystemError, InvalidPathError, NotInSearchPathError
from .file import DIRECTORY_SEPARATOR, PHAR_PROTOCOL, File
from .filesystem import FileSystem

logger = logging.getLogger(__name__)


class FileBrowser(ABC):
    """Interface to find files in the file system structure."""

    @abstractmethod
    def get_file_system(self) -> FileSystem:
        ...

    @abstractmethod
    def get_application_directory(self) -> Optional[File]:
        ...

    @abstractmethod
    def get_public_directory(self) -> Optional[File]:
        ...

    @abstractmethod
    def get_include_directories(self) -> Dict[str, File]:
        """Include directories in search order, keyed by absolute path."""

    @abstractmethod
    def get_file(self, file: Union[str, File]) -> Optional[File]:
        """Get the first file in the include directories, None if not found."""

    @abstractmethod
    def get_files(self, file: Union[str, File]) -> Dict[str, File]:
        """Get all the matching files in the include directories."""

    @abstractmethod
    def get_public_file(self, file: str) -> Optional[File]:
        """Get a file from the public directory, None if not found."""

    @abstractmethod
    def get_relative_file(self, file: Union[str, File], public: bool = False) -> File:
        """Get the path of a file relative to its include directory."""


class GenericFileBrowser(FileBrowser):
    """
    File browser on an ordered set of include directories.

    Example:

        browser = GenericFileBrowser()
        browser.add_include_directory(fs.get_file("/srv/vendor"))
        browser.set_application_directory(fs.get_file("/srv/app"))

        browser.get_file("config/app.json")   # /srv/app/... before /srv/vendor/...
    """

    def __init__(self) -> None:
        self._application_directory: Optional[File] = None
        self._public_directory: Optional[File] = None
        self._public_path: Optional[str] = None
        self._include_directories: Dict[str, File] = {}

    def get_file_system(self) -> FileSystem:
        """
        Get the file system of the configured directories.

        Raises
        ------
        FileSystemError
            When no directory is configured at all.
        """
        if self._application_directory is not None:
            return self._application_directory.file_system

        if self._public_directory is not None:
            return self._public_directory.file_system

        for directory in self._include_directories.values():
            return directory.file_system

        raise FileSystemError("Could not get the file system: no directories set")

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------

    def add_include_directory(self, directory: File) -> None:
        """Add an include directory at the end of the search order."""
        for include_directory in self._include_directories.values():
            if type(include_directory.file_system) is not type(directory.file_system):
                logger.warning(
                    "Include directory %s uses %s while %s uses %s; relative "
                    "files are resolved with the first one",
                    directory,
                    type(directory.file_system).__name__,
                    include_directory,
                    type(include_directory.file_system).__name__,
                )
                break

        self._include_directories[directory.get_absolute_path()] = directory

    def remove_include_directory(self, directory: Union[str, File]) -> None:
        """Remove an include directory, by File or by absolute path."""
        if isinstance(directory, File):
            directory = directory.get_absolute_path()

        self._include_directories.pop(directory, None)

    def get_include_directories(self) -> Dict[str, File]:
        return dict(self._include_directories)

    def set_application_directory(self, directory: File) -> None:
        """Set the application directory, it becomes the first include directory."""
        self._application_directory = directory

        path = directory.get_absolute_path()

        self.remove_include_directory(path)

        include_directories = {path: directory}
        include_directories.update(self._include_directories)

        self._include_directories = include_directories

    def get_application_directory(self) -> Optional[File]:
        return self._application_directory

    def set_public_directory(self, directory: Optional[File]) -> None:
        self._public_directory = directory

    def get_public_directory(self) -> Optional[File]:
        return self._public_directory

    def set_public_path(self, path: Optional[str]) -> None:
        """Set the path of the public files inside the include directories."""
        if path is not None:
            path = path.strip(DIRECTORY_SEPARATOR) or None

        self._public_path = path

    def get_public_path(self) -> Optional[str]:
        return self._public_path

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def get_public_file(self, file: str) -> Optional[File]:
        file_name = str(file).lstrip(DIRECTORY_SEPARATOR)

        if self._public_directory is not None:
            public_file = self._public_directory.get_child(file_name)
            if public_file.exists():
                return public_file

        if self._public_path:
            return self.get_file(self._public_path + DIRECTORY_SEPARATOR + file_name)

        return None

    def get_file(self, file: Union[str, File]) -> Optional[File]:
        for match in self._lookup_file(file):
            return match

        logger.debug("%s not found in %d include directories", file, len(self._include_directories))

        return None

    def get_files(self, file: Union[str, File]) -> Dict[str, File]:
        files: Dict[str, File] = {}
        for match in self._lookup_file(file):
            files[match.path] = match

        return files

    def _lookup_file(self, file_name: Union[str, File]) -> Iterator[File]:
        """
        Yield the existing children for the provided name, one per include
        directory, in search order.

        Raises
        ------
        InvalidPathError
            When the provided file name is empty or not a string.
        """
        if not isinstance(file_name, File) and (not isinstance(file_name, str) or not file_name):
            raise InvalidPathError("Could not lookup file: provided file name is empty or invalid")

        for include_directory in list(self._include_directories.values()):
            file = include_directory.get_child(file_name)
            if not file.exists():
                continue

            logger.debug("Found %s in %s", file_name, include_directory)

            yield file

    def get_relative_file(self, file: Union[str, File], public: bool = False) -> File:
        """
        Get the relative file in the include directories for a given file.

        The file is resolved once, with the file system of the first include
        directory. The first include directory containing it wins.

        Parameters
        ----------
        file : str | File
            Path of a file to get the relative file from.
        public : bool
            Set to True to check the public directory as well.

        Raises
        ------
        NotInSearchPathError
            When the file is not located in one of the include directories.
        """
        file_system: Optional[FileSystem] = None
        absolute_file: Optional[str] = None

        for include_directory in self._include_directories.values():
            if absolute_file is None:
                file_system = include_directory.file_system
                absolute_file = self._resolve(file_system, file)

            relative_file = self._strip_directory(include_directory, absolute_file)
            if relative_file is not None:
                return file_system.get_file(relative_file)

        if public and self._public_directory is not None:
            if absolute_file is None:
                file_system = self.get_file_system()
                absolute_file = self._resolve(file_system, file)

            relative_file = self._strip_directory(self._public_directory, absolute_file)
            if relative_file is not None:
                return file_system.get_file(relative_file)

        raise NotInSearchPathError(f"{file} is not in the file system structure")

    @staticmethod
    def _resolve(file_system: FileSystem, file: Union[str, File]) -> str:
        absolute_file = file_system.get_file(file).get_absolute_path()
        if absolute_file.startswith(PHAR_PROTOCOL):
            absolute_file = absolute_file[len(PHAR_PROTOCOL):]

        return absolute_file

    @staticmethod
    def _strip_directory(directory: File, absolute_file: str) -> Optional[str]:
        prefix = directory.get_absolute_path()
        if prefix.startswith(PHAR_PROTOCOL):
            prefix = prefix[len(PHAR_PROTOCOL):]
        if not prefix.endswith(DIRECTORY_SEPARATOR):
            prefix += DIRECTORY_SEPARATOR

        if not absolute_file.startswith(prefix) or absolute_file == prefix:
            return None

        return absolute_file[len(prefix):]

