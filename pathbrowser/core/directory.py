"""
Directory layer for pathbrowser.

A Directory is the minimal byte / stat / listing surface the file systems
call into. Every method receives an absolute, `/`-separated path as computed
by a FileSystem; none of them know about include directories, archives or
dot segments.

LocalDirectory wraps the host operating system. Tests inject an in-memory
implementation to simulate another platform or to pin the working directory.

Errors are raised as plain OSError; the file system layer wraps them into
FileSystemError.
"""

from __future__ import annotations

import os
import shutil
import tempfile
from abc import ABC, abstractmethod
from pathlib import Path
from typing import List

from .models import FileStat


class Directory(ABC):
    """Byte level access to the storage behind a FileSystem."""

    @abstractmethod
    def getcwd(self) -> str:
        """Current working directory, used to anchor relative paths."""

    @abstractmethod
    def exists(self, path: str) -> bool:
        ...

    @abstractmethod
    def is_directory(self, path: str) -> bool:
        ...

    @abstractmethod
    def is_readable(self, path: str) -> bool:
        ...

    @abstractmethod
    def is_writable(self, path: str) -> bool:
        ...

    @abstractmethod
    def read_bytes(self, path: str) -> bytes:
        ...

    @abstractmethod
    def write_bytes(self, path: str, data: bytes, append: bool = False) -> None:
        ...

    @abstractmethod
    def list_children(self, path: str) -> List[str]:
        """Names (not paths) of the direct children, without '.' and '..'."""

    @abstractmethod
    def stat(self, path: str) -> FileStat:
        ...

    @abstractmethod
    def chmod(self, path: str, permissions: int) -> None:
        ...

    @abstractmethod
    def make_directories(self, path: str) -> None:
        ...

    @abstractmethod
    def remove_file(self, path: str) -> None:
        ...

    @abstractmethod
    def remove_directory(self, path: str) -> None:
        """Remove an empty directory."""

    @abstractmethod
    def copy_file(self, source: str, destination: str) -> None:
        ...

    @abstractmethod
    def temporary_file(self, prefix: str) -> str:
        """Create an empty temporary file and return its path."""


class LocalDirectory(Directory):
    """
    Directory backed by the host operating system.

    Uses pathlib for inspection, shutil for copies and tempfile for temporary
    files. Listings are sorted so directory reads are deterministic.
    """

    def getcwd(self) -> str:
        return os.getcwd()

    def exists(self, path: str) -> bool:
        return Path(path).exists()

    def is_directory(self, path: str) -> bool:
        return Path(path).is_dir()

    def is_readable(self, path: str) -> bool:
        return os.access(path, os.R_OK)

    def is_writable(self, path: str) -> bool:
        return os.access(path, os.W_OK)

    def read_bytes(self, path: str) -> bytes:
        return Path(path).read_bytes()

    def write_bytes(self, path: str, data: bytes, append: bool = False) -> None:
        mode = "ab" if append else "wb"
        with open(path, mode) as handle:
            handle.write(data)

    def list_children(self, path: str) -> List[str]:
        return sorted(os.listdir(path))

    def stat(self, path: str) -> FileStat:
        result = Path(path).stat()

        return FileStat(
            size=result.st_size,
            mtime=int(result.st_mtime),
            permissions=result.st_mode,
        )

    def chmod(self, path: str, permissions: int) -> None:
        os.chmod(path, permissions)

    def make_directories(self, path: str) -> None:
        Path(path).mkdir(mode=0o755, parents=True, exist_ok=True)

    def remove_file(self, path: str) -> None:
        Path(path).unlink()

    def remove_directory(self, path: str) -> None:
        Path(path).rmdir()

    def copy_file(self, source: str, destination: str) -> None:
        shutil.copyfile(source, destination)

    def temporary_file(self, prefix: str) -> str:
        handle, path = tempfile.mkstemp(prefix=prefix)
        os.close(handle)

        return path
