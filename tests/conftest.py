"""Fixtures for pathbrowser tests."""

from typing import Dict, List, Set

import pytest

from pathbrowser.core.directory import Directory, LocalDirectory
from pathbrowser.core.models import FileStat
from pathbrowser.core.unix import UnixFileSystem
from pathbrowser.core.windows import WindowsFileSystem


def _parent(path: str) -> str:
    head, _, _ = path.rpartition("/")
    if head == "":
        return "/"
    if head.endswith(":"):
        return head + "/"

    return head


class MemoryDirectory(Directory):
    """In-memory storage with a fixed working directory."""

    def __init__(self, cwd: str) -> None:
        self.cwd = cwd
        self.files: Dict[str, bytes] = {}
        self.directories: Set[str] = set()
        self.modes: Dict[str, int] = {}

        self.make_directories(cwd)

    def add_file(self, path: str, content: bytes = b"") -> None:
        self.make_directories(_parent(path))
        self.files[path] = content

    def getcwd(self) -> str:
        return self.cwd

    def exists(self, path: str) -> bool:
        return path in self.files or path in self.directories

    def is_directory(self, path: str) -> bool:
        return path in self.directories

    def is_readable(self, path: str) -> bool:
        return self.exists(path)

    def is_writable(self, path: str) -> bool:
        return self.modes.get(path, 0o644) & 0o200 != 0

    def read_bytes(self, path: str) -> bytes:
        if path not in self.files:
            raise FileNotFoundError(path)

        return self.files[path]

    def write_bytes(self, path: str, data: bytes, append: bool = False) -> None:
        if path in self.directories:
            raise IsADirectoryError(path)

        if append:
            data = self.files.get(path, b"") + data

        self.files[path] = data

    def list_children(self, path: str) -> List[str]:
        if path not in self.directories:
            raise NotADirectoryError(path)

        names = []
        for entry in list(self.files) + list(self.directories):
            if entry != path and _parent(entry) == path:
                names.append(entry[len(path):].lstrip("/"))

        return sorted(names)

    def stat(self, path: str) -> FileStat:
        if path in self.files:
            return FileStat(size=len(self.files[path]), mtime=1700000000, permissions=0o100000 | self.modes.get(path, 0o644))
        if path in self.directories:
            return FileStat(size=4096, mtime=1700000000, permissions=0o040000 | self.modes.get(path, 0o755))

        raise FileNotFoundError(path)

    def chmod(self, path: str, permissions: int) -> None:
        self.modes[path] = permissions

    def make_directories(self, path: str) -> None:
        while path not in self.directories:
            self.directories.add(path)
            path = _parent(path)

    def remove_file(self, path: str) -> None:
        if path not in self.files:
            raise FileNotFoundError(path)

        del self.files[path]

    def remove_directory(self, path: str) -> None:
        if self.list_children(path):
            raise OSError(f"Directory not empty: {path}")

        self.directories.remove(path)

    def copy_file(self, source: str, destination: str) -> None:
        self.files[destination] = self.read_bytes(source)

    def temporary_file(self, prefix: str) -> str:
        index = len(self.files)
        while f"/tmp/{prefix}{index}" in self.files:
            index += 1

        path = f"/tmp/{prefix}{index}"
        self.add_file(path)

        return path


@pytest.fixture
def unix_directory():
    """In-memory Unix storage with /x as working directory."""
    return MemoryDirectory("/x")


@pytest.fixture
def unix_fs(unix_directory):
    return UnixFileSystem(unix_directory)


@pytest.fixture
def windows_directory():
    """In-memory Windows storage with C:/work as working directory."""
    return MemoryDirectory("C:/work")


@pytest.fixture
def windows_fs(windows_directory):
    return WindowsFileSystem(windows_directory)


@pytest.fixture
def local_fs():
    """Unix file system on the real disk, for tests using tmp_path."""
    return UnixFileSystem(LocalDirectory())


@pytest.fixture
def memory_directory():
    """Factory for in-memory storage with another working directory."""
    return MemoryDirectory
