"""
File system implementation for Unix variants (Linux, macOS, BSD).

The only root is `/` and a path is absolute when it starts with it.
"""

from __future__ import annotations

from typing import Tuple

from .file import DIRECTORY_SEPARATOR, File
from .filesystem import FileSystem


class UnixFileSystem(FileSystem):

    def is_root_path(self, path: str) -> bool:
        return path == DIRECTORY_SEPARATOR

    def is_absolute_path(self, path: str) -> bool:
        return path.startswith(DIRECTORY_SEPARATOR)

    def split_root(self, path: str) -> Tuple[str, str]:
        return DIRECTORY_SEPARATOR, path

    def is_hidden(self, file: File) -> bool:
        """Dot files are hidden."""
        return file.get_name().startswith(".")
