"""
File system implementation for Microsoft Windows.

Paths are handled with `/` as separator (backslashes are converted by File).
A path is absolute when it has a drive prefix:

- `/`       the root of the current drive, also used for UNC paths
            (`\\\\server\\share` becomes `//server/share`)
- `C:/`     a drive letter
- `/C/`     a drive letter in the alternate notation

Only the uppercase letters A to Z are drive letters: `c:/tmp` is a relative
path.
"""

from __future__ import annotations

from typing import Optional, Tuple

from .file import DIRECTORY_SEPARATOR, File
from .filesystem import FileSystem

DRIVE_SEPARATOR = ":"


class WindowsFileSystem(FileSystem):

    def is_root_path(self, path: str) -> bool:
        drive = self.get_drive_prefix(path)

        return drive is not None and drive == path

    def is_absolute_path(self, path: str) -> bool:
        return path.startswith(DIRECTORY_SEPARATOR) or self.get_drive_prefix(path) is not None

    def split_root(self, path: str) -> Tuple[str, str]:
        drive = self.get_drive_prefix(path) or ""

        return drive, path[len(drive):]

    def get_parent(self, file: File) -> File:
        """
        Get the parent of the provided file.

        The parent of `C:/file.txt` is the drive root `C:/`.
        """
        parent = super().get_parent(file)

        if DIRECTORY_SEPARATOR not in parent.path:
            drive_parent = parent.path + DIRECTORY_SEPARATOR
            if self.get_drive_prefix(drive_parent) == drive_parent:
                return self.get_file(drive_parent)

        return parent

    def get_drive_prefix(self, path: str) -> Optional[str]:
        """
        Get the drive prefix of a path.

        Returns `/`, `X:/` or `/X/` for an absolute path, None otherwise.
        """
        if not path:
            return None

        if len(path) == 1:
            if path == DIRECTORY_SEPARATOR:
                return DIRECTORY_SEPARATOR

            return None

        if path[0] == DIRECTORY_SEPARATOR:
            if len(path) >= 3 and self.is_drive(path[1]) and path[2] == DIRECTORY_SEPARATOR:
                return path[:3]

            return DIRECTORY_SEPARATOR

        drive = path[0] + DRIVE_SEPARATOR + DIRECTORY_SEPARATOR
        if self.is_drive(path[0]) and path.startswith(drive):
            return drive

        return None

    @staticmethod
    def is_drive(character: str) -> bool:
        """Check if a character is a drive letter (A to Z, uppercase only)."""
        return "A" <= character <= "Z"
