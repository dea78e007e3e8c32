"""
Path utilities for pathbrowser.

This module provides helpers for resolving and validating the directories
given on the command line. All user-specified root paths should be passed
through resolve_root() before being used as include or public directory.
"""

from __future__ import annotations

import os
from pathlib import Path

from ..core.errors import PathNotDirectoryError, PathNotFoundError
from ..core.file import File
from ..core.filesystem import FileSystem

def resolve_root(path_str: str, file_system: FileSystem) -> File:
    """
    Resolve a user-provided path string into an absolute directory File.

    Steps:
    - Expand '~' and environment variables.
    - Resolve to an absolute path (dot segments folded, symlinks kept).
    - Ensure the path exists.
    - Ensure the path is a directory (not a file).

    Raises:
    - PathNotFoundError: if the resolved path does not exist.
    - PathNotDirectoryError: if the path exists but is not a directory.
    """
    expanded = str(Path(os.path.expandvars(path_str)).expanduser())

    root = file_system.get_file(file_system.get_file(expanded).get_absolute_path())

    if not root.exists():
        raise PathNotFoundError(f"Path not found: {root}")

    if not root.is_directory():
        raise PathNotDirectoryError(f"Provided path is not a directory: {root}")

    return root
