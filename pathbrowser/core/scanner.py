"""
Directory scanner for pathbrowser.

Responsibilities:

- Read a directory (optionally recursively) through the File API.
- For each entry, collect:
  - file_name
  - extension
  - full_path
  - size_bytes
  - modified_time
  - is_directory
- Trace a lookup over the include directories of a browser, one record per
  include directory, marking the matches that are shadowed by an earlier one.
- Return Pandas DataFrames with those columns.
"""

from __future__ import annotations

from typing import List, Union

import pandas as pd

from .browser import GenericFileBrowser
from .errors import NoFilesFoundError, PathNotDirectoryError, PathNotFoundError
from .file import File
from .models import LookupRecord

SCAN_COLUMNS = [
    "file_name",
    "extension",
    "full_path",
    "size_bytes",
    "modified_time",
    "is_directory",
]

LOOKUP_COLUMNS = ["name", "root", "path", "found", "shadowed"]


def scan_directory(directory: File, recursive: bool = False) -> pd.DataFrame:
    """
    Scan the given directory and return a DataFrame of its entries.

    Parameters
    ----------
    directory : File
        Directory to scan.
    recursive : bool
        True to include the entries of the subdirectories.

    Returns
    -------
    pd.DataFrame
        One row per entry, columns as in SCAN_COLUMNS. size_bytes is None for
        directories.

    Raises
    ------
    PathNotFoundError
        If the directory does not exist.
    PathNotDirectoryError
        If the path is not a directory.
    NoFilesFoundError
        If the directory contains nothing.
    """
    if not directory.exists():
        raise PathNotFoundError(f"Path not found: {directory}")

    if not directory.is_directory():
        raise PathNotDirectoryError(f"Provided path is not a directory: {directory}")

    entries = directory.read(recursive)

    rows = []
    for file in entries.values():
        is_directory = file.is_directory()

        rows.append(
            {
                "file_name": file.get_name(),
                "extension": file.get_extension(),
                "full_path": file.get_absolute_path(),
                "size_bytes": None if is_directory else file.get_size(),
                "modified_time": file.get_modification_time(),
                "is_directory": is_directory,
            }
        )

    if not rows:
        raise NoFilesFoundError(f"No files found under '{directory}'.")

    return pd.DataFrame(rows, columns=SCAN_COLUMNS)


def trace_lookup(browser: GenericFileBrowser, name: Union[str, File]) -> List[LookupRecord]:
    """
    Probe every include directory of the browser for a name.

    The first existing candidate is the one `browser.get_file` returns; the
    later existing candidates are marked as shadowed.
    """
    records: List[LookupRecord] = []
    found_before = False

    for root, include_directory in browser.get_include_directories().items():
        candidate = include_directory.get_child(name)
        found = candidate.exists()

        records.append(
            LookupRecord(
                name=str(name),
                root=root,
                path=candidate.path,
                found=found,
                shadowed=found and found_before,
            )
        )

        found_before = found_before or found

    return records


def lookup_to_frame(records: List[LookupRecord]) -> pd.DataFrame:
    """Convert lookup records into a DataFrame with LOOKUP_COLUMNS."""
    rows = [
        {
            "name": r.name,
            "root": r.root,
            "path": r.path,
            "found": r.found,
            "shadowed": r.shadowed,
        }
        for r in records
    ]

    return pd.DataFrame(rows, columns=LOOKUP_COLUMNS)
