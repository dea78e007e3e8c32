"""
Console utilities for the `pathbrowser` CLI.

This module centralizes **all** user-facing terminal output and uses Rich
for styling and tables. Typer command handlers should call these helpers
instead of printing directly.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Optional

import pandas as pd
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from ..core.file import File

# Single shared console instance
console = Console()

# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _path_str(path: Path | File | str) -> str:
    """Normalize a Path/File/str into a string for printing."""
    return str(path)

def _format_flag(value: bool) -> str:
    return "yes" if value else "no"

# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------

def setup_logging(verbose: bool) -> None:
    """Route library logging through Rich; DEBUG when verbose, WARNING otherwise."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )

# ---------------------------------------------------------------------------
# Generic helpers (errors)
# ---------------------------------------------------------------------------

def print_error(message: str) -> None:
    """Print a generic error message in bold red."""
    console.print(f"[bold red]{message}[/bold red]")

# ---------------------------------------------------------------------------
# Command: pathbrowser resolve / parent
# ---------------------------------------------------------------------------

def print_path_details(file: File) -> None:
    """
    Print a File with the properties computed by its file system:
    path, absolute path, root and archive information.
    """
    table = Table("Property", "Value", show_header=False)

    table.add_row("Path", file.path)
    table.add_row("Absolute path", file.get_absolute_path())
    table.add_row("Absolute", _format_flag(file.is_absolute()))
    table.add_row("Root", _format_flag(file.is_root_path()))
    table.add_row("Archive", file.archive.path if file.archive is not None else "-")

    console.print(table)

def print_parent(file: File, parent: File) -> None:
    console.print(f"Parent of '{_path_str(file)}': [bold]{_path_str(parent)}[/bold]")

# ---------------------------------------------------------------------------
# Command: pathbrowser find / public / relative
# ---------------------------------------------------------------------------

def print_found(name: str, file: File) -> None:
    """`find` / `public`: first match."""
    console.print(f"[green]{name}[/green] -> {file.get_absolute_path()}")

def print_not_found(name: str) -> None:
    """`find` / `public`: no include directory provides the name."""
    console.print(f"[bold yellow]Not found:[/bold yellow] {name}")

def print_files_table(name: str, files: Dict[str, File]) -> None:
    """`find --all`: every match in search order, the first one wins."""
    table = Table("#", "Path", "Absolute path")

    for index, file in enumerate(files.values(), start=1):
        table.add_row(str(index), file.path, file.get_absolute_path())

    console.print(f"[bold]Matches for '{name}'[/bold]")
    console.print(table)

def print_lookup_table(df: pd.DataFrame) -> None:
    """Print a lookup trace (one row per include directory)."""
    table = Table("Include directory", "Candidate", "Found", "Shadowed")

    for _, row in df.iterrows():
        table.add_row(
            str(row["root"]),
            str(row["path"]),
            _format_flag(bool(row["found"])),
            _format_flag(bool(row["shadowed"])),
        )

    console.print(table)

def print_relative(file: str, relative: File) -> None:
    console.print(f"{file} -> [bold]{_path_str(relative)}[/bold]")

def print_lookup_log_written(log_path: Path | str) -> None:
    console.print(f"Lookup log written to '{_path_str(log_path)}'.")

# ---------------------------------------------------------------------------
# Command: pathbrowser scan
# ---------------------------------------------------------------------------

def print_scan_table(root: File, df: pd.DataFrame) -> None:
    """Print the entries of a scanned directory with sizes and totals."""
    table = Table("Name", "Type", "Size (bytes)", "Modified")

    for _, row in df.iterrows():
        size = row["size_bytes"]
        table.add_row(
            str(row["file_name"]),
            "dir" if row["is_directory"] else (row["extension"] or "-"),
            "-" if pd.isna(size) else str(int(size)),
            pd.to_datetime(row["modified_time"], unit="s").strftime("%Y-%m-%d %H:%M"),
        )

    files = df.loc[~df["is_directory"]]

    console.print(f"[bold]Entries under: {_path_str(root)}[/bold]")
    console.print(table)
    console.print(
        f"Files: {len(files)} | Directories: {len(df) - len(files)} | "
        f"Total size: {files['size_bytes'].fillna(0).sum() / (1024 * 1024):.2f} MB"
    )

def print_scan_empty_directory(path: Path | File | str) -> None:
    """`scan`: empty directory (no files)."""
    console.print(f"No files found under '{_path_str(path)}'.")

# ---------------------------------------------------------------------------
# Command: pathbrowser version
# ---------------------------------------------------------------------------

def print_version(version: str, python_version: str, file_system: Optional[str]) -> None:
    """
    Print version information:

    - "pathbrowser {version}"
    - "Python {python_version}"
    - "File system: {file_system}" / "File system: unsupported"
    """
    console.print(f"[bold]pathbrowser {version}[/bold]")
    console.print(f"Python {python_version}")
    console.print(f"File system: {file_system or 'unsupported'}")
