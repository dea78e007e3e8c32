from __future__ import annotations

import platform
from typing import List, Optional

from .. import __version__
from ..core import logger, scanner
from ..core.browser import GenericFileBrowser
from ..core.errors import (
    NoFilesFoundError,
    PathBrowserError,
    UnsupportedPlatformError,
)
from ..core.filesystem import FileSystem
from ..core.system import System
from ..utils.env import build_browser_from_env
from ..utils.paths import resolve_root
from ..utils.console import (
    # generic
    print_error,
    setup_logging,
    # resolve / parent
    print_path_details,
    print_parent,
    # find / public / relative
    print_found,
    print_not_found,
    print_files_table,
    print_lookup_table,
    print_relative,
    print_lookup_log_written,
    # scan
    print_scan_table,
    print_scan_empty_directory,
    # version
    print_version,
)

import typer

app = typer.Typer(no_args_is_help=True, help="pathbrowser – cross-platform paths and include-path lookup.")

system = System()


def _get_file_system() -> FileSystem:
    try:
        return system.get_file_system()
    except UnsupportedPlatformError as exc:
        print_error(f"Error: {exc}")
        raise typer.Exit(code=1)


def _build_browser(
    include: Optional[List[str]],
    application: Optional[str],
    public_dir: Optional[str],
    public_path: Optional[str],
) -> GenericFileBrowser:
    """
    Build the browser from the command line options, or from the environment
    (.env / PATHBROWSER_* variables) when no directory option is given.
    """
    file_system = _get_file_system()

    if not (include or application or public_dir or public_path):
        return build_browser_from_env(file_system)

    browser = GenericFileBrowser()
    for path in include or []:
        browser.add_include_directory(resolve_root(path, file_system))

    if application:
        browser.set_application_directory(resolve_root(application, file_system))

    if public_dir:
        browser.set_public_directory(resolve_root(public_dir, file_system))

    browser.set_public_path(public_path)

    return browser


@app.callback()
def main(
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Show debug logging of path resolution and lookups.",
    ),
) -> None:
    """Cross-platform paths and include-path lookup."""
    setup_logging(verbose)


@app.command()
def version() -> None:
    """Display version information."""
    try:
        file_system: Optional[str] = type(system.get_file_system()).__name__
    except UnsupportedPlatformError:
        file_system = None

    print_version(__version__, platform.python_version(), file_system)


@app.command()
def resolve(
    path: str = typer.Argument(..., metavar="PATH", help="Path to normalize and resolve."),
) -> None:
    """Show the normalized and absolute form of PATH."""
    file_system = _get_file_system()

    try:
        print_path_details(file_system.get_file(path))
    except PathBrowserError as exc:
        print_error(f"Error: {exc}")
        raise typer.Exit(code=1)


@app.command()
def parent(
    path: str = typer.Argument(..., metavar="PATH", help="Path to get the parent of."),
) -> None:
    """Show the parent of PATH."""
    file_system = _get_file_system()

    try:
        file = file_system.get_file(path)
        print_parent(file, file.get_parent())
    except PathBrowserError as exc:
        print_error(f"Error: {exc}")
        raise typer.Exit(code=1)


@app.command()
def find(
    name: str = typer.Argument(..., metavar="NAME", help="Relative name to look up."),
    all_matches: bool = typer.Option(False, "--all", "-a", help="Show every match, not only the first."),
    trace: bool = typer.Option(False, "--trace", help="Show the candidate of every include directory."),
    log_root: Optional[str] = typer.Option(
        None,
        "--log-root",
        help="Write a CSV lookup log under LOG_ROOT/.pathbrowser/logs.",
    ),
    include: Optional[List[str]] = typer.Option(
        None, "--include", "-I", help="Include directory, in search order (repeatable)."
    ),
    application: Optional[str] = typer.Option(
        None, "--app", help="Application directory, searched before the include directories."
    ),
) -> None:
    """
    Look up NAME in the include directories.

    Exits with code 1 when no include directory provides NAME.
    """
    try:
        browser = _build_browser(include, application, None, None)

        if trace or log_root:
            records = scanner.trace_lookup(browser, name)
            if trace:
                print_lookup_table(scanner.lookup_to_frame(records))
            if log_root:
                print_lookup_log_written(logger.write_lookup_log(records, root_path=log_root))

        if all_matches:
            files = browser.get_files(name)
            if not files:
                print_not_found(name)
                raise typer.Exit(code=1)

            print_files_table(name, files)
            return

        file = browser.get_file(name)
    except PathBrowserError as exc:
        print_error(f"Error: {exc}")
        raise typer.Exit(code=1)

    if file is None:
        print_not_found(name)
        raise typer.Exit(code=1)

    print_found(name, file)


@app.command()
def public(
    name: str = typer.Argument(..., metavar="NAME", help="Public name to look up."),
    include: Optional[List[str]] = typer.Option(
        None, "--include", "-I", help="Include directory, in search order (repeatable)."
    ),
    application: Optional[str] = typer.Option(
        None, "--app", help="Application directory, searched before the include directories."
    ),
    public_dir: Optional[str] = typer.Option(None, "--public-dir", help="Public directory."),
    public_path: Optional[str] = typer.Option(
        None, "--public-path", help="Path of the public files inside the include directories."
    ),
) -> None:
    """Look up NAME in the public directory, then in the public path."""
    try:
        browser = _build_browser(include, application, public_dir, public_path)
        file = browser.get_public_file(name)
    except PathBrowserError as exc:
        print_error(f"Error: {exc}")
        raise typer.Exit(code=1)

    if file is None:
        print_not_found(name)
        raise typer.Exit(code=1)

    print_found(name, file)


@app.command()
def relative(
    path: str = typer.Argument(..., metavar="PATH", help="File to make relative."),
    check_public: bool = typer.Option(False, "--public", help="Check the public directory as well."),
    include: Optional[List[str]] = typer.Option(
        None, "--include", "-I", help="Include directory, in search order (repeatable)."
    ),
    application: Optional[str] = typer.Option(
        None, "--app", help="Application directory, searched before the include directories."
    ),
    public_dir: Optional[str] = typer.Option(None, "--public-dir", help="Public directory."),
) -> None:
    """Show PATH relative to the include directory containing it."""
    try:
        browser = _build_browser(include, application, public_dir, None)
        relative_file = browser.get_relative_file(path, check_public)
    except PathBrowserError as exc:
        print_error(f"Error: {exc}")
        raise typer.Exit(code=1)

    print_relative(path, relative_file)


@app.command()
def scan(
    path: str = typer.Argument(..., metavar="PATH", help="Directory to list (e.g. ~/Downloads)."),
    recursive: bool = typer.Option(False, "--recursive", "-r", help="Include subdirectories."),
) -> None:
    """List the entries of PATH with their size and modification time."""
    file_system = _get_file_system()

    try:
        root = resolve_root(path, file_system)
        df = scanner.scan_directory(root, recursive=recursive)
    except NoFilesFoundError:
        # Soft "empty directory" case
        print_scan_empty_directory(path)
        raise typer.Exit(code=0)
    except PathBrowserError as exc:
        print_error(f"Error: {exc}")
        raise typer.Exit(code=1)

    print_scan_table(root, df)
