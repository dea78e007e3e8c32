"""
Environment helper utilities for pathbrowser.

Responsible for:
- Loading environment variables from a .env file.
- Reading the include path, application, public directory and public path
  settings in a single, centralized place.
- Assembling a GenericFileBrowser from those settings.
"""

from __future__ import annotations

import os
from typing import List, Mapping, Optional

from dotenv import load_dotenv

from ..core.browser import GenericFileBrowser
from ..core.errors import ConfigError
from ..core.filesystem import FileSystem

# Names of the env vars holding the browser configuration.
INCLUDE_PATH_ENV_VAR = "PATHBROWSER_INCLUDE_PATH"
APPLICATION_DIR_ENV_VAR = "PATHBROWSER_APPLICATION_DIR"
PUBLIC_DIR_ENV_VAR = "PATHBROWSER_PUBLIC_DIR"
PUBLIC_PATH_ENV_VAR = "PATHBROWSER_PUBLIC_PATH"

# ---------------------------------------------------------------------------
# .env loading
# ---------------------------------------------------------------------------

# Load from a .env in the current working directory or its parents.
# This is called once at import time.
DOTENV_LOADED = load_dotenv()

# ---------------------------------------------------------------------------
# Public helpers
# ---------------------------------------------------------------------------

def _get(name: str, environ: Optional[Mapping[str, str]]) -> Optional[str]:
    if environ is None:
        environ = os.environ

    value = environ.get(name)
    if value is None or not value.strip():
        return None

    return value.strip()


def get_include_path(environ: Optional[Mapping[str, str]] = None) -> List[str]:
    """
    Return the include directories from PATHBROWSER_INCLUDE_PATH.

    Directories are separated by os.pathsep (':' on Unix, ';' on Windows).
    An unset variable gives an empty list.

    Raises ConfigError when the variable is set but holds no directory.
    """
    value = _get(INCLUDE_PATH_ENV_VAR, environ)
    if value is None:
        return []

    directories = [part.strip() for part in value.split(os.pathsep) if part.strip()]
    if not directories:
        raise ConfigError(f"{INCLUDE_PATH_ENV_VAR} is set but contains no directories.")

    return directories


def get_application_dir(environ: Optional[Mapping[str, str]] = None) -> Optional[str]:
    return _get(APPLICATION_DIR_ENV_VAR, environ)


def get_public_dir(environ: Optional[Mapping[str, str]] = None) -> Optional[str]:
    return _get(PUBLIC_DIR_ENV_VAR, environ)


def get_public_path(environ: Optional[Mapping[str, str]] = None) -> Optional[str]:
    """
    Return the public path inside the include directories.

    Raises ConfigError when the configured path is absolute.
    """
    value = _get(PUBLIC_PATH_ENV_VAR, environ)
    if value is not None and (value.startswith("/") or value.startswith("\\")):
        raise ConfigError(
            f"{PUBLIC_PATH_ENV_VAR} must be relative to the include directories, got '{value}'."
        )

    return value


def build_browser_from_env(
    file_system: FileSystem,
    environ: Optional[Mapping[str, str]] = None,
) -> GenericFileBrowser:
    """
    Build a GenericFileBrowser from the environment configuration.

    Include directories keep the order of PATHBROWSER_INCLUDE_PATH; the
    application directory, when set, is moved in front of them.
    """
    browser = GenericFileBrowser()

    for path in get_include_path(environ):
        browser.add_include_directory(file_system.get_file(path))

    application_dir = get_application_dir(environ)
    if application_dir:
        browser.set_application_directory(file_system.get_file(application_dir))

    public_dir = get_public_dir(environ)
    if public_dir:
        browser.set_public_directory(file_system.get_file(public_dir))

    browser.set_public_path(get_public_path(environ))

    return browser
