"""
Tests for the environment configuration and root path resolution.
"""

import os

import pytest

from pathbrowser.core.errors import ConfigError, PathNotDirectoryError, PathNotFoundError
from pathbrowser.utils.env import (
    build_browser_from_env,
    get_application_dir,
    get_include_path,
    get_public_dir,
    get_public_path,
)
from pathbrowser.utils.paths import resolve_root


class TestEnv:

    def test_include_path(self):
        environ = {"PATHBROWSER_INCLUDE_PATH": f"/srv/app{os.pathsep} /srv/lib {os.pathsep}"}

        assert get_include_path(environ) == ["/srv/app", "/srv/lib"]

    @pytest.mark.parametrize("environ", [{}, {"PATHBROWSER_INCLUDE_PATH": "   "}])
    def test_include_path_unset(self, environ):
        assert get_include_path(environ) == []

    def test_include_path_without_directories_raises(self):
        with pytest.raises(ConfigError):
            get_include_path({"PATHBROWSER_INCLUDE_PATH": os.pathsep * 2})

    def test_directories(self):
        environ = {
            "PATHBROWSER_APPLICATION_DIR": " /srv/app ",
            "PATHBROWSER_PUBLIC_DIR": "/srv/public",
        }

        assert get_application_dir(environ) == "/srv/app"
        assert get_public_dir(environ) == "/srv/public"
        assert get_public_dir({}) is None

    def test_public_path(self):
        assert get_public_path({"PATHBROWSER_PUBLIC_PATH": "public"}) == "public"
        assert get_public_path({}) is None

    @pytest.mark.parametrize("value", ["/public", "\\public"])
    def test_absolute_public_path_raises(self, value):
        with pytest.raises(ConfigError):
            get_public_path({"PATHBROWSER_PUBLIC_PATH": value})

    def test_build_browser_from_env(self, unix_fs):
        environ = {
            "PATHBROWSER_INCLUDE_PATH": os.pathsep.join(["/srv/vendor", "/srv/lib"]),
            "PATHBROWSER_APPLICATION_DIR": "/srv/app",
            "PATHBROWSER_PUBLIC_DIR": "/srv/public",
            "PATHBROWSER_PUBLIC_PATH": "public/",
        }

        browser = build_browser_from_env(unix_fs, environ)

        assert list(browser.get_include_directories()) == ["/srv/app", "/srv/vendor", "/srv/lib"]
        assert browser.get_application_directory().path == "/srv/app"
        assert browser.get_public_directory().path == "/srv/public"
        assert browser.get_public_path() == "public"

    def test_build_empty_browser(self, unix_fs):
        browser = build_browser_from_env(unix_fs, {})

        assert browser.get_include_directories() == {}
        assert browser.get_public_directory() is None


class TestResolveRoot:

    def test_resolve_root(self, local_fs, tmp_path):
        (tmp_path / "lib").mkdir()

        root = resolve_root(f"{tmp_path}/lib/../lib/", local_fs)

        assert root.path == f"{tmp_path}/lib"

    def test_expands_home(self, local_fs, tmp_path, monkeypatch):
        monkeypatch.setenv("HOME", str(tmp_path))

        assert resolve_root("~", local_fs).path == str(tmp_path)

    def test_expands_variables(self, local_fs, tmp_path, monkeypatch):
        monkeypatch.setenv("PATHBROWSER_TEST_ROOT", str(tmp_path))

        assert resolve_root("$PATHBROWSER_TEST_ROOT", local_fs).path == str(tmp_path)

    def test_missing_raises(self, local_fs, tmp_path):
        with pytest.raises(PathNotFoundError):
            resolve_root(str(tmp_path / "missing"), local_fs)

    def test_file_raises(self, local_fs, tmp_path):
        (tmp_path / "a.txt").write_text("a")

        with pytest.raises(PathNotDirectoryError):
            resolve_root(str(tmp_path / "a.txt"), local_fs)
