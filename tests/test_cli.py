"""
Tests for the pathbrowser command line.
"""

import pytest
from typer.testing import CliRunner

from pathbrowser import __version__
from pathbrowser.cli import app
from pathbrowser.utils import console as console_module

runner = CliRunner()


@pytest.fixture(autouse=True)
def wide_console(monkeypatch):
    """Keep Rich from wrapping long tmp paths."""
    monkeypatch.setattr(console_module.console, "width", 400)


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    for name in (
        "PATHBROWSER_INCLUDE_PATH",
        "PATHBROWSER_APPLICATION_DIR",
        "PATHBROWSER_PUBLIC_DIR",
        "PATHBROWSER_PUBLIC_PATH",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def roots(tmp_path):
    app_dir = tmp_path / "app"
    vendor_dir = tmp_path / "vendor"
    public_dir = tmp_path / "public"

    (app_dir / "config").mkdir(parents=True)
    (app_dir / "config" / "app.json").write_text("{}")
    (vendor_dir / "config").mkdir(parents=True)
    (vendor_dir / "config" / "app.json").write_text("{}")
    (vendor_dir / "public" / "css").mkdir(parents=True)
    (vendor_dir / "public" / "css" / "site.css").write_text("")
    public_dir.mkdir()
    (public_dir / "robots.txt").write_text("")

    return tmp_path


def test_version():
    result = runner.invoke(app, ["version"])

    assert result.exit_code == 0
    assert f"pathbrowser {__version__}" in result.output
    assert "UnixFileSystem" in result.output or "WindowsFileSystem" in result.output


def test_resolve(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)

    result = runner.invoke(app, ["resolve", "a/../b.txt"])

    assert result.exit_code == 0
    assert f"{tmp_path}/b.txt" in result.output


def test_resolve_archive(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)

    result = runner.invoke(app, ["resolve", "lib/tools.phar/run.txt"])

    assert result.exit_code == 0
    assert f"phar://{tmp_path}/lib/tools.phar/run.txt" in result.output


def test_parent():
    result = runner.invoke(app, ["parent", "/var/www/site"])

    assert result.exit_code == 0
    assert "/var/www" in result.output


def test_find_first_match(roots):
    result = runner.invoke(
        app, ["find", "config/app.json", "-I", str(roots / "vendor"), "--app", str(roots / "app")]
    )

    assert result.exit_code == 0
    assert f"{roots}/app/config/app.json" in result.output
    assert f"{roots}/vendor/config/app.json" not in result.output


def test_find_all(roots):
    result = runner.invoke(
        app, ["find", "config/app.json", "--all", "-I", str(roots / "app"), "-I", str(roots / "vendor")]
    )

    assert result.exit_code == 0
    assert f"{roots}/app/config/app.json" in result.output
    assert f"{roots}/vendor/config/app.json" in result.output


def test_find_not_found(roots):
    result = runner.invoke(app, ["find", "missing.txt", "-I", str(roots / "app")])

    assert result.exit_code == 1
    assert "Not found: missing.txt" in result.output


def test_find_with_missing_include_directory(roots):
    result = runner.invoke(app, ["find", "config/app.json", "-I", str(roots / "missing")])

    assert result.exit_code == 1
    assert "Path not found" in result.output


def test_find_trace_and_log(roots):
    result = runner.invoke(
        app,
        [
            "find", "config/app.json", "--trace", "--log-root", str(roots),
            "-I", str(roots / "app"), "-I", str(roots / "vendor"),
        ],
    )

    assert result.exit_code == 0
    assert "Lookup log written" in result.output
    assert len(list((roots / ".pathbrowser" / "logs").glob("lookup_log_*.csv"))) == 1


def test_find_from_environment(roots, monkeypatch):
    monkeypatch.setenv("PATHBROWSER_INCLUDE_PATH", str(roots / "vendor"))

    result = runner.invoke(app, ["find", "config/app.json"])

    assert result.exit_code == 0
    assert f"{roots}/vendor/config/app.json" in result.output


def test_public(roots):
    result = runner.invoke(
        app,
        [
            "public", "/css/site.css",
            "--public-dir", str(roots / "public"),
            "--public-path", "public",
            "-I", str(roots / "vendor"),
        ],
    )

    assert result.exit_code == 0
    assert f"{roots}/vendor/public/css/site.css" in result.output


def test_public_not_found(roots):
    result = runner.invoke(app, ["public", "missing.txt", "--public-dir", str(roots / "public")])

    assert result.exit_code == 1
    assert "Not found" in result.output


def test_relative(roots):
    result = runner.invoke(
        app, ["relative", str(roots / "vendor" / "config" / "app.json"), "-I", str(roots / "vendor")]
    )

    assert result.exit_code == 0
    assert "-> config/app.json" in result.output


def test_relative_to_public_directory(roots):
    path = str(roots / "public" / "robots.txt")

    result = runner.invoke(app, ["relative", path, "--public", "--public-dir", str(roots / "public")])

    assert result.exit_code == 0
    assert "-> robots.txt" in result.output


def test_relative_outside_include_directories(roots):
    result = runner.invoke(app, ["relative", "/etc/passwd", "-I", str(roots / "vendor")])

    assert result.exit_code == 1
    assert "is not in the file system structure" in result.output


def test_scan(roots):
    result = runner.invoke(app, ["scan", str(roots / "app"), "--recursive"])

    assert result.exit_code == 0
    assert "Entries under" in result.output
    assert "app.json" in result.output
    assert "Files: 1 | Directories: 1" in result.output


def test_scan_empty_directory(tmp_path):
    (tmp_path / "empty").mkdir()

    result = runner.invoke(app, ["scan", str(tmp_path / "empty")])

    assert result.exit_code == 0
    assert "No files found" in result.output


def test_scan_missing_directory(tmp_path):
    result = runner.invoke(app, ["scan", str(tmp_path / "missing")])

    assert result.exit_code == 1
    assert "Path not found" in result.output


def test_every_console_helper_is_used_by_a_command():
    import pathbrowser.cli as cli_module

    helpers = [name for name in vars(console_module) if name.startswith("print_")]

    assert helpers
    assert [name for name in helpers if not hasattr(cli_module, name)] == []
