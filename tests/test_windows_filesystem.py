"""
Tests for the Windows file system, with C:/work as working directory.
"""

import pytest

from pathbrowser.core.file import File
from pathbrowser.core.windows import WindowsFileSystem


@pytest.mark.parametrize("value, expected", [
    ("test/test.txt", False),
    ("test.txt", False),
    ("", False),
    ("/", True),
    ("C:/", True),
    ("/C/", True),
    ("/C", False),
    ("c:/", False),
    ("C:/test", False),
])
def test_is_root_path(windows_fs, value, expected):
    assert windows_fs.is_root_path(value) is expected


@pytest.mark.parametrize("value, expected", [
    ("test/test.txt", False),
    ("/var/test/test.txt", True),
    ("C:\\test\\test.txt", True),
    ("\\\\server\\test\\test.txt", True),
    ("/C/test.txt", True),
    ("phar://C:/tmp/test.txt", True),
    ("phar://test.phar/tmp/test.txt", False),
    ("c/tmp/x", False),
    ("c:/tmp", False),
])
def test_is_absolute(windows_fs, value, expected):
    assert windows_fs.is_absolute(File(windows_fs, value)) is expected


@pytest.mark.parametrize("value, expected", [
    ("C:/", "C:/"),
    ("/", "/"),
    ("/C", "/"),
    ("C:/tmp", "C:/"),
    ("/C/tmp", "/C/"),
    ("/tmp", "/"),
    ("c:/tmp", None),
    ("tmp", None),
])
def test_get_drive_prefix(windows_fs, value, expected):
    assert windows_fs.get_drive_prefix(value) == expected


@pytest.mark.parametrize("value, expected", [
    (".", "C:/work"),
    ("C:/", "C:/"),
    ("test/.././test/.//./test.txt", "C:/work/test/test.txt"),
    ("C:/work/test/.././test/.//./test.txt", "C:/work/test/test.txt"),
    ("C:\\tmp\\..\\..\\x.txt", "C:/x.txt"),
    ("/C/dir/../file.txt", "/C/file.txt"),
    ("\\\\server\\share\\file.txt", "/server/share/file.txt"),
    ("c/tmp/x", "C:/work/c/tmp/x"),
    ("phar://modules/test.phar", "phar://C:/work/modules/test.phar"),
    ("D:/modules/test.phar/file.txt", "phar://D:/modules/test.phar/file.txt"),
])
def test_get_absolute_path(windows_fs, value, expected):
    assert File(windows_fs, value).get_absolute_path() == expected


def test_working_directory_with_backslashes(memory_directory):
    file_system = WindowsFileSystem(memory_directory("C:\\Users\\me"))

    assert File(file_system, "docs").get_absolute_path() == "C:/Users/me/docs"


@pytest.mark.parametrize("value, expected", [
    ("test/test.txt", "test"),
    ("test.txt", "C:/work"),
    ("C:/test.txt", "C:/"),
    ("C:/", "C:/"),
    ("C:/folder/test.txt", "C:/folder"),
    ("/C/folder/test.txt", "/C/folder"),
])
def test_get_parent(windows_fs, value, expected):
    assert File(windows_fs, value).get_parent() == File(windows_fs, expected)


def test_trailing_separators_are_removed_except_for_roots(windows_fs):
    assert File(windows_fs, "C:\\tmp\\").path == "C:/tmp"
    assert File(windows_fs, "C:/").path == "C:/"
    assert File(windows_fs, "/C/").path == "/C/"


def test_disk_operations_use_the_drive_paths(windows_fs, windows_directory):
    File(windows_fs, "notes/today.txt").write("hello")

    assert windows_directory.files["C:/work/notes/today.txt"] == b"hello"
    assert File(windows_fs, "C:/work/notes").is_directory()
