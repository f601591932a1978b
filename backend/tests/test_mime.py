"""Tests for extension based MIME classification."""

import pytest

from filegate.utils.mime import MIME_TYPES, classify, file_extension


@pytest.mark.parametrize(
    "name, expected",
    [
        ("photo.jpg", "image/jpeg"),
        ("photo.JPEG", "image/jpeg"),
        ("report.PDF", "application/pdf"),
        ("slides.pptx", "application/vnd.ms-powerpoint"),
        ("icon.svg", "image/svg+xml"),
        ("setup.exe", "application/x-msdownload"),
        ("run.sh", "application/x-sh"),
    ],
)
def test_known_extensions(name, expected):
    assert classify(name) == expected


def test_unknown_extension_is_uppercased():
    assert classify("archive.unknownext") == ".UNKNOWNEXT"


def test_no_extension_is_empty():
    assert classify("README") == ""


def test_only_last_suffix_counts():
    assert classify("backup.tar.gz") == ".GZ"
    assert classify("bundle.min.js") == "application/javascript"


def test_dotfile_is_all_extension():
    assert file_extension(".bashrc") == ".bashrc"
    assert classify(".bashrc") == ".BASHRC"


def test_trailing_dot():
    assert classify("weird.") == "."


def test_table_keys_are_lowercase_with_dot():
    for ext in MIME_TYPES:
        assert ext.startswith(".")
        assert ext == ext.lower()
