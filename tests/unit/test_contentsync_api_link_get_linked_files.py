"""Unit tests for contentsync.api.link.get_linked_files."""

import pytest

from contentsync.api.link.FileReadError import FileReadError
from contentsync.api.link.get_linked_files import get_linked_files
from tests.conftest import MARKDOWN_WITH_LINKS


def test_returns_the_files_linked_in_markdown(tmp_path):
    doc = tmp_path / "file.md"
    doc.write_text(MARKDOWN_WITH_LINKS, encoding="utf-8")

    assert sorted(get_linked_files(doc)) == sorted(["./image.png", "./test.jpg", "./new-image.png", "./link.md"])


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileReadError, match="Cannot read"):
        get_linked_files(tmp_path / "missing.md")


def test_undecodable_file_raises(tmp_path):
    doc = tmp_path / "binary.md"
    doc.write_bytes(b"\xff\xfe\x00\x80")

    with pytest.raises(FileReadError) as exc_info:
        get_linked_files(doc)
    assert exc_info.value.path == str(doc)
