"""
Unit tests for reading URL lists from files.
"""

from pathlib import Path
from unittest.mock import patch

import pytest

from status_checker.errors import InputSourceMissingError, StatusCheckerError
from status_checker.source.file_source import read_url_lines


def test_read_url_lines_should_return_lines_in_order(tmp_path: Path) -> None:
    """
    Tests that lines are returned in order, without terminators and untrimmed.
    """
    # Arrange
    input_file = tmp_path / "urls.txt"
    input_file.write_text("https://a.example\r\n  https://b.example \n\nhttps://c.example", encoding="utf-8")

    # Act
    lines = read_url_lines(str(input_file))

    # Assert
    assert lines == ["https://a.example", "  https://b.example ", "", "https://c.example"]


def test_read_url_lines_should_strip_byte_order_mark(tmp_path: Path) -> None:
    """
    Tests that a UTF-8 BOM does not end up in the first URL.
    """
    # Arrange
    input_file = tmp_path / "urls.txt"
    input_file.write_bytes(b"\xef\xbb\xbfhttps://a.example\n")

    # Act
    lines = read_url_lines(str(input_file))

    # Assert
    assert lines == ["https://a.example"]


def test_read_url_lines_should_return_empty_list_for_empty_file(tmp_path: Path) -> None:
    # Arrange
    input_file = tmp_path / "urls.txt"
    input_file.touch()

    # Act & Assert
    assert read_url_lines(str(input_file)) == []


def test_read_url_lines_should_raise_error_for_missing_file(tmp_path: Path) -> None:
    """
    Tests that a missing file raises InputSourceMissingError with its path.
    """
    # Arrange
    missing = str(tmp_path / "missing.txt")

    # Act & Assert
    with pytest.raises(InputSourceMissingError, match="not found") as exc_info:
        read_url_lines(missing)
    assert exc_info.value.path == missing
    assert isinstance(exc_info.value, StatusCheckerError)


def test_read_url_lines_should_raise_error_for_directory(tmp_path: Path) -> None:
    # Act & Assert
    with pytest.raises(InputSourceMissingError):
        read_url_lines(str(tmp_path))


def test_read_url_lines_should_wrap_read_errors(tmp_path: Path) -> None:
    """
    Tests that an OS error while reading is reported as a missing source.
    """
    # Arrange
    input_file = tmp_path / "urls.txt"
    input_file.write_text("https://a.example\n", encoding="utf-8")

    # Act & Assert
    with (
        patch("pathlib.Path.read_text", side_effect=PermissionError("denied")),
        pytest.raises(InputSourceMissingError, match="could not be read: denied"),
    ):
        read_url_lines(str(input_file))
