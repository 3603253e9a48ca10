"""Tests for defdiff.config.load_utils module."""

import logging
from pathlib import Path

import pytest

from defdiff.config.load_utils import load_json_file, load_json_file_optional
from defdiff.core.errors import LoadError


class TestLoadJsonFile:
    """Tests for load_json_file function."""

    def test_load_valid_json_file(self, tmp_path: Path) -> None:
        json_file = tmp_path / "valid.json"
        json_file.write_text('{"key": "value", "number": 42}', encoding="utf-8")

        assert load_json_file(json_file) == {"key": "value", "number": 42}

    def test_load_empty_file_returns_empty_dict(self, tmp_path: Path) -> None:
        json_file = tmp_path / "empty.json"
        json_file.write_text("   \n\t  \n  ", encoding="utf-8")

        assert load_json_file(json_file) == {}

    def test_load_utf8_bom(self, tmp_path: Path) -> None:
        json_file = tmp_path / "bom.json"
        json_file.write_bytes(b'\xef\xbb\xbf{"a": 1}')

        assert load_json_file(json_file) == {"a": 1}

    def test_nonexistent_file_raises_load_error(self, tmp_path: Path) -> None:
        nonexistent = tmp_path / "does_not_exist.json"

        with pytest.raises(LoadError) as exc_info:
            load_json_file(nonexistent, error_context="config")

        assert "config: File not found" in str(exc_info.value)
        assert str(nonexistent) in str(exc_info.value)

    def test_non_object_json_raises_load_error(self, tmp_path: Path) -> None:
        json_file = tmp_path / "array.json"
        json_file.write_text("[1, 2, 3]", encoding="utf-8")

        with pytest.raises(LoadError, match="Expected object"):
            load_json_file(json_file)


class TestLoadJsonFileOptional:
    """Tests for load_json_file_optional function."""

    def test_missing_file_returns_none(self, tmp_path: Path) -> None:
        assert load_json_file_optional(tmp_path / "missing.json") is None

    def test_directory_returns_none(self, tmp_path: Path) -> None:
        assert load_json_file_optional(tmp_path) is None

    def test_invalid_json_still_raises(self, tmp_path: Path) -> None:
        json_file = tmp_path / "bad.json"
        json_file.write_text("{", encoding="utf-8")

        with pytest.raises(LoadError, match="Invalid JSON"):
            load_json_file_optional(json_file)

    def test_missing_file_logged_with_context(
        self, tmp_path: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.DEBUG, logger="defdiff"):
            load_json_file_optional(tmp_path / "defs.json", error_context="definitions")

        messages = [r.getMessage() for r in caplog.records]
        assert any(m.startswith("No definitions file at") for m in messages)
        assert not any("Config" in m for m in messages)

    def test_missing_file_without_context_logged_as_json(
        self, tmp_path: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.DEBUG, logger="defdiff"):
            load_json_file_optional(tmp_path / "missing.json")

        assert "No JSON file at" in caplog.text
