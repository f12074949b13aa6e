"""Tests for document validation and loading."""

from __future__ import annotations

import json

import pytest

from jsonlinediff.documents import (
    EMPTY_DOCUMENT_ERROR,
    DocumentError,
    load_document,
    parse_document,
    validate_json,
)


class TestValidateJson:
    """Tests for validate_json."""

    def test_valid_object(self):
        """A valid document should be pretty-printed with indent 2."""
        result = validate_json('{"a":{"b":[1,2]}}')

        assert result.valid
        assert result.error is None
        assert result.formatted_json == json.dumps({"a": {"b": [1, 2]}}, indent=2)

    def test_valid_primitive(self):
        """Any JSON value is valid, not only objects."""
        assert validate_json("42").valid

    @pytest.mark.parametrize("text", ["", "   ", "\n\t"])
    def test_blank_is_invalid(self, text):
        """Blank text should be rejected with the empty-document message."""
        result = validate_json(text)

        assert not result.valid
        assert result.error == EMPTY_DOCUMENT_ERROR
        assert result.formatted_json is None

    def test_parse_error_has_position(self):
        """Parse errors should report line and column."""
        result = validate_json('{\n  "a": 1,\n}')

        assert not result.valid
        assert "line 3" in result.error

    @pytest.mark.parametrize("token", ["NaN", "Infinity", "-Infinity"])
    def test_non_json_constants_invalid(self, token):
        """NaN and Infinity are not JSON and should be rejected."""
        result = validate_json('{"a": ' + token + "}")

        assert not result.valid
        assert result.error == f"Unexpected token {token}"
        assert result.formatted_json is None

    def test_unicode_kept(self):
        """Formatted output should not escape non-ASCII text."""
        assert "café" in validate_json('{"a": "café"}').formatted_json


class TestParseDocument:
    """Tests for parse_document."""

    def test_parses(self):
        """Valid text should return the parsed value."""
        assert parse_document('{"a": 1}') == {"a": 1}

    def test_invalid_raises(self):
        """Invalid JSON should raise DocumentError."""
        with pytest.raises(DocumentError):
            parse_document("{oops}")

    def test_document_error_is_value_error(self):
        """DocumentError should be catchable as ValueError."""
        with pytest.raises(ValueError):
            parse_document("[")

    def test_nan_raises(self):
        """NaN should raise DocumentError rather than parse to a float."""
        with pytest.raises(DocumentError, match="Unexpected token NaN"):
            parse_document("[NaN]")

    def test_blank_raises_by_default(self):
        """Blank text should raise with the empty-document message."""
        with pytest.raises(DocumentError, match=EMPTY_DOCUMENT_ERROR):
            parse_document("  ")

    def test_blank_allowed(self):
        """With allow_empty, blank text parses to None."""
        assert parse_document("", allow_empty=True) is None


class TestLoadDocument:
    """Tests for load_document."""

    def test_reads_text(self, tmp_path):
        """The file text should be returned unchanged."""
        path = tmp_path / "doc.json"
        path.write_text('{\n  "a": "é"\n}', encoding="utf-8")

        assert load_document(str(path)) == '{\n  "a": "é"\n}'

    def test_missing_file(self, tmp_path):
        """A missing file should raise FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            load_document(str(tmp_path / "missing.json"))
