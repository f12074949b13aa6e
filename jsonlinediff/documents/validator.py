"""
JSON document validation and loading.

Documents are validated before they reach the differencer. A document that
fails validation is never diffed; callers receive the error instead.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any

EMPTY_DOCUMENT_ERROR = "JSON cannot be empty"


class DocumentError(ValueError):
    """Raised when a document cannot be parsed as JSON."""


@dataclass(frozen=True)
class ValidationResult:
    """Result of validating a JSON text.

    Attributes:
        valid: Whether the text parsed successfully.
        error: The parse error message, or None when valid.
        formatted_json: The document pretty-printed with an indent of 2,
            or None when invalid.
    """

    valid: bool
    error: str | None = None
    formatted_json: str | None = None


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Unexpected token {name}")


def _decode(text: str) -> Any:
    """Parse strict JSON: NaN and Infinity are rejected."""
    return json.loads(text, parse_constant=_reject_constant)


def validate_json(text: str) -> ValidationResult:
    """
    Validate a JSON text.

    Args:
        text: The raw document text.

    Returns:
        A ValidationResult. Blank text is invalid.

    Examples:
        >>> validate_json('{"a": 1}').valid  # True
        >>> validate_json("").error  # "JSON cannot be empty"
    """
    if not text.strip():
        return ValidationResult(valid=False, error=EMPTY_DOCUMENT_ERROR)
    try:
        parsed = _decode(text)
    except ValueError as e:
        return ValidationResult(valid=False, error=str(e))
    return ValidationResult(
        valid=True,
        formatted_json=json.dumps(parsed, indent=2, ensure_ascii=False),
    )


def parse_document(text: str, allow_empty: bool = False) -> Any:
    """
    Parse a JSON text for comparison.

    Args:
        text: The raw document text.
        allow_empty: Return None for blank text instead of raising. An empty
            document contributes no keys to a comparison.

    Returns:
        The parsed JSON value.

    Raises:
        DocumentError: If the text is blank (and not allowed) or invalid.
    """
    if not text.strip():
        if allow_empty:
            return None
        raise DocumentError(EMPTY_DOCUMENT_ERROR)
    try:
        return _decode(text)
    except ValueError as e:
        raise DocumentError(str(e)) from e


def load_document(filename: str) -> str:
    """
    Read a document's raw text.

    Args:
        filename: Path to the JSON file.

    Returns:
        The file content decoded as UTF-8.

    Raises:
        FileNotFoundError: If the file does not exist.
    """
    with open(filename, "r", encoding="utf-8") as f:
        return f.read()
