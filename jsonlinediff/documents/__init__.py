"""
Document loading and validation.

Usage:
    from jsonlinediff.documents import load_document, validate_json

    text = load_document("left.json")
    result = validate_json(text)
    if not result.valid:
        print(result.error)
"""

from jsonlinediff.documents.validator import (
    EMPTY_DOCUMENT_ERROR,
    DocumentError,
    ValidationResult,
    load_document,
    parse_document,
    validate_json,
)

__all__ = [
    "EMPTY_DOCUMENT_ERROR",
    "DocumentError",
    "ValidationResult",
    "load_document",
    "parse_document",
    "validate_json",
]
