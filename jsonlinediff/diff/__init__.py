"""
Structural JSON diff anchored to source lines.

Usage:
    from jsonlinediff.diff import compare_texts, export_csv

    result = compare_texts(left_text, right_text)
    csv_text = export_csv(result.records)
"""

from jsonlinediff.diff.assembly import (
    ComparisonResult,
    Highlight,
    assemble,
    compare_documents,
    compare_texts,
    summarize,
)
from jsonlinediff.diff.csv_export import (
    CSV_HEADERS,
    DEFAULT_OUTPUT_DIR,
    default_export_filename,
    escape_csv_value,
    export_csv,
    write_csv,
)
from jsonlinediff.diff.differencer import (
    DiffKind,
    DifferenceRecord,
    JsonKind,
    diff,
    json_kind,
    to_json,
)
from jsonlinediff.diff.line_locator import FALLBACK_LINE, line_content, locate

__all__ = [
    # Differencer
    "DiffKind",
    "DifferenceRecord",
    "JsonKind",
    "diff",
    "json_kind",
    "to_json",
    # Line locator
    "FALLBACK_LINE",
    "line_content",
    "locate",
    # Assembly
    "ComparisonResult",
    "Highlight",
    "assemble",
    "compare_documents",
    "compare_texts",
    "summarize",
    # Export
    "CSV_HEADERS",
    "DEFAULT_OUTPUT_DIR",
    "default_export_filename",
    "escape_csv_value",
    "export_csv",
    "write_csv",
]
