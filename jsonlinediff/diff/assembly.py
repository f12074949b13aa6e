"""
Difference assembly: anchor difference records to source lines.

Takes the records produced by the structural differencer, locates each one
in the left and/or right source text, attaches the literal line content and
derives the per-side highlight lists consumed by the viewer.

Usage:
    from jsonlinediff.diff import compare_texts

    result = compare_texts(left_text, right_text)
    if result.available:
        for record in result.records:
            print(record.key, record.kind.value)
"""

from __future__ import annotations

import dataclasses
import logging
from dataclasses import dataclass, field
from typing import Any

from jsonlinediff.diff.differencer import DiffKind, DifferenceRecord, diff
from jsonlinediff.diff.line_locator import line_content, locate
from jsonlinediff.documents.validator import DocumentError, parse_document

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Highlight:
    """A line-level marker for one side of the comparison.

    Attributes:
        line_number: 1-based line in that side's source text.
        kind: The difference kind that produced this marker.
        is_old_line: True on the left side of a modified record, False on
            the right side, None for added/removed.
    """

    line_number: int
    kind: DiffKind
    is_old_line: bool | None = None

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {"lineNumber": self.line_number, "kind": self.kind.value}
        if self.is_old_line is not None:
            result["isOldLine"] = self.is_old_line
        return result


@dataclass
class ComparisonResult:
    """Outcome of comparing two documents.

    When either document failed validation ``available`` is False, the
    record and highlight lists are empty and ``errors`` maps the failing
    side ('left' or 'right') to its message.
    """

    records: list[DifferenceRecord] = field(default_factory=list)
    left_highlights: list[Highlight] = field(default_factory=list)
    right_highlights: list[Highlight] = field(default_factory=list)
    available: bool = True
    errors: dict[str, str] = field(default_factory=dict)

    @classmethod
    def unavailable(cls, errors: dict[str, str]) -> "ComparisonResult":
        """Build the neutral result used when diffing cannot run."""
        return cls(available=False, errors=dict(errors))

    @property
    def has_differences(self) -> bool:
        return bool(self.records)

    def to_dict(self) -> dict[str, Any]:
        return {
            "available": self.available,
            "errors": self.errors,
            "differences": [record.to_dict() for record in self.records],
            "leftHighlights": [h.to_dict() for h in self.left_highlights],
            "rightHighlights": [h.to_dict() for h in self.right_highlights],
        }


def assemble(
    records: list[DifferenceRecord],
    left_text: str,
    right_text: str,
) -> ComparisonResult:
    """
    Attach source lines to difference records and derive highlights.

    Added records are located in the right text, removed records in the
    left text and modified records in both.

    Args:
        records: Records from ``diff()``.
        left_text: Raw text of the left document.
        right_text: Raw text of the right document.

    Returns:
        A ComparisonResult with located records and both highlight lists.
    """
    result = ComparisonResult()

    for record in records:
        if record.kind is DiffKind.ADDED:
            line = locate(right_text, record.path)
            result.right_highlights.append(Highlight(line, record.kind))
            located = dataclasses.replace(
                record,
                line=line,
                right_line_content=line_content(right_text, line),
            )
        elif record.kind is DiffKind.REMOVED:
            line = locate(left_text, record.path)
            result.left_highlights.append(Highlight(line, record.kind))
            located = dataclasses.replace(
                record,
                line=line,
                left_line_content=line_content(left_text, line),
            )
        else:
            left_line = locate(left_text, record.path)
            right_line = locate(right_text, record.path)
            result.left_highlights.append(Highlight(left_line, record.kind, is_old_line=True))
            result.right_highlights.append(Highlight(right_line, record.kind, is_old_line=False))
            located = dataclasses.replace(
                record,
                left_line=left_line,
                right_line=right_line,
                left_line_content=line_content(left_text, left_line),
                right_line_content=line_content(right_text, right_line),
            )
        result.records.append(located)

    logger.debug(
        "Assembled %d records (%d left highlights, %d right highlights)",
        len(result.records),
        len(result.left_highlights),
        len(result.right_highlights),
    )
    return result


def compare_documents(
    left_value: Any,
    right_value: Any,
    left_text: str,
    right_text: str,
) -> ComparisonResult:
    """Diff two parsed documents and anchor the records to their texts."""
    return assemble(diff(left_value, right_value), left_text, right_text)


def compare_texts(
    left_text: str,
    right_text: str,
    allow_empty: bool = False,
) -> ComparisonResult:
    """
    Validate, parse and compare two JSON texts.

    If either side fails validation the differencer is not run and an
    unavailable result carrying the error messages is returned.

    Args:
        left_text: Raw text of the left document.
        right_text: Raw text of the right document.
        allow_empty: Treat blank text as an empty document instead of a
            validation error.

    Returns:
        The ComparisonResult for the pair.
    """
    errors: dict[str, str] = {}
    values: dict[str, Any] = {}

    for side, text in (("left", left_text), ("right", right_text)):
        try:
            values[side] = parse_document(text, allow_empty=allow_empty)
        except DocumentError as e:
            errors[side] = str(e)

    if errors:
        logger.debug("Comparison unavailable: %s", errors)
        return ComparisonResult.unavailable(errors)

    return compare_documents(values["left"], values["right"], left_text, right_text)


def summarize(records: list[DifferenceRecord]) -> dict[str, int]:
    """
    Count records by kind.

    Args:
        records: Difference records.

    Returns:
        Counts for each kind plus the total.

    Examples:
        >>> summary = summarize(result.records)
        >>> print(summary)  # {"added": 1, "removed": 0, "modified": 2, "total": 3}
    """
    summary = {kind.value: 0 for kind in DiffKind}
    for record in records:
        summary[record.kind.value] += 1
    summary["total"] = len(records)
    return summary
