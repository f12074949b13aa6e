"""
CSV export of difference records.

Output columns:
    line_number, left_key, right_key, left_value, right_value

Values are JSON-serialized before being embedded. Any key or value that
contains a comma, a double quote or a newline is wrapped in double quotes
with inner quotes doubled. Rows are joined with "\\n" and the payload has no
trailing newline.
"""

from __future__ import annotations

import logging
from datetime import date
from pathlib import Path

from jsonlinediff.diff.differencer import DiffKind, DifferenceRecord, to_json

logger = logging.getLogger(__name__)

CSV_HEADERS = ["line_number", "left_key", "right_key", "left_value", "right_value"]

EXPORT_FILENAME_PREFIX = "json-diff"

DEFAULT_OUTPUT_DIR = "json_diff_exports"


def escape_csv_value(value: str) -> str:
    """Quote a field if it contains a comma, a double quote or a newline."""
    if "," in value or '"' in value or "\n" in value:
        return '"' + value.replace('"', '""') + '"'
    return value


def _format_line(line: int | None) -> str:
    return str(line) if line else ""


def record_to_row(record: DifferenceRecord) -> list[str]:
    """
    Build the unescaped CSV cells for a record.

    Modified records report the left line (falling back to the right line)
    and fill both key and value columns. Removed records fill the left
    columns only, added records the right columns only.

    Args:
        record: A located difference record.

    Returns:
        The five cells in CSV_HEADERS order.
    """
    if record.kind is DiffKind.MODIFIED:
        return [
            _format_line(record.left_line) or _format_line(record.right_line),
            record.key,
            record.key,
            to_json(record.old_value),
            to_json(record.new_value),
        ]
    if record.kind is DiffKind.REMOVED:
        return [_format_line(record.line), record.key, "", to_json(record.value), ""]
    return [_format_line(record.line), "", record.key, "", to_json(record.value)]


def export_csv(records: list[DifferenceRecord]) -> str:
    """
    Serialize difference records to a CSV payload.

    An empty record list still produces the header row.

    Args:
        records: Located difference records.

    Returns:
        The CSV text.

    Examples:
        >>> print(export_csv([]))  # "line_number,left_key,right_key,left_value,right_value"
    """
    rows = [",".join(CSV_HEADERS)]
    for record in records:
        line_number, *cells = record_to_row(record)
        rows.append(",".join([line_number] + [escape_csv_value(cell) for cell in cells]))
    return "\n".join(rows)


def default_export_filename(today: date | None = None) -> str:
    """Return the default export filename, e.g. json-diff-2024-01-31.csv."""
    today = today or date.today()
    return f"{EXPORT_FILENAME_PREFIX}-{today.isoformat()}.csv"


def write_csv(records: list[DifferenceRecord], path: str | Path) -> Path:
    """
    Write the CSV payload for ``records`` to ``path``.

    Parent directories are created as needed.

    Args:
        records: Located difference records.
        path: Destination file path.

    Returns:
        The path that was written.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8", newline="") as f:
        f.write(export_csv(records))
    logger.debug("Exported %d records to %s", len(records), path)
    return path
