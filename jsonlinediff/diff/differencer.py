"""
Structural differencer for parsed JSON documents.

This module walks two parsed JSON values and produces a flat list of
difference records keyed by dotted paths.

Diff Kinds:
    - added: Key exists on the right but not on the left
    - removed: Key exists on the left but not on the right
    - modified: Key exists on both sides with different serialized values

Arrays are compared as opaque values: a changed array is reported once at
its own path, never per element.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from enum import Enum
from typing import Any


class JsonKind(Enum):
    """Kind of a parsed JSON value."""

    NULL = "null"
    BOOL = "bool"
    NUMBER = "number"
    STRING = "string"
    ARRAY = "array"
    OBJECT = "object"


class DiffKind(str, Enum):
    """Kind of a single difference record."""

    ADDED = "added"
    REMOVED = "removed"
    MODIFIED = "modified"


def json_kind(value: Any) -> JsonKind:
    """Classify a value produced by ``json.loads``.

    Args:
        value: Any parsed JSON value.

    Returns:
        The JsonKind of the value. ``bool`` is checked before numbers since
        it is a subclass of ``int``.
    """
    if value is None:
        return JsonKind.NULL
    if isinstance(value, bool):
        return JsonKind.BOOL
    if isinstance(value, (int, float)):
        return JsonKind.NUMBER
    if isinstance(value, str):
        return JsonKind.STRING
    if isinstance(value, list):
        return JsonKind.ARRAY
    if isinstance(value, dict):
        return JsonKind.OBJECT
    raise TypeError(f"Not a JSON value: {type(value).__name__}")


def _integral_floats_as_ints(value: Any) -> Any:
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, list):
        return [_integral_floats_as_ints(item) for item in value]
    if isinstance(value, dict):
        return {key: _integral_floats_as_ints(item) for key, item in value.items()}
    return value


def to_json(value: Any) -> str:
    """Serialize a value to compact JSON, keeping key insertion order.

    Whole-number floats are written as integers, so ``1.0`` and ``1e2``
    serialize the same as ``1`` and ``100``.
    """
    return json.dumps(
        _integral_floats_as_ints(value), separators=(",", ":"), ensure_ascii=False
    )


@dataclass(frozen=True)
class DifferenceRecord:
    """One difference between two JSON documents at a key path.

    Which fields are meaningful depends on ``kind``:
        - added/removed: ``value``, ``line``
        - modified: ``old_value``, ``new_value``, ``left_line``, ``right_line``

    Line fields stay ``None`` until the record is assembled against the
    source text.
    """

    key: str
    kind: DiffKind
    path: tuple[str, ...] = ()
    value: Any = None
    old_value: Any = None
    new_value: Any = None
    line: int | None = None
    left_line: int | None = None
    right_line: int | None = None
    left_line_content: str = ""
    right_line_content: str = ""

    @property
    def side(self) -> str | None:
        """Side the record is anchored to ('left', 'right' or None)."""
        if self.kind is DiffKind.ADDED:
            return "right"
        if self.kind is DiffKind.REMOVED:
            return "left"
        return None

    def to_dict(self) -> dict[str, Any]:
        """Render the record with only the fields relevant to its kind."""
        result: dict[str, Any] = {"key": self.key, "kind": self.kind.value}
        if self.kind is DiffKind.MODIFIED:
            result["oldValue"] = self.old_value
            result["newValue"] = self.new_value
            result["leftLine"] = self.left_line
            result["rightLine"] = self.right_line
            result["leftLineContent"] = self.left_line_content
            result["rightLineContent"] = self.right_line_content
        else:
            result["value"] = self.value
            result["line"] = self.line
            result["side"] = self.side
            if self.kind is DiffKind.ADDED:
                result["rightLineContent"] = self.right_line_content
            else:
                result["leftLineContent"] = self.left_line_content
        return result


def _own_keys(value: Any) -> list[str]:
    """Return the keys a value contributes to the key union."""
    if json_kind(value) is JsonKind.OBJECT:
        return list(value.keys())
    return []


def diff(left: Any, right: Any) -> list[DifferenceRecord]:
    """
    Compare two parsed JSON values and list their differences.

    Objects are walked depth-first in pre-order. Anything that is not an
    object (arrays, primitives, null, a missing document) contributes no
    keys, so comparing two non-object documents yields no records.

    Args:
        left: The left (old) parsed document.
        right: The right (new) parsed document.

    Returns:
        Difference records in key-union order: left keys first, then keys
        only present on the right.

    Examples:
        >>> records = diff({"a": 1}, {"a": 1, "b": 2})
        >>> print(records[0].key, records[0].kind.value)  # "b added"
    """
    records: list[DifferenceRecord] = []
    _compare_objects(left, right, [], records)
    return records


def _compare_objects(
    left: Any,
    right: Any,
    path: list[str],
    records: list[DifferenceRecord],
) -> None:
    """
    Compare the keys of two values and append records for each difference.

    Args:
        left: The left value at ``path``.
        right: The right value at ``path``.
        path: Key path of the current pair.
        records: The record list to populate.
    """
    left_keys = _own_keys(left)
    right_keys = _own_keys(right)
    all_keys = dict.fromkeys(left_keys + right_keys, True)
    left_present = set(left_keys)
    right_present = set(right_keys)

    for key in all_keys:
        key_path = path + [key]
        joined = ".".join(key_path)

        if key not in left_present:
            records.append(
                DifferenceRecord(
                    key=joined,
                    kind=DiffKind.ADDED,
                    path=tuple(key_path),
                    value=right[key],
                )
            )
        elif key not in right_present:
            records.append(
                DifferenceRecord(
                    key=joined,
                    kind=DiffKind.REMOVED,
                    path=tuple(key_path),
                    value=left[key],
                )
            )
        else:
            left_value = left[key]
            right_value = right[key]
            if (
                json_kind(left_value) is JsonKind.OBJECT
                and json_kind(right_value) is JsonKind.OBJECT
            ):
                _compare_objects(left_value, right_value, key_path, records)
            elif to_json(left_value) != to_json(right_value):
                records.append(
                    DifferenceRecord(
                        key=joined,
                        kind=DiffKind.MODIFIED,
                        path=tuple(key_path),
                        old_value=left_value,
                        new_value=right_value,
                    )
                )
