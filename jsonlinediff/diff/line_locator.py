"""
Line locator for mapping key paths back onto JSON source text.

Instead of re-parsing with a position-tracking parser, the locator scans
the text line by line, tracking brace nesting depth, and looks for each
path segment as a quoted key label.

Known weaknesses (accepted heuristic costs):
    - A key label that appears as quoted text elsewhere on a line matches.
    - Duplicate key names at the same depth under different parents can
      resolve to the wrong parent.
    - Only the key label is searched; the value is never checked.
    - Braces inside string values still count toward nesting depth.

A miss is not an error: ``locate`` returns ``FALLBACK_LINE``, which cannot
be told apart from a genuine match on line 1.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence, Union

logger = logging.getLogger(__name__)

# Returned when no line matches the path
FALLBACK_LINE = 1


@dataclass(frozen=True)
class Searching:
    """No segment of the path has been matched yet."""

    target_depth: int = 0


@dataclass(frozen=True)
class Matching:
    """``progress`` segments matched, the last one at ``match_depth``."""

    progress: int
    match_depth: int


LocatorState = Union[Searching, Matching]


def _progress(state: LocatorState) -> int:
    return state.progress if isinstance(state, Matching) else 0


def _target_depth(state: LocatorState) -> int:
    if isinstance(state, Matching):
        return state.match_depth
    return state.target_depth


def advance(
    state: LocatorState,
    line: str,
    depth: int,
    path: Sequence[str],
) -> LocatorState:
    """
    Feed one line to the locator state machine.

    At most one segment is matched per line. The remaining segments are
    tried in order starting at the current progress, so a later segment may
    match before an earlier one.

    After a match attempt, an incomplete match is discarded when ``depth``
    has dropped below the depth at which it was last advanced.

    Args:
        state: Current state.
        line: The raw source line.
        depth: Nesting depth after counting this line's braces.
        path: The key path being located.

    Returns:
        The next state. A ``Matching`` state whose progress equals
        ``len(path)`` means the path was found on this line.
    """
    trimmed = line.strip()
    progress = _progress(state)

    for segment in path[progress:]:
        if f'"{segment}"' in trimmed:
            state = Matching(progress=progress + 1, match_depth=depth)
            if state.progress == len(path):
                return state
            break

    if depth < _target_depth(state) and _progress(state) < len(path):
        return Searching()
    return state


def is_complete(state: LocatorState, path: Sequence[str]) -> bool:
    """Check whether the state has matched every segment of ``path``."""
    return isinstance(state, Matching) and state.progress == len(path)


def brace_delta(line: str) -> int:
    """Return the count of opening minus closing braces on a line."""
    return line.count("{") - line.count("}")


def locate(source_text: str, path: Sequence[str]) -> int:
    """
    Find the 1-based line on which a key path's final key appears.

    Single-segment paths return the first line containing the quoted key,
    without any depth tracking. Longer paths go through the depth-aware
    state machine.

    Args:
        source_text: The raw JSON text.
        path: Key path segments from the root.

    Returns:
        The 1-based line number, or ``FALLBACK_LINE`` if not found.

    Examples:
        >>> text = '{\\n  "a": {\\n    "b": 1\\n  }\\n}'
        >>> locate(text, ["a", "b"])  # 3
    """
    lines = source_text.split("\n")

    if len(path) == 1:
        search_key = f'"{path[0]}"'
        for idx, line in enumerate(lines):
            if search_key in line.strip():
                return idx + 1

    if path:
        state: LocatorState = Searching()
        depth = 0
        for idx, line in enumerate(lines):
            depth += brace_delta(line)
            state = advance(state, line, depth, path)
            if is_complete(state, path):
                return idx + 1

    logger.debug("Path %s not found in source text, using line %d", list(path), FALLBACK_LINE)
    return FALLBACK_LINE


def line_content(source_text: str, line_number: int) -> str:
    """Return the literal text of a 1-based line, or "" if out of range."""
    lines = source_text.split("\n")
    if 1 <= line_number <= len(lines):
        return lines[line_number - 1]
    return ""
