"""Tests for the line locator heuristic and its state machine."""

from __future__ import annotations

import json

import pytest

from jsonlinediff.diff import FALLBACK_LINE, line_content, locate
from jsonlinediff.diff.line_locator import (
    Matching,
    Searching,
    advance,
    brace_delta,
    is_complete,
)

NESTED_TEXT = """{
  "name": "service",
  "config": {
    "timeout": 30,
    "endpoints": {
      "primary": "https://a.example",
      "backup": null
    }
  },
  "owner": {
    "team": "core"
  }
}"""


def line_of(text: str, needle: str) -> int:
    """Return the 1-based line number of the first line containing needle."""
    for idx, line in enumerate(text.split("\n")):
        if needle in line:
            return idx + 1
    raise AssertionError(f"{needle!r} not in text")


class TestLocateUniqueKeys:
    """With unique key names, locate should find the declaring line."""

    @pytest.mark.parametrize(
        "path,needle",
        [
            (["name"], '"name"'),
            (["config"], '"config"'),
            (["config", "timeout"], '"timeout"'),
            (["config", "endpoints"], '"endpoints"'),
            (["config", "endpoints", "primary"], '"primary"'),
            (["config", "endpoints", "backup"], '"backup"'),
            (["owner", "team"], '"team"'),
        ],
    )
    def test_nested_text(self, path, needle):
        """Each key path should resolve to the line declaring its last key."""
        assert locate(NESTED_TEXT, path) == line_of(NESTED_TEXT, needle)

    def test_pretty_printed_document(self, nested_left):
        """Every key of a json.dumps document should be found on its own line."""
        text = json.dumps(nested_left, indent=4)

        assert locate(text, ["config", "endpoints", "backup"]) == line_of(text, '"backup"')
        assert locate(text, ["owner", "email"]) == line_of(text, '"email"')
        assert locate(text, ["tags"]) == line_of(text, '"tags"')

    def test_single_line_document(self):
        """Minified documents put every key on line 1."""
        assert locate('{"a":{"b":1}}', ["a", "b"]) == 1


class TestLocateFallback:
    """Misses return the fallback line rather than failing."""

    def test_missing_top_level_key(self):
        """An absent single-segment key should return line 1."""
        assert locate(NESTED_TEXT, ["missing"]) == FALLBACK_LINE

    def test_missing_nested_key(self):
        """An absent nested key should return line 1."""
        assert locate(NESTED_TEXT, ["config", "missing"]) == FALLBACK_LINE

    def test_empty_path(self):
        """An empty path should return line 1."""
        assert locate(NESTED_TEXT, []) == FALLBACK_LINE

    def test_empty_text(self):
        """Empty text should return line 1."""
        assert locate("", ["a", "b"]) == FALLBACK_LINE


class TestLocateDepthReset:
    """Partial matches are discarded when the scan leaves their object."""

    def test_reset_on_leaving_branch(self):
        """A parent label whose object closes before the child resets the match."""
        text = """{
  "a": {
    "x": 1
  },
  "b": {
    "a": 0,
    "c": 2
  },
  "other": {
    "c": 3
  }
}"""
        # "a" matches on line 2 at depth 2; depth drops to 1 on line 4 so the
        # match resets. The second "a" on line 6 then leads to "c" on line 7.
        assert locate(text, ["a", "c"]) == 7

    def test_no_reset_without_depth_drop(self):
        """A deeper key with the same label satisfies a shorter path (known weakness)."""
        text = """{
  "outer": {
    "first": {"x": 1},
    "second": {
      "target": 1
    }
  }
}"""
        assert locate(text, ["outer", "target"]) == 5

    def test_sibling_branches_with_same_key(self):
        """Duplicate names under sibling parents are separated by the depth reset."""
        text = """{
  "left": {
    "id": 1
  },
  "right": {
    "id": 2
  }
}"""
        # For "right.id" the "id" on line 3 starts a false partial match, which
        # is discarded when its object closes on line 4.
        assert locate(text, ["left", "id"]) == 3
        assert locate(text, ["right", "id"]) == 6


class TestSingleSegmentAsymmetry:
    """Top-level lookups skip depth tracking entirely."""

    def test_nested_occurrence_wins_when_first(self):
        """A nested key with the same name that appears first is returned."""
        text = """{
  "meta": {
    "id": "nested"
  },
  "id": "top"
}"""
        assert locate(text, ["id"]) == 3

    def test_substring_false_positive(self):
        """A quoted value equal to the key label matches first."""
        text = """{
  "label": "status",
  "status": "ok"
}"""
        assert locate(text, ["status"]) == 2


class TestStateMachine:
    """Tests for advance() transitions in isolation."""

    PATH = ["a", "b", "c"]

    def test_searching_to_matching(self):
        """A line with the first segment should start a match at its depth."""
        state = advance(Searching(), '"a": {', 2, self.PATH)
        assert state == Matching(progress=1, match_depth=2)

    def test_one_segment_per_line(self):
        """Only one segment is consumed per line."""
        state = advance(Searching(), '"a": {"b": {', 3, self.PATH)
        assert state == Matching(progress=1, match_depth=3)

    def test_later_segment_may_match_first(self):
        """Remaining segments are tried in order, not only the next one."""
        state = advance(Matching(progress=1, match_depth=2), '"c": 1', 2, self.PATH)
        assert state == Matching(progress=2, match_depth=2)

    def test_complete(self):
        """Matching the final segment completes the path."""
        state = advance(Matching(progress=2, match_depth=3), '"c": 1', 3, self.PATH)
        assert is_complete(state, self.PATH)

    def test_reset_on_depth_drop(self):
        """A depth below the match depth resets to searching."""
        state = advance(Matching(progress=1, match_depth=2), "},", 1, self.PATH)
        assert state == Searching()

    def test_no_reset_at_same_depth(self):
        """Unrelated lines at the match depth keep the partial match."""
        state = Matching(progress=1, match_depth=2)
        assert advance(state, '"x": 1,', 2, self.PATH) == state

    def test_match_on_closing_line_does_not_reset(self):
        """A match records the current depth, so the same line cannot reset it."""
        state = advance(Matching(progress=1, match_depth=3), '"b": 1 }', 2, self.PATH)
        assert state == Matching(progress=2, match_depth=2)

    def test_brace_delta(self):
        """Braces are counted per line, including inside strings."""
        assert brace_delta('"a": {') == 1
        assert brace_delta("}},") == -2
        assert brace_delta('"s": "{}{"') == 1


class TestLineContent:
    """Tests for line_content."""

    def test_in_range(self):
        """Lines are returned verbatim, including indentation."""
        assert line_content(NESTED_TEXT, 4) == '    "timeout": 30,'

    @pytest.mark.parametrize("line_number", [0, -1, 100])
    def test_out_of_range(self, line_number):
        """Out-of-range lines return an empty string."""
        assert line_content(NESTED_TEXT, line_number) == ""
