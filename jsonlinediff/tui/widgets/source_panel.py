"""
SourcePanel widget for displaying a JSON document with diff highlights.

The document is shown verbatim, one row per source line, with a line
number gutter. Lines referenced by a highlight get a background colour
for their difference kind.
"""

from __future__ import annotations

from typing import Any, Iterable

from rich.text import Text
from textual.containers import VerticalScroll
from textual.widgets import Static

from jsonlinediff.diff import DiffKind, Highlight

# Background colour per difference kind
HIGHLIGHT_STYLES: dict[DiffKind, str] = {
    DiffKind.ADDED: "on #1f4d2b",
    DiffKind.REMOVED: "on #5c1f1f",
    DiffKind.MODIFIED: "on #5c4a12",
}

GUTTER_STYLE = "dim"

# Lines kept visible above a line scrolled into view
SCROLL_CONTEXT_LINES = 3


def highlight_map(highlights: Iterable[Highlight]) -> dict[int, DiffKind]:
    """Map line numbers to the kind of the first highlight on that line."""
    by_line: dict[int, DiffKind] = {}
    for highlight in highlights:
        by_line.setdefault(highlight.line_number, highlight.kind)
    return by_line


def render_source(text: str, highlights: Iterable[Highlight] = ()) -> Text:
    """
    Render a document with a line number gutter and highlighted lines.

    Args:
        text: The raw document text.
        highlights: Highlights for this side of the comparison.

    Returns:
        A rich Text with one row per source line.

    Examples:
        >>> rendered = render_source('{\\n  "a": 1\\n}', [Highlight(2, DiffKind.ADDED)])
        >>> print(rendered.plain.splitlines()[1])  # '2   "a": 1'
    """
    lines = text.split("\n")
    by_line = highlight_map(highlights)
    width = len(str(len(lines)))

    rendered = Text(no_wrap=True)
    for number, line in enumerate(lines, start=1):
        if number > 1:
            rendered.append("\n")
        rendered.append(f"{number:>{width}} ", style=GUTTER_STYLE)
        kind = by_line.get(number)
        if kind is None:
            rendered.append(line)
        else:
            rendered.append(line, style=HIGHLIGHT_STYLES[kind])
    return rendered


class SourcePanel(VerticalScroll):
    """Scrollable view of one side of the comparison."""

    DEFAULT_CSS = """
    SourcePanel {
        height: 1fr;
        overflow-x: auto;
    }

    SourcePanel > Static {
        width: auto;
    }
    """

    def __init__(self, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self._text = ""
        self._highlights: list[Highlight] = []

    def compose(self):
        yield Static(id="source-content")

    def show_document(self, text: str, highlights: Iterable[Highlight] = ()) -> None:
        """Replace the displayed document and its highlights."""
        self._text = text
        self._highlights = list(highlights)
        self.query_one("#source-content", Static).update(
            render_source(self._text, self._highlights)
        )

    @property
    def highlight_count(self) -> int:
        """Number of distinct highlighted lines."""
        return len(highlight_map(self._highlights))

    def scroll_to_line(self, line_number: int) -> None:
        """Scroll so that a 1-based line is near the top of the panel."""
        self.scroll_to(y=max(0, line_number - 1 - SCROLL_CONTEXT_LINES), animate=False)
