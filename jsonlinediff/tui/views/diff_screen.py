"""
Diff Screen for side-by-side JSON comparison.

Displays the left and right documents with their difference lines
highlighted, and a table of difference records below them. Selecting a
record scrolls both documents to its lines.
"""

from __future__ import annotations

from rich.text import Text
from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.screen import Screen
from textual.widgets import DataTable, Footer, Header, Static

from jsonlinediff.diff import ComparisonResult, DiffKind, DifferenceRecord, summarize, to_json
from jsonlinediff.tui.mixins import DualPaneMixin, ExportMixin, VimNavigationMixin
from jsonlinediff.tui.widgets import SourcePanel

# Maximum characters of a value shown in the differences table
MAX_VALUE_PREVIEW = 40


def _preview(value: object) -> str:
    text = to_json(value)
    if len(text) <= MAX_VALUE_PREVIEW:
        return text
    return text[:MAX_VALUE_PREVIEW - 3] + "..."


def record_row(record: DifferenceRecord) -> tuple[str, str, str, str, str]:
    """Build the table cells (kind, key, left line, right line, change) for a record."""
    if record.kind is DiffKind.MODIFIED:
        return (
            record.kind.value,
            record.key,
            str(record.left_line),
            str(record.right_line),
            f"{_preview(record.old_value)} -> {_preview(record.new_value)}",
        )
    if record.kind is DiffKind.REMOVED:
        return (record.kind.value, record.key, str(record.line), "", _preview(record.value))
    return (record.kind.value, record.key, "", str(record.line), _preview(record.value))


def panel_status(name: str, error: str | None, highlight_count: int) -> str:
    """Build the header text for one side: file name, validity and highlight count."""
    if error:
        return f"{name}  [Invalid] {error}"
    plural = "" if highlight_count == 1 else "s"
    return f"{name}  [Valid] {highlight_count} line{plural} highlighted"


class DiffScreen(ExportMixin, DualPaneMixin, VimNavigationMixin, Screen):
    """Side-by-side JSON diff view."""

    CSS = """
    DiffScreen {
        layout: vertical;
    }

    #comparison-container {
        height: 2fr;
    }

    #left-panel, #right-panel {
        width: 50%;
        border: solid $primary-darken-2;
        padding: 0 1;
    }

    #left-panel.active, #right-panel.active {
        border: solid $accent;
    }

    .panel-header {
        height: 1;
        text-style: bold;
    }

    #differences {
        height: 1fr;
    }
    """

    BINDINGS = VimNavigationMixin.VIM_BINDINGS + DualPaneMixin.DUAL_PANE_BINDINGS + [
        Binding("d", "focus_differences", "Differences"),
        Binding("n", "next_difference", "Next Diff"),
        Binding("p", "previous_difference", "Prev Diff"),
        Binding("x", "export_csv", "Export CSV"),
    ]

    def __init__(
        self,
        left_name: str,
        right_name: str,
        left_text: str,
        right_text: str,
        result: ComparisonResult,
        name: str | None = None,
        id: str | None = None,
        classes: str | None = None,
    ) -> None:
        """Initialize the DiffScreen.

        Args:
            left_name: Display name of the left document.
            right_name: Display name of the right document.
            left_text: Raw text of the left document.
            right_text: Raw text of the right document.
            result: The comparison of the two documents.
            name: Optional name for the screen.
            id: Optional ID for the screen.
            classes: Optional CSS classes for the screen.
        """
        super().__init__(name=name, id=id, classes=classes)
        self._left_name = left_name
        self._right_name = right_name
        self._left_text = left_text
        self._right_text = right_text
        self._result = result
        self._current_index: int | None = None

    def compose(self) -> ComposeResult:
        """Compose the two document panels and the differences table."""
        yield Header()
        with Horizontal(id="comparison-container"):
            with Vertical(id="left-panel", classes="active"):
                yield Static(Text(self._left_name), id="left-status", classes="panel-header")
                yield SourcePanel(id="left-source")
            with Vertical(id="right-panel", classes="inactive"):
                yield Static(Text(self._right_name), id="right-status", classes="panel-header")
                yield SourcePanel(id="right-source")
        yield DataTable(id="differences", cursor_type="row", zebra_stripes=True)
        yield Footer()

    def on_mount(self) -> None:
        """Populate panels and the differences table."""
        left = self.query_one("#left-source", SourcePanel)
        right = self.query_one("#right-source", SourcePanel)
        left.show_document(self._left_text, self._result.left_highlights)
        right.show_document(self._right_text, self._result.right_highlights)

        errors = self._result.errors
        self.query_one("#left-status", Static).update(
            Text(panel_status(self._left_name, errors.get("left"), left.highlight_count))
        )
        self.query_one("#right-status", Static).update(
            Text(panel_status(self._right_name, errors.get("right"), right.highlight_count))
        )

        table = self.query_one("#differences", DataTable)
        table.add_columns("Kind", "Key", "Left", "Right", "Change")
        for record in self._result.records:
            table.add_row(*(Text(cell) for cell in record_row(record)))

        if self._result.available:
            summary = summarize(self._result.records)
            plural = "" if summary["total"] == 1 else "s"
            self.app.sub_title = f"{summary['total']} difference{plural} found"
        else:
            self.app.sub_title = "Diff unavailable"

        left.focus()

    def _focus_active_widget(self) -> None:
        panel_id = "#left-source" if self.is_left_active else "#right-source"
        self.query_one(panel_id, SourcePanel).focus()

    def action_focus_differences(self) -> None:
        """Move focus to the differences table so j/k move its cursor."""
        self.query_one("#differences", DataTable).focus()

    def _show_record(self, index: int) -> None:
        """Scroll both documents to the lines of the record at ``index``."""
        record = self._result.records[index]
        left = self.query_one("#left-source", SourcePanel)
        right = self.query_one("#right-source", SourcePanel)

        if record.kind is DiffKind.MODIFIED:
            left.scroll_to_line(record.left_line)
            right.scroll_to_line(record.right_line)
        elif record.kind is DiffKind.REMOVED:
            left.scroll_to_line(record.line)
        else:
            right.scroll_to_line(record.line)

    def on_data_table_row_highlighted(self, event: DataTable.RowHighlighted) -> None:
        """Follow the table cursor in the document panels."""
        if 0 <= event.cursor_row < len(self._result.records):
            self._current_index = event.cursor_row
            self._show_record(event.cursor_row)

    def _move_difference(self, step: int) -> None:
        records = self._result.records
        if not records:
            self.notify("No differences")
            return
        if self._current_index is None:
            index = 0 if step > 0 else len(records) - 1
        else:
            index = (self._current_index + step) % len(records)
        self.query_one("#differences", DataTable).move_cursor(row=index)
        self._current_index = index
        self._show_record(index)

    def action_next_difference(self) -> None:
        """Jump to the next difference."""
        self._move_difference(1)

    def action_previous_difference(self) -> None:
        """Jump to the previous difference."""
        self._move_difference(-1)

    def action_export_csv(self) -> None:
        """Export the differences as CSV into the output directory."""
        if not self._result.available:
            self.notify("Cannot export: a document is invalid", severity="error")
            return
        self._run_export(list(self._result.records))
