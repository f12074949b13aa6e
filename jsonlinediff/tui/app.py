"""
Main Textual application for the JSON diff viewer.

Loads two JSON documents, compares them and shows the result side by side
with the difference lines highlighted.
"""

import argparse
import os
import sys

from textual.app import App
from textual.binding import Binding

from jsonlinediff.diff import DEFAULT_OUTPUT_DIR, ComparisonResult, compare_texts
from jsonlinediff.documents import load_document
from jsonlinediff.tui.views.diff_screen import DiffScreen


class JsonDiffApp(App):
    """A Textual app for comparing two JSON documents."""

    TITLE = "JSON Diff"

    CSS = """
    Screen {
        background: $surface;
    }

    DataTable > .datatable--header {
        background: $primary-darken-1;
        color: $text;
        text-style: bold;
    }

    DataTable > .datatable--cursor {
        background: $secondary;
        color: $text;
    }
    """

    BINDINGS = [
        Binding("q", "quit", "Quit", show=True),
    ]

    def __init__(
        self,
        left_path: str,
        right_path: str,
        output_dir: str | None = None,
        allow_empty: bool = False,
    ):
        """Initialize the app with the two documents to compare.

        Args:
            left_path: Path to the left (old) JSON document.
            right_path: Path to the right (new) JSON document.
            output_dir: Output directory for CSV exports.
            allow_empty: Treat blank files as empty documents.
        """
        super().__init__()
        self._left_path = left_path
        self._right_path = right_path
        self._output_dir = output_dir or DEFAULT_OUTPUT_DIR
        self._allow_empty = allow_empty

    def on_mount(self) -> None:
        """Load and compare the documents, then push the diff screen."""
        try:
            left_text = load_document(self._left_path)
            right_text = load_document(self._right_path)
        except (OSError, UnicodeDecodeError) as e:
            self.exit(message=f"Error loading file: {e}")
            return

        result: ComparisonResult = compare_texts(
            left_text, right_text, allow_empty=self._allow_empty
        )
        for side, error in result.errors.items():
            self.notify(f"{side.capitalize()} document is invalid: {error}", severity="error")

        left_name = os.path.basename(self._left_path)
        right_name = os.path.basename(self._right_path)
        self.title = f"JSON Diff - {left_name} ↔ {right_name}"
        self.push_screen(DiffScreen(left_name, right_name, left_text, right_text, result))


def main() -> None:
    """Parse arguments and run the application."""
    parser = argparse.ArgumentParser(
        description="Compare two JSON documents side by side in a terminal UI."
    )
    parser.add_argument("left", help="Left (old) JSON document")
    parser.add_argument("right", help="Right (new) JSON document")
    parser.add_argument(
        "-O",
        "--output-dir",
        default=DEFAULT_OUTPUT_DIR,
        help=f"Output directory for CSV exports (default: {DEFAULT_OUTPUT_DIR})",
    )
    parser.add_argument(
        "--allow-empty",
        action="store_true",
        help="Treat an empty file as an empty document instead of an error",
    )
    args = parser.parse_args()

    for path in (args.left, args.right):
        if not os.path.exists(path):
            print(f"Error: Path not found: {path}", file=sys.stderr)
            sys.exit(1)
        if not os.access(path, os.R_OK):
            print(f"Error: Permission denied: {path}", file=sys.stderr)
            sys.exit(1)

    app = JsonDiffApp(
        left_path=args.left,
        right_path=args.right,
        output_dir=args.output_dir,
        allow_empty=args.allow_empty,
    )
    app.run()


if __name__ == "__main__":
    main()
