"""
Export Mixin for writing difference records to CSV in the background.

Usage:
    class MyScreen(ExportMixin, Screen):
        def action_export_csv(self):
            self._run_export(self._result.records)
"""

from __future__ import annotations

from pathlib import Path

from textual import work

from jsonlinediff.diff import DEFAULT_OUTPUT_DIR, DifferenceRecord, default_export_filename, write_csv


class ExportMixin:
    """Mixin providing CSV export of difference records."""

    def _get_output_dir(self) -> str:
        """Get the output directory from app or use the default."""
        output_dir = getattr(self.app, "_output_dir", None)
        if not output_dir:
            output_dir = DEFAULT_OUTPUT_DIR
        return output_dir

    @work(thread=True)
    def _run_export(self, records: list[DifferenceRecord]) -> None:
        """Write records to a dated CSV file in the output directory.

        Args:
            records: Located difference records. An empty list still
                writes the header row.
        """
        path = Path(self._get_output_dir()) / default_export_filename()
        try:
            write_csv(records, path)
        except OSError as e:
            self.app.call_from_thread(self.app.notify, f"Export failed: {e}", severity="error")
            return

        plural = "" if len(records) == 1 else "s"
        self.app.call_from_thread(
            self.app.notify,
            f"Exported {len(records)} difference{plural} to {path}",
        )
