"""Screens for the JSON diff viewer."""

from jsonlinediff.tui.views.diff_screen import DiffScreen

__all__ = ["DiffScreen"]
