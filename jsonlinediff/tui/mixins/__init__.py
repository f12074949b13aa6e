"""Mixins for the TUI application."""

from jsonlinediff.tui.mixins.dual_pane import DualPaneMixin
from jsonlinediff.tui.mixins.export import ExportMixin
from jsonlinediff.tui.mixins.vim_navigation import VimNavigationMixin

__all__ = [
    "DualPaneMixin",
    "ExportMixin",
    "VimNavigationMixin",
]
