"""
Dual Pane Mixin for left/right panel switching functionality.

Provides consistent panel switching behavior for the side-by-side view:
- action_switch_panel(): Toggle between left and right panels
- action_vim_left(): Switch focus to left panel (vim h key)
- action_vim_right(): Switch focus to right panel (vim l key)
- _update_panel_styles(): Update active/inactive CSS classes on panels
- _focus_active_widget(): Abstract method subclasses must implement

Usage:
    # IMPORTANT: DualPaneMixin MUST come before VimNavigationMixin in MRO
    # so that action_vim_left/right (panel switching) takes precedence.
    class MyDualPaneScreen(DualPaneMixin, VimNavigationMixin, Screen):
        BINDINGS = (
            VimNavigationMixin.VIM_BINDINGS
            + DualPaneMixin.DUAL_PANE_BINDINGS
            + [...]
        )
"""

from __future__ import annotations

from textual.binding import Binding
from textual.css.query import NoMatches


class DualPaneMixin:
    """Mixin for screens with left/right panel switching.

    Subclasses must implement _focus_active_widget() to define how focus
    moves within the active panel.
    """

    # Panel switching; combine with VimNavigationMixin.VIM_BINDINGS for j/k/g/G
    DUAL_PANE_BINDINGS = [
        Binding("h", "vim_left", "Left Panel", show=False),
        Binding("l", "vim_right", "Right Panel", show=False),
        Binding("tab", "switch_panel", "Switch Panel", show=True),
        Binding("escape", "quit", "Quit", show=False),
        Binding("q", "quit", "Quit", show=True),
    ]

    _active_panel: str = "left"
    """Currently active panel identifier ('left' or 'right')."""

    @property
    def is_left_active(self) -> bool:
        return self._active_panel == "left"

    def action_switch_panel(self) -> None:
        """Toggle between left and right panels."""
        self._active_panel = "right" if self._active_panel == "left" else "left"
        self._update_panel_styles()
        self._focus_active_widget()

    def action_vim_left(self) -> None:
        """Switch to left panel (vim h key)."""
        if self._active_panel != "left":
            self._active_panel = "left"
            self._update_panel_styles()
            self._focus_active_widget()

    def action_vim_right(self) -> None:
        """Switch to right panel (vim l key)."""
        if self._active_panel != "right":
            self._active_panel = "right"
            self._update_panel_styles()
            self._focus_active_widget()

    def action_quit(self) -> None:
        """Exit the application."""
        self.app.exit()

    def _update_panel_styles(self) -> None:
        """Update active/inactive CSS classes on #left-panel and #right-panel."""
        try:
            left = self.query_one("#left-panel")
            right = self.query_one("#right-panel")
        except NoMatches:
            return

        for panel, is_active in [(left, self.is_left_active), (right, not self.is_left_active)]:
            panel.set_class(is_active, "active")
            panel.set_class(not is_active, "inactive")

    def _focus_active_widget(self) -> None:
        """Focus the appropriate widget in the active panel."""
        raise NotImplementedError(
            f"{self.__class__.__name__} must implement _focus_active_widget()"
        )
