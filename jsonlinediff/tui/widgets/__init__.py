"""TUI widgets for the JSON diff viewer."""

from jsonlinediff.tui.widgets.source_panel import (
    HIGHLIGHT_STYLES,
    SourcePanel,
    highlight_map,
    render_source,
)

__all__ = [
    "HIGHLIGHT_STYLES",
    "SourcePanel",
    "highlight_map",
    "render_source",
]
