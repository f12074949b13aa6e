"""
TUI JSON Diff Viewer.

A Textual-based terminal UI showing two JSON documents side by side with
their difference lines highlighted.

Usage:
    python -m jsonlinediff.tui.app left.json right.json

Components:
    - JsonDiffApp: Main application class
    - DiffScreen: Side-by-side diff view
    - SourcePanel: Highlighted document widget
"""
