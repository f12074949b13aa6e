"""
JSON Line Diff.

Compares two JSON documents by key path and anchors every difference to a
line of the original source text.

Usage:
    python -m jsonlinediff.main diff left.json right.json
    python -m jsonlinediff.main view left.json right.json
"""

__version__ = "0.1.0"
