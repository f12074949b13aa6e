#!/usr/bin/env python3
"""
JSON Line Diff

A CLI tool for comparing two JSON documents key by key, with every
difference anchored to a line of the source text.

Usage:
    python -m jsonlinediff.main diff <left> <right>        Print differences
    python -m jsonlinediff.main export <left> <right>      Export differences as CSV
    python -m jsonlinediff.main validate <file>            Validate a JSON document
    python -m jsonlinediff.main view <left> <right>        Open the side-by-side viewer

Exit Codes:
    0 - No differences (or document valid)
    1 - Differences found (or document invalid)
    2 - Usage error, missing file, or a document failed validation
"""

import argparse
import json
import logging
import os
import sys

from jsonlinediff.diff import (
    DEFAULT_OUTPUT_DIR,
    DiffKind,
    compare_texts,
    default_export_filename,
    export_csv,
    summarize,
    to_json,
    write_csv,
)
from jsonlinediff.documents import load_document, validate_json

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_DIFFERENCES = 1
EXIT_ERROR = 2


def truncate(text: str, max_len: int = 50) -> str:
    """Truncate text with ellipsis."""
    if len(text) <= max_len:
        return text
    return text[:max_len - 3] + "..."


def read_file_or_exit(path: str) -> str:
    """Read a document, exiting with an error message if it is missing or unreadable."""
    if not os.path.exists(path):
        print(f"Error: File not found: {path}", file=sys.stderr)
        sys.exit(EXIT_ERROR)
    try:
        return load_document(path)
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error: Cannot read {path}: {e}", file=sys.stderr)
        sys.exit(EXIT_ERROR)


def compare_files(args):
    """Load both documents and compare them, exiting on validation errors."""
    left_text = read_file_or_exit(args.left)
    right_text = read_file_or_exit(args.right)
    logger.debug("Comparing %s with %s", args.left, args.right)

    result = compare_texts(left_text, right_text, allow_empty=args.allow_empty)
    if not result.available:
        for side, error in result.errors.items():
            print(f"Error: {side} document is invalid: {error}", file=sys.stderr)
        sys.exit(EXIT_ERROR)
    return result


def format_record(record) -> str:
    """Format a difference record as a single output line."""
    if record.kind is DiffKind.MODIFIED:
        location = f"L{record.left_line}/R{record.right_line}"
        change = f"{truncate(to_json(record.old_value), 30)} -> {truncate(to_json(record.new_value), 30)}"
    elif record.kind is DiffKind.ADDED:
        location = f"R{record.line}"
        change = truncate(to_json(record.value), 60)
    else:
        location = f"L{record.line}"
        change = truncate(to_json(record.value), 60)
    return f"{record.kind.value.upper():<9} {truncate(record.key, 40):<40} {location:<12} {change}"


# ============== Commands ==============

def cmd_diff(args):
    """Print the differences between two documents."""
    result = compare_files(args)

    if args.json:
        print(json.dumps(result.to_dict(), indent=2, ensure_ascii=False))
    else:
        header = f"{'KIND':<9} {'KEY':<40} {'LINE':<12} {'VALUE'}"
        print("-" * len(header))
        print(header)
        print("-" * len(header))
        for record in result.records:
            print(format_record(record))
        print("-" * len(header))

        summary = summarize(result.records)
        plural = "" if summary["total"] == 1 else "s"
        print(
            f"{summary['total']} difference{plural} found "
            f"({summary['added']} added, {summary['removed']} removed, "
            f"{summary['modified']} modified)"
        )

    sys.exit(EXIT_DIFFERENCES if result.has_differences else EXIT_OK)


def cmd_export(args):
    """Export the differences between two documents as CSV."""
    result = compare_files(args)

    if args.output == "-":
        print(export_csv(result.records))
        return

    output = args.output or default_export_filename()
    path = write_csv(result.records, output)
    plural = "" if len(result.records) == 1 else "s"
    print(f"Exported {len(result.records)} difference{plural} to {path}")


def cmd_validate(args):
    """Validate a single JSON document."""
    text = read_file_or_exit(args.file)
    result = validate_json(text)

    if not result.valid:
        print(f"Invalid: {result.error}")
        sys.exit(EXIT_DIFFERENCES)

    if args.format:
        print(result.formatted_json)
    else:
        print("Valid")


def cmd_view(args):
    """Open the side-by-side terminal viewer."""
    for path in (args.left, args.right):
        if not os.path.exists(path):
            print(f"Error: File not found: {path}", file=sys.stderr)
            sys.exit(EXIT_ERROR)

    from jsonlinediff.tui.app import JsonDiffApp

    app = JsonDiffApp(
        left_path=args.left,
        right_path=args.right,
        output_dir=args.output_dir,
        allow_empty=args.allow_empty,
    )
    app.run()


def add_pair_arguments(parser: argparse.ArgumentParser) -> None:
    """Add the left/right document arguments shared by pair commands."""
    parser.add_argument('left', help='Left (old) JSON document')
    parser.add_argument('right', help='Right (new) JSON document')
    parser.add_argument(
        '--allow-empty',
        action='store_true',
        help='Treat an empty file as an empty document instead of an error'
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="JSON Line Diff - compare JSON documents key by key",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__
    )
    parser.add_argument('-v', '--verbose', action='store_true', help='Enable debug logging')
    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    # Diff command
    diff_parser = subparsers.add_parser('diff', help='Print differences')
    add_pair_arguments(diff_parser)
    diff_parser.add_argument('--json', action='store_true', help='Output differences and highlights as JSON')
    diff_parser.set_defaults(func=cmd_diff)

    # Export command
    export_parser = subparsers.add_parser('export', help='Export differences as CSV')
    add_pair_arguments(export_parser)
    export_parser.add_argument(
        '-o', '--output',
        help="Output CSV file (default: json-diff-<date>.csv, '-' for stdout)"
    )
    export_parser.set_defaults(func=cmd_export)

    # Validate command
    validate_parser = subparsers.add_parser('validate', help='Validate a JSON document')
    validate_parser.add_argument('file', help='JSON document')
    validate_parser.add_argument('--format', action='store_true', help='Print the pretty-printed document')
    validate_parser.set_defaults(func=cmd_validate)

    # View command
    view_parser = subparsers.add_parser('view', help='Open the side-by-side viewer')
    add_pair_arguments(view_parser)
    view_parser.add_argument(
        '-O', '--output-dir',
        default=DEFAULT_OUTPUT_DIR,
        help=f"Output directory for CSV exports (default: {DEFAULT_OUTPUT_DIR})"
    )
    view_parser.set_defaults(func=cmd_view)

    return parser


def main():
    parser = build_parser()
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if not args.command:
        parser.print_help()
        sys.exit(EXIT_ERROR)

    args.func(args)


if __name__ == "__main__":
    main()
