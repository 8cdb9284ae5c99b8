"""Command line for sorting files by extension or date."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from minitools.organizer.organizer import organize_files
from minitools.organizer.sorter import SortMode


def build_parser() -> argparse.ArgumentParser:
    """Return the argument parser for the organiser."""
    parser = argparse.ArgumentParser(
        prog="file-organizer",
        description="Sorts files by extension or date",
    )
    parser.add_argument("-p", "--path", default=".")
    parser.add_argument(
        "-b",
        "--by",
        choices=[mode.value for mode in SortMode],
        default=SortMode.EXTENSION.value,
    )
    parser.add_argument("--dry-run", action="store_true", default=False)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the organiser; return the process exit status."""
    args = build_parser().parse_args(argv)
    try:
        organize_files(args.path, SortMode(args.by), args.dry_run)
    except OSError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())