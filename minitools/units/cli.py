"""Command line for converting units between systems."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from minitools.units import interactive
from minitools.units.converters import (
    convert_length,
    convert_temperature,
    convert_weight,
)
from minitools.units.interactive import format_result

_CONVERTERS = {
    "temperature": convert_temperature,
    "length": convert_length,
    "weight": convert_weight,
}


def build_parser() -> argparse.ArgumentParser:
    """Return the argument parser for the converter."""
    parser = argparse.ArgumentParser(
        prog="unit_converter",
        description="Convert units between different systems",
    )
    commands = parser.add_subparsers(dest="command", metavar="COMMAND")
    commands.required = True
    for name in _CONVERTERS:
        sub = commands.add_parser(name, help=f"Convert a {name} value")
        sub.add_argument("--from", dest="from_unit", required=True)
        sub.add_argument("--to", dest="to_unit", required=True)
        sub.add_argument("--value", type=float, required=True)
    commands.add_parser("interactive", help="Choose units at prompts")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the converter; return the process exit status."""
    args = build_parser().parse_args(argv)
    try:
        if args.command == "interactive":
            interactive.run()
        else:
            result = _CONVERTERS[args.command](args.from_unit, args.to_unit, args.value)
            print(format_result(args.value, args.from_unit, result, args.to_unit))
    except (ValueError, EOFError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())