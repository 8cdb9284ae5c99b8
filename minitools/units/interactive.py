"""Prompt-driven unit conversion."""

import math
import sys
from decimal import Decimal

from minitools.units.converters import convert_length, convert_temperature, convert_weight

_CONVERTERS = {
    "Temperature": convert_temperature,
    "Length": convert_length,
    "Weight": convert_weight,
}


def _format_number(number):
    """Render a float plainly: no exponent, no trailing ``.0``."""
    if math.isnan(number):
        return "NaN"
    if math.isinf(number):
        return "inf" if number > 0 else "-inf"
    text = format(Decimal(repr(float(number))), "f")
    return text.rstrip("0").rstrip(".") if "." in text else text


def format_result(value, from_unit, result, to_unit):
    """Return the ``"<value> <from> = <result> <to>"`` line."""
    return f"{_format_number(value)} {from_unit} = {_format_number(result)} {to_unit}"


def _console_ask(prompt, choices=None):
    if not choices:
        return input(f"{prompt}: ")
    while True:
        print(prompt)
        for number, choice in enumerate(choices, start=1):
            print(f"  {number}) {choice}")
        answer = input("> ").strip()
        if answer.isdigit() and 1 <= int(answer) <= len(choices):
            return choices[int(answer) - 1]


def run(ask=None, out=None):
    """Ask for a category, units and value, then print and return the conversion.

    ``ask(prompt, choices=None)`` supplies each answer; it defaults to the console.
    """
    ask = ask or _console_ask
    out = out or sys.stdout
    category = ask("Select a category", choices=list(_CONVERTERS))
    from_unit = ask("From unit")
    to_unit = ask("To unit")
    value = float(ask("Value"))
    if category not in _CONVERTERS:
        raise ValueError("Unknown category.")
    result = _CONVERTERS[category](from_unit, to_unit, value)
    print(format_result(value, from_unit, result, to_unit), file=out)
    return result