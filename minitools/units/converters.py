"""Conversions between temperature, length and weight units."""

from __future__ import annotations

from collections.abc import Callable, Mapping

_Conversion = Callable[[float], float]


class ConversionError(ValueError):
    """Raised when a pair of units cannot be converted."""


_TEMPERATURE: Mapping[tuple[str, str], _Conversion] = {
    ("c", "f"): lambda v: v * 1.8 + 32.0,
    ("f", "c"): lambda v: (v - 32.0) / 1.8,
    ("c", "k"): lambda v: v + 273.15,
    ("k", "c"): lambda v: v - 273.15,
    ("f", "k"): lambda v: (v + 459.67) * 5.0 / 9.0,
    ("k", "f"): lambda v: v * 9.0 / 5.0 - 459.67,
}

_LENGTH: Mapping[tuple[str, str], _Conversion] = {
    ("mm", "cm"): lambda v: v / 10.0,
    ("cm", "mm"): lambda v: v * 10.0,
    ("mm", "m"): lambda v: v / 1000.0,
    ("m", "mm"): lambda v: v * 1000.0,
    ("cm", "m"): lambda v: v / 100.0,
    ("m", "cm"): lambda v: v * 100.0,
}

_WEIGHT: Mapping[tuple[str, str], _Conversion] = {
    ("kg", "g"): lambda v: v * 1000.0,
    ("g", "kg"): lambda v: v / 1000.0,
    ("kg", "mg"): lambda v: v * 1000000.0,
    ("mg", "kg"): lambda v: v / 1000000.0,
    ("g", "mg"): lambda v: v * 1000.0,
    ("mg", "g"): lambda v: v / 1000.0,
}


def _convert(
    table: Mapping[tuple[str, str], _Conversion],
    kind: str,
    from_unit: str,
    to_unit: str,
    value: float,
) -> float:
    conversion = table.get((from_unit, to_unit))
    if conversion is not None:
        return conversion(float(value))
    if from_unit == to_unit:
        return float(value)
    raise ConversionError(f"Invalid {kind} unit")


def convert_temperature(from_unit: str, to_unit: str, value: float) -> float:
    """Convert between Celsius (c), Fahrenheit (f) and Kelvin (k)."""
    return _convert(_TEMPERATURE, "temperature", from_unit, to_unit, value)


def convert_length(from_unit: str, to_unit: str, value: float) -> float:
    """Convert between millimetres (mm), centimetres (cm) and metres (m)."""
    return _convert(_LENGTH, "length", from_unit, to_unit, value)


def convert_weight(from_unit: str, to_unit: str, value: float) -> float:
    """Convert between milligrams (mg), grams (g) and kilograms (kg)."""
    return _convert(_WEIGHT, "weight", from_unit, to_unit, value)