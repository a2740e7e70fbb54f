"""Unit conversions for dashboard temperatures."""

from __future__ import annotations

CELSIUS = "°C"
FAHRENHEIT = "°F"


def celsius_to_fahrenheit(celsius: float) -> float:
    """Convert degrees Celsius to degrees Fahrenheit."""
    return celsius * 9 / 5 + 32


def convert_temperature(celsius: float, imperial: bool) -> int:
    """Whole-degree temperature in the selected unit system."""
    if imperial:
        return round(celsius_to_fahrenheit(celsius))
    return round(celsius)


def temperature_unit(imperial: bool) -> str:
    return FAHRENHEIT if imperial else CELSIUS
