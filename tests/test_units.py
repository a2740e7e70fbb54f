from __future__ import annotations

import pytest

from solar_telemetry.units import celsius_to_fahrenheit, convert_temperature, temperature_unit


def test_celsius_to_fahrenheit() -> None:
    assert celsius_to_fahrenheit(0) == 32
    assert celsius_to_fahrenheit(100) == 212
    assert celsius_to_fahrenheit(-40) == pytest.approx(-40)


def test_convert_temperature_rounds_to_whole_degrees() -> None:
    assert convert_temperature(25.3, imperial=True) == 78
    assert convert_temperature(25.3, imperial=False) == 25


def test_temperature_unit() -> None:
    assert temperature_unit(True) == "°F"
    assert temperature_unit(False) == "°C"
