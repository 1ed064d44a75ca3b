"""
tests.test_temperature

Celsius conversion and the one-decimal, half-away-from-zero rounding rule.
"""

from __future__ import annotations

import pytest

from cep_weather.domain.temperature import (
    celsius_to_fahrenheit,
    celsius_to_kelvin,
    convert,
    round_one_decimal,
)


def test_simulated_reading_converts_to_known_values() -> None:
    t = convert(25.0)
    assert t.celsius == 25.0
    assert t.fahrenheit == 77.0
    # 298.15 rounds as written, not as its binary approximation.
    assert t.kelvin == 298.2


@pytest.mark.parametrize(
    ("celsius", "fahrenheit", "kelvin"),
    [
        (0.0, 32.0, 273.2),
        (100.0, 212.0, 373.2),
        (21.0, 69.8, 294.2),
        (-273.15, -459.7, 0.0),
    ],
)
def test_convert(celsius: float, fahrenheit: float, kelvin: float) -> None:
    t = convert(celsius)
    assert t.fahrenheit == fahrenheit
    assert t.kelvin == kelvin


def test_fahrenheit_and_celsius_meet_at_minus_forty() -> None:
    assert convert(-40.0).fahrenheit == -40.0


def test_raw_formulas() -> None:
    assert celsius_to_fahrenheit(10.0) == pytest.approx(50.0)
    assert celsius_to_kelvin(10.0) == pytest.approx(283.15)


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (0.25, 0.3),
        (0.35, 0.4),
        (-0.25, -0.3),
        (2.44, 2.4),
        (298.15, 298.2),
        (1.0, 1.0),
    ],
)
def test_round_half_away_from_zero(value: float, expected: float) -> None:
    assert round_one_decimal(value) == expected


def test_celsius_is_rounded_too() -> None:
    assert convert(18.46).celsius == 18.5
