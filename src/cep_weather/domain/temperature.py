"""
cep_weather.domain.temperature

Celsius -> Fahrenheit/Kelvin conversion with one pinned rounding rule.

Responsibilities:
- Derive Fahrenheit and Kelvin from Celsius only (never independently sourced).
- Round every scale to one decimal place, half away from zero, on the shortest
  decimal representation of the float.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal

_ONE_DECIMAL = Decimal("0.1")


def round_one_decimal(value: float) -> float:
    # repr() gives the shortest round-tripping decimal, so 298.15 rounds as
    # written (298.2) instead of as its binary approximation (298.1499...).
    return float(Decimal(repr(value)).quantize(_ONE_DECIMAL, rounding=ROUND_HALF_UP))


def celsius_to_fahrenheit(celsius: float) -> float:
    return celsius * 1.8 + 32


def celsius_to_kelvin(celsius: float) -> float:
    return celsius + 273.15


@dataclass(frozen=True, slots=True)
class Temperatures:
    celsius: float
    fahrenheit: float
    kelvin: float


def convert(celsius: float) -> Temperatures:
    return Temperatures(
        celsius=round_one_decimal(celsius),
        fahrenheit=round_one_decimal(celsius_to_fahrenheit(celsius)),
        kelvin=round_one_decimal(celsius_to_kelvin(celsius)),
    )


# --- Module Notes -----------------------------------------------------------
# ROUND_HALF_UP in `decimal` rounds ties away from zero, so -0.25 -> -0.3.
