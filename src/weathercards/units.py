# temperature conversion helpers used at normalization and render time
# every rounding in the package goes through round_half_away so results agree

from __future__ import annotations
import math
from enum import Enum


class TemperatureUnit(str, Enum):
    CELSIUS = "celsius"
    FAHRENHEIT = "fahrenheit"

    @property
    def symbol(self) -> str:
        return "°C" if self is TemperatureUnit.CELSIUS else "°F"


def round_half_away(value: float) -> int:
    # 20.5 -> 21, -20.5 -> -21 (python's round() would give 20 and -20)
    # compare the fraction instead of adding 0.5, which rounds 0.49999999999999994 up
    magnitude = abs(value)
    whole = math.floor(magnitude)
    if magnitude - whole >= 0.5:
        whole += 1
    return -whole if value < 0 else whole


def to_fahrenheit(celsius: float) -> int:
    return round_half_away(celsius * 9 / 5 + 32)


def to_celsius(fahrenheit: float) -> int:
    return round_half_away((fahrenheit - 32) * 5 / 9)


def display_temperature(celsius: int, unit: TemperatureUnit | str) -> int:
    # the base value is already rounded, only the converted result is rounded again
    unit = TemperatureUnit(unit)
    if unit is TemperatureUnit.FAHRENHEIT:
        return to_fahrenheit(celsius)
    return celsius
