# read-only views over a ForecastSet for text cards, charts and map markers

from __future__ import annotations
import random
from typing import List, Tuple

from .models import CityLocation, ForecastSet
from .units import TemperatureUnit, display_temperature


def card_lines(forecast: ForecastSet, unit: TemperatureUnit | str = TemperatureUnit.CELSIUS) -> List[str]:
    unit = TemperatureUnit(unit)
    return [
        f"{day.date}  {day.icon}  {display_temperature(day.temperature_celsius, unit)}{unit.symbol}  {day.description}"
        for day in forecast.days
    ]


def chart_series(
    forecast: ForecastSet, unit: TemperatureUnit | str = TemperatureUnit.CELSIUS
) -> Tuple[List[str], List[int]]:
    # x-axis is insertion order, not a sort on the date label
    unit = TemperatureUnit(unit)
    labels = [day.date for day in forecast.days]
    values = [display_temperature(day.temperature_celsius, unit) for day in forecast.days]
    return labels, values


def marker_positions(
    location: CityLocation, count: int = 5, seed: int = 0, spread: float = 0.1
) -> List[Tuple[float, float]]:
    """Scatter ``count`` markers around the city centre.

    Each coordinate is offset by ``(u - 0.5) * spread`` with ``u`` drawn from a
    ``random.Random(seed)``, so the same seed always gives the same positions.
    """
    rng = random.Random(seed)
    positions = []
    for _ in range(count):
        lat = location.latitude + (rng.random() - 0.5) * spread
        lon = location.longitude + (rng.random() - 0.5) * spread
        positions.append((lat, lon))
    return positions
