# models keep data shapes explicit and immutable across the app
# the raw sample mirrors one provider row, the rest is what consumers read

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass(frozen=True)
class RawSample:
    # one 3-hour row of the provider payload, already type checked
    timestamp: int
    temperature: float
    condition_code: str
    description: str


@dataclass(frozen=True)
class DailyRecord:
    # display-ready summary for one calendar day
    # date and icon are resolved once, temperature is rounded once
    date: str
    temperature_celsius: int
    description: str
    icon: str
    timestamp: int


@dataclass(frozen=True)
class CityLocation:
    latitude: float
    longitude: float
    display_name: str


@dataclass(frozen=True)
class ForecastSet:
    # chronological, insertion order is the chart x-axis so never reorder it
    days: Tuple[DailyRecord, ...]
    city: Optional[CityLocation] = None

    def __len__(self) -> int:
        return len(self.days)

    def __iter__(self):
        return iter(self.days)
