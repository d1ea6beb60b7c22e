# settings read once from the environment (.env supported for local runs)

from __future__ import annotations
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from .timefmt import TimeZonePolicy, UTC
from .units import TemperatureUnit

load_dotenv()  # in production, environment variables are injected by the deployment

DEFAULT_BASE_URL = "https://api.openweathermap.org/data/2.5"
DEFAULT_TIMEOUT = 10.0
DEFAULT_LOCALE = "pt-PT"

# sentinel for "use the offset the provider reports for the city"
CITY_TIMEZONE = "city"


@dataclass(frozen=True)
class Settings:
    api_key: Optional[str] = None
    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT
    locale: str = DEFAULT_LOCALE
    timezone: str = "utc"
    unit: TemperatureUnit = TemperatureUnit.CELSIUS

    @classmethod
    def from_env(cls) -> "Settings":
        raw_timeout = os.getenv("WEATHERCARDS_TIMEOUT", str(DEFAULT_TIMEOUT))
        try:
            timeout = float(raw_timeout)
        except ValueError as exc:
            raise ValueError(f"WEATHERCARDS_TIMEOUT must be a number (got {raw_timeout!r})") from exc
        if timeout <= 0:
            raise ValueError(f"WEATHERCARDS_TIMEOUT must be positive (got {timeout})")

        raw_unit = os.getenv("WEATHERCARDS_UNIT", TemperatureUnit.CELSIUS.value).lower()
        try:
            unit = TemperatureUnit(raw_unit)
        except ValueError as exc:
            raise ValueError(f"WEATHERCARDS_UNIT must be celsius or fahrenheit (got {raw_unit!r})") from exc

        return cls(
            api_key=os.getenv("OPENWEATHER_API_KEY") or None,
            base_url=os.getenv("OPENWEATHER_BASE_URL") or DEFAULT_BASE_URL,
            timeout=timeout,
            locale=os.getenv("WEATHERCARDS_LOCALE") or DEFAULT_LOCALE,
            timezone=os.getenv("WEATHERCARDS_TIMEZONE") or "utc",
            unit=unit,
        )

    @property
    def use_city_timezone(self) -> bool:
        return self.timezone.lower() == CITY_TIMEZONE

    def timezone_policy(self) -> TimeZonePolicy:
        # "city" starts from UTC and the normalizer swaps in the payload's offset
        key = self.timezone.lower()
        if key in ("utc", CITY_TIMEZONE):
            return UTC
        return TimeZonePolicy.named(self.timezone)
