# orchestration: fetch -> normalize for one city, and a thread pool for several
# each city is its own search, a failure in one never touches the others

from __future__ import annotations
import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import List, Optional, Sequence

from .client import OpenWeatherClient
from .config import Settings
from .errors import WeatherAPIError
from .models import ForecastSet
from .normalizer import normalize
from .timefmt import TimeZonePolicy

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CityForecast:
    # exactly one of forecast / error is set
    city: str
    forecast: Optional[ForecastSet] = None
    error: Optional[WeatherAPIError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


# single city path: fetch -> normalize
def forecast_for_city(
    client: OpenWeatherClient,
    city: str,
    locale: str = "pt-PT",
    policy: Optional[TimeZonePolicy] = None,
    use_city_timezone: bool = False,
    with_time: bool = False,
) -> ForecastSet:
    payload = client.get_city_forecast(city)
    return normalize(payload, locale=locale, policy=policy, use_city_timezone=use_city_timezone, with_time=with_time)


def _search(client: OpenWeatherClient, city: str, settings: Settings, with_time: bool) -> CityForecast:
    try:
        forecast = forecast_for_city(
            client,
            city,
            locale=settings.locale,
            policy=settings.timezone_policy(),
            use_city_timezone=settings.use_city_timezone,
            with_time=with_time,
        )
    except WeatherAPIError as exc:
        logger.info("forecast for %r failed: %s", city, exc)
        return CityForecast(city=city, error=exc)
    return CityForecast(city=city, forecast=forecast)


# reuse a single client, each worker has its own thread local http session
def forecast_all(
    cities: Sequence[str],
    settings: Settings,
    client: Optional[OpenWeatherClient] = None,
    max_workers: int = 3,
    with_time: bool = False,
) -> List[CityForecast]:
    if client is None:
        client = OpenWeatherClient(api_key=settings.api_key, base_url=settings.base_url, timeout=settings.timeout)

    with ThreadPoolExecutor(max_workers=max_workers) as pool:
        futures = [pool.submit(_search, client, city, settings, with_time) for city in cities]
        # results keep the order the cities were given in
        return [fut.result() for fut in futures]
