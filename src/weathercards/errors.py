# error taxonomy shared by the gateway, the normalizer and the cli
# every failure is one of these, so callers only need to catch WeatherAPIError

from __future__ import annotations
from typing import Optional


class WeatherAPIError(RuntimeError):
    # base type propagated from the fetch and normalize layers
    pass


class NotConfigured(WeatherAPIError):
    pass


class CityNotFound(WeatherAPIError):
    def __init__(self, city: str):
        super().__init__(f"City {city!r} not found")
        self.city = city


class Unauthorized(WeatherAPIError):
    pass


class HttpError(WeatherAPIError):
    def __init__(self, status: int, message: Optional[str] = None):
        super().__init__(message or f"HTTP {status}")
        self.status = status


class NetworkError(WeatherAPIError):
    pass


class MalformedPayload(WeatherAPIError):
    pass


def user_message(exc: BaseException) -> str:
    # text for the display layer, MalformedPayload gets the generic message
    if isinstance(exc, NotConfigured):
        return str(exc)
    if isinstance(exc, CityNotFound):
        return f'City "{exc.city}" not found. Please check the spelling and try again.'
    if isinstance(exc, Unauthorized):
        return "Invalid API key. Please check your OpenWeatherMap API key."
    if isinstance(exc, HttpError):
        return f"Failed to fetch forecast data. Status: {exc.status}"
    if isinstance(exc, NetworkError):
        return "Network error. Please check your internet connection."
    return "An unexpected error occurred. Please try again."
