# openweathermap icon code -> emoji glyph, total over any input

from __future__ import annotations
from typing import Dict, Optional

DEFAULT_ICON = "🌤️"

ICONS: Dict[str, str] = {
    "01d": "☀️",   # clear sky
    "01n": "🌙",
    "02d": "⛅",   # few clouds
    "02n": "☁️",
    "03d": "☁️",   # scattered clouds
    "03n": "☁️",
    "04d": "☁️",   # broken clouds
    "04n": "☁️",
    "09d": "🌧️",  # shower rain
    "09n": "🌧️",
    "10d": "🌦️",  # rain
    "10n": "🌧️",
    "11d": "⛈️",  # thunderstorm
    "11n": "⛈️",
    "13d": "🌨️",  # snow
    "13n": "🌨️",
    "50d": "🌫️",  # mist
    "50n": "🌫️",
}


def resolve_icon(condition_code: Optional[str]) -> str:
    if not isinstance(condition_code, str):
        return DEFAULT_ICON
    return ICONS.get(condition_code.strip().lower(), DEFAULT_ICON)
