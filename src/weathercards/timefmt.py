# timestamp -> display date, with the timezone passed in explicitly
# nothing here reads the machine's local timezone or the process locale

from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone, tzinfo
from typing import Dict
from zoneinfo import ZoneInfo

# CLDR short date patterns, written as str.format templates
DATE_PATTERNS: Dict[str, str] = {
    "pt-pt": "{day:02d}/{month:02d}/{year}",
    "pt-br": "{day:02d}/{month:02d}/{year}",
    "en-us": "{month}/{day}/{year}",
    "en-gb": "{day:02d}/{month:02d}/{year}",
    "en-ca": "{year}-{month:02d}-{day:02d}",
    "fr-fr": "{day:02d}/{month:02d}/{year}",
    "es-es": "{day}/{month}/{year}",
    "it-it": "{day}/{month}/{year}",
    "de-de": "{day:02d}.{month:02d}.{year}",
    "nl-nl": "{day}-{month}-{year}",
    "ja-jp": "{year}/{month:02d}/{day:02d}",
    "zh-cn": "{year}/{month}/{day}",
}

# language-only fallbacks for regions missing above
LANGUAGE_DEFAULTS: Dict[str, str] = {
    "pt": "pt-pt",
    "en": "en-us",
    "fr": "fr-fr",
    "es": "es-es",
    "it": "it-it",
    "de": "de-de",
    "nl": "nl-nl",
    "ja": "ja-jp",
    "zh": "zh-cn",
}

ISO_PATTERN = "{year}-{month:02d}-{day:02d}"


@dataclass(frozen=True)
class TimeZonePolicy:
    """Explicit timezone used to derive calendar days and hours from epoch seconds."""

    tz: tzinfo

    @classmethod
    def utc(cls) -> "TimeZonePolicy":
        return cls(timezone.utc)

    @classmethod
    def named(cls, key: str) -> "TimeZonePolicy":
        # raises zoneinfo.ZoneInfoNotFoundError for unknown keys
        return cls(ZoneInfo(key))

    @classmethod
    def fixed_offset(cls, seconds: int) -> "TimeZonePolicy":
        # openweathermap reports city.timezone as a shift from UTC in seconds
        return cls(timezone(timedelta(seconds=seconds)))

    def localize(self, timestamp: int) -> datetime:
        return datetime.fromtimestamp(timestamp, tz=self.tz)


UTC = TimeZonePolicy.utc()


def date_pattern(locale: str) -> str:
    tag = (locale or "").replace("_", "-").lower()
    if tag in DATE_PATTERNS:
        return DATE_PATTERNS[tag]
    language = tag.split("-", 1)[0]
    fallback = LANGUAGE_DEFAULTS.get(language)
    return DATE_PATTERNS[fallback] if fallback else ISO_PATTERN


def format_date(
    timestamp: int,
    locale: str = "pt-PT",
    policy: TimeZonePolicy = UTC,
    with_time: bool = False,
) -> str:
    moment = policy.localize(timestamp)
    text = date_pattern(locale).format(day=moment.day, month=moment.month, year=moment.year)
    if with_time:
        text += f" {moment.hour:02d}:{moment.minute:02d}"
    return text
