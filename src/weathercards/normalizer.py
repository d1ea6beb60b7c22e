# transform the raw provider payload into typed value objects and check shape
# openweathermap /forecast: data["list"][i] = {"dt", "main": {"temp"}, "weather": [{"icon", "description"}]}

from __future__ import annotations
import logging
import math
from numbers import Real
from typing import Any, List, Optional

from .errors import MalformedPayload
from .icons import resolve_icon
from .models import CityLocation, DailyRecord, ForecastSet, RawSample
from .selector import select_daily_samples
from .timefmt import TimeZonePolicy, UTC, format_date
from .units import round_half_away

logger = logging.getLogger(__name__)

# datetime covers years 1..9999, keep a day of slack for utc offsets
MAX_TIMESTAMP = 253402214400  # 9999-12-31 00:00:00 UTC
MAX_UTC_SHIFT = 86399


def _number(value: Any, path: str) -> float:
    # bool is a subclass of int, reject it explicitly
    if isinstance(value, bool) or not isinstance(value, Real):
        raise MalformedPayload(f"expected a number at {path}, got {type(value).__name__}")
    try:
        number = float(value)
    except OverflowError:
        number = math.inf
    # json decoders accept NaN and Infinity
    if not math.isfinite(number):
        raise MalformedPayload(f"expected a finite number at {path}, got {value!r}")
    return number


def _field(obj: Any, key: str, path: str) -> Any:
    if not isinstance(obj, dict):
        raise MalformedPayload(f"expected an object at {path or 'payload'}, got {type(obj).__name__}")
    try:
        return obj[key]
    except KeyError:
        raise MalformedPayload(f"missing field {path}.{key}" if path else f"missing field {key}") from None


def _parse_sample(item: Any, path: str) -> RawSample:
    dt = _field(item, "dt", path)
    if isinstance(dt, bool) or not isinstance(dt, int):
        raise MalformedPayload(f"expected an integer at {path}.dt, got {type(dt).__name__}")
    if not 0 <= dt <= MAX_TIMESTAMP:
        raise MalformedPayload(f"timestamp out of range at {path}.dt: {dt}")

    temp = _number(_field(_field(item, "main", path), "temp", f"{path}.main"), f"{path}.main.temp")

    weather = _field(item, "weather", path)
    if not isinstance(weather, list) or not weather:
        raise MalformedPayload(f"expected a non-empty list at {path}.weather")
    condition = weather[0]
    icon = _field(condition, "icon", f"{path}.weather[0]")
    description = _field(condition, "description", f"{path}.weather[0]")
    if not isinstance(icon, str) or not isinstance(description, str):
        raise MalformedPayload(f"expected strings for icon/description at {path}.weather[0]")

    return RawSample(timestamp=dt, temperature=temp, condition_code=icon, description=description)


def parse_samples(payload: Any) -> List[RawSample]:
    items = _field(payload, "list", "")
    if not isinstance(items, list):
        raise MalformedPayload(f"expected a list at list, got {type(items).__name__}")
    return [_parse_sample(item, f"list[{i}]") for i, item in enumerate(items)]


def parse_city(payload: Any) -> Optional[CityLocation]:
    # no city block is fine, a broken one is not
    if not isinstance(payload, dict):
        raise MalformedPayload("expected an object at payload")
    city = payload.get("city")
    if city is None:
        return None
    if not isinstance(city, dict):
        raise MalformedPayload(f"expected an object at city, got {type(city).__name__}")
    coord = city.get("coord")
    if coord is None:
        return None

    name = city.get("name", "")
    if not isinstance(name, str):
        raise MalformedPayload("expected a string at city.name")
    return CityLocation(
        latitude=_number(_field(coord, "lat", "city.coord"), "city.coord.lat"),
        longitude=_number(_field(coord, "lon", "city.coord"), "city.coord.lon"),
        display_name=name,
    )


def city_timezone(payload: Any) -> Optional[TimeZonePolicy]:
    city = payload.get("city") if isinstance(payload, dict) else None
    if not isinstance(city, dict) or "timezone" not in city:
        return None
    shift = city["timezone"]
    if isinstance(shift, bool) or not isinstance(shift, int):
        raise MalformedPayload("expected an integer at city.timezone")
    if abs(shift) > MAX_UTC_SHIFT:
        raise MalformedPayload(f"utc shift out of range at city.timezone: {shift}")
    return TimeZonePolicy.fixed_offset(shift)


def to_daily_record(sample: RawSample, locale: str, policy: TimeZonePolicy, with_time: bool = False) -> DailyRecord:
    return DailyRecord(
        date=format_date(sample.timestamp, locale, policy, with_time=with_time),
        temperature_celsius=round_half_away(sample.temperature),
        description=sample.description,
        icon=resolve_icon(sample.condition_code),
        timestamp=sample.timestamp,
    )


def normalize(
    payload: Any,
    locale: str = "pt-PT",
    policy: Optional[TimeZonePolicy] = None,
    use_city_timezone: bool = False,
    with_time: bool = False,
) -> ForecastSet:
    """Turn a raw /forecast payload into a five day ForecastSet.

    Raises MalformedPayload when ``list`` or any per-item field is missing.
    The city block is optional and yields ``city=None`` when absent.
    """
    samples = parse_samples(payload)
    city = parse_city(payload)

    if use_city_timezone:
        policy = city_timezone(payload) or policy
    policy = policy or UTC

    selected = select_daily_samples(samples, policy)
    logger.debug("selected %d of %d samples (tz=%s)", len(selected), len(samples), policy.tz)

    days = tuple(to_daily_record(s, locale, policy, with_time) for s in selected)
    return ForecastSet(days=days, city=city)
