# picks one representative 3-hour sample per calendar day

from __future__ import annotations
from datetime import date, time
from typing import Dict, List, Sequence, Tuple

from .models import RawSample
from .timefmt import TimeZonePolicy, UTC

DAYS = 5
SAMPLES_PER_DAY = 8            # 24h / 3h cadence
NOON_WINDOW = (11, 13)         # 11:00 to 13:00 local, both ends inclusive


def noon_samples(
    samples: Sequence[RawSample],
    policy: TimeZonePolicy = UTC,
    window: Tuple[int, int] = NOON_WINDOW,
) -> List[RawSample]:
    # first sample per calendar day whose local time falls inside the window
    start, end = time(window[0]), time(window[1])
    by_day: Dict[date, RawSample] = {}
    for sample in samples:
        moment = policy.localize(sample.timestamp)
        day = moment.date()
        if day in by_day:
            continue
        if start <= moment.time() <= end:
            by_day[day] = sample
    # dicts keep insertion order and the input is chronological
    return list(by_day.values())


def stride_samples(samples: Sequence[RawSample], stride: int = SAMPLES_PER_DAY, limit: int = DAYS) -> List[RawSample]:
    if stride < 1:
        raise ValueError(f"stride must be positive (got {stride})")
    return list(samples[::stride][:limit])


def select_daily_samples(
    samples: Sequence[RawSample],
    policy: TimeZonePolicy = UTC,
    days: int = DAYS,
    samples_per_day: int = SAMPLES_PER_DAY,
    window: Tuple[int, int] = NOON_WINDOW,
) -> List[RawSample]:
    """Return at most ``days`` samples, one per calendar day, in input order.

    Days are taken from the noon window when every one of them has a sample
    there. Otherwise the windowed result is dropped as a whole and every
    ``samples_per_day``-th sample is used instead, starting at index 0.
    Missing data is never synthesized, so short input gives short output.
    """
    if not samples:
        return []

    windowed = noon_samples(samples, policy, window)
    if len(windowed) >= days:
        return windowed[:days]
    return stride_samples(samples, samples_per_day, days)
