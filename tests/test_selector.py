# one sample per calendar day: noon window first, fixed stride as fallback

from weathercards.models import RawSample
from weathercards.selector import noon_samples, select_daily_samples, stride_samples
from weathercards.timefmt import UTC, TimeZonePolicy

JUNE_1_2025 = 1748736000  # 2025-06-01 00:00:00 UTC
HOUR = 3600


def make_samples(start, hours):
    # hours are offsets from start, temperature doubles as the sample index
    return [
        RawSample(timestamp=start + h * HOUR, temperature=float(i), condition_code="01d", description="clear sky")
        for i, h in enumerate(hours)
    ]


def three_hourly(count, start=JUNE_1_2025):
    return make_samples(start, [3 * i for i in range(count)])


def indices(samples):
    return [int(s.temperature) for s in samples]


def test_five_full_days_pick_the_noon_sample():
    samples = three_hourly(40)
    chosen = select_daily_samples(samples, UTC)
    assert indices(chosen) == [4, 12, 20, 28, 36]
    assert all(UTC.localize(s.timestamp).hour == 12 for s in chosen)
    assert [s.timestamp for s in chosen] == sorted(s.timestamp for s in chosen)


def test_no_noon_samples_falls_back_to_stride():
    # 8 samples a day that all avoid 11:00-13:00
    day_hours = [0, 2, 4, 6, 8, 10, 14, 16]
    hours = [24 * d + h for d in range(5) for h in day_hours]
    samples = make_samples(JUNE_1_2025, hours)
    assert noon_samples(samples, UTC) == []
    assert indices(select_daily_samples(samples, UTC)) == [0, 8, 16, 24, 32]


def test_empty_input():
    assert select_daily_samples([], UTC) == []


def test_four_noon_days_discard_windowed_selection():
    # starts at 15:00 and stops at 03:00 on the sixth day: only four days reach noon
    samples = three_hourly(37, start=JUNE_1_2025 + 15 * HOUR)
    assert len(noon_samples(samples, UTC)) == 4
    assert indices(select_daily_samples(samples, UTC)) == [0, 8, 16, 24, 32]


def test_short_source_is_not_padded():
    samples = three_hourly(10)
    assert indices(select_daily_samples(samples, UTC)) == [0, 8]
    assert indices(select_daily_samples(three_hourly(3), UTC)) == [0]


def test_policy_decides_hour_and_day():
    # at UTC+2 the 09:00 UTC sample is 11:00 local, the first one inside the window
    samples = three_hourly(40)
    chosen = select_daily_samples(samples, TimeZonePolicy.fixed_offset(2 * HOUR))
    assert indices(chosen) == [3, 11, 19, 27, 35]


def test_first_sample_in_window_wins():
    # hourly cadence puts 11:00, 12:00 and 13:00 in the window, 11:00 is taken
    samples = make_samples(JUNE_1_2025, list(range(24 * 5)))
    chosen = select_daily_samples(samples, UTC, samples_per_day=24)
    assert [UTC.localize(s.timestamp).hour for s in chosen] == [11] * 5


def test_extra_days_are_cut_to_five():
    samples = three_hourly(48)
    chosen = select_daily_samples(samples, UTC)
    assert indices(chosen) == [4, 12, 20, 28, 36]


def test_custom_days_and_window():
    samples = three_hourly(40)
    assert indices(select_daily_samples(samples, UTC, days=3, window=(9, 9))) == [3, 11, 19]


def test_stride_samples_limits_output():
    samples = three_hourly(40)
    assert indices(stride_samples(samples, 8, 2)) == [0, 8]


def at_seconds(offsets):
    return [
        RawSample(timestamp=JUNE_1_2025 + s, temperature=float(i), condition_code="01d", description="clear sky")
        for i, s in enumerate(offsets)
    ]


def test_window_ends_at_13_00_sharp():
    # 13:00 is inside, 13:30 and 10:59 are not
    assert indices(noon_samples(at_seconds([13 * HOUR]), UTC)) == [0]
    assert noon_samples(at_seconds([13 * HOUR + 1800, 10 * HOUR + 59 * 60]), UTC) == []


def test_half_hour_cadence_outside_window_falls_back():
    day_offsets = [h * HOUR + 1800 for h in (1, 4, 7, 10, 13, 16, 19, 22)]
    samples = at_seconds([d * 24 * HOUR + s for d in range(5) for s in day_offsets])
    assert indices(select_daily_samples(samples, UTC)) == [0, 8, 16, 24, 32]
