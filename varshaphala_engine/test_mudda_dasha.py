from datetime import date, datetime, timedelta

import pytest

from varshaphala_engine.core.constants import Planet, vimshottari_sequence_from
from varshaphala_engine.core.errors import ValidationError
from varshaphala_engine.core.mudda_dasha import (
    allocate_days, current_planet, find_period, mark_current, schedule_mudda_dasha, subdivide,
)

START = date(2025, 4, 29)


def _assert_partition(periods, start, days):
    assert sum(p.days for p in periods) == days
    cursor = start
    for p in periods:
        assert p.start == cursor
        assert p.end == p.start + timedelta(days=p.days)
        cursor = p.end
        if p.sub_periods:
            _assert_partition(p.sub_periods, p.start, p.days)


def test_sun_year_of_365_days():
    periods = schedule_mudda_dasha(START, 365, Planet.SUN)
    assert len(periods) == 9
    assert periods[0].planet is Planet.SUN
    assert periods[0].days == round(365 * 6 / 120) == 18
    assert [p.planet for p in periods] == list(vimshottari_sequence_from(Planet.SUN))
    _assert_partition(periods, START, 365)


def test_largest_remainder_allocation():
    order = vimshottari_sequence_from(Planet.SUN)
    # floors sum to 360; Venus, Saturn, Rahu, Mercury, Jupiter take the spare days
    assert allocate_days(365, order) == [18, 30, 21, 55, 49, 58, 52, 21, 61]
    assert allocate_days(3, order) == [0, 0, 0, 1, 0, 1, 0, 0, 1]


def test_leap_year_length_is_conserved():
    periods = schedule_mudda_dasha(datetime(2023, 4, 29, 18, 45), 366, Planet.MOON, depth=3)
    _assert_partition(periods, date(2023, 4, 29), 366)
    assert all(len(p.sub_periods) == 9 for p in periods)
    assert all(len(c.sub_periods) == 9 for p in periods for c in p.sub_periods)


def test_zero_day_periods_are_kept():
    periods = subdivide(START, 3, vimshottari_sequence_from(Planet.SUN), depth=2)
    zero = [p for p in periods if p.days == 0]
    assert zero
    assert all(p.start == p.end for p in zero)
    assert all(len(p.sub_periods) == 9 for p in periods)
    _assert_partition(periods, START, 3)


def test_sub_periods_start_from_parent_planet():
    periods = schedule_mudda_dasha(START, 365, Planet.KETU)
    for p in periods:
        assert p.sub_periods[0].planet is p.planet
        assert p.sub_periods[0].level == 2


@pytest.mark.parametrize("days, depth", [(0, 2), (-5, 2), (365, 0)])
def test_invalid_schedule_rejected(days, depth):
    with pytest.raises(ValidationError):
        schedule_mudda_dasha(START, days, Planet.SUN, depth)


def test_exactly_one_current_period():
    periods = mark_current(schedule_mudda_dasha(START, 365, Planet.SUN),
                           datetime(2025, 8, 1, 12, 0))
    current = [p for p in periods if p.current]
    assert len(current) == 1
    assert 0.0 < current[0].progress < 1.0
    assert len([c for c in current[0].sub_periods if c.current]) == 1
    before = [p for p in periods if p.end <= date(2025, 8, 1)]
    assert all(p.progress == 1.0 for p in before)


def test_no_current_period_outside_year():
    periods = mark_current(schedule_mudda_dasha(START, 365, Planet.SUN),
                           datetime(2027, 1, 1))
    assert not any(p.current for p in periods)
    assert current_planet(periods, date(2027, 1, 1)) is None


def test_current_period_is_decided_by_date():
    # the return instant is mid-afternoon; the first period still owns the whole day
    periods = mark_current(schedule_mudda_dasha(datetime(2025, 4, 29, 14, 30), 365, Planet.SUN),
                           datetime(2025, 4, 29, 1, 0))
    assert periods[0].start == START
    assert periods[0].current
    assert periods[0].progress == pytest.approx(1 / (18 * 24))
    assert sum(c.current for c in periods[0].sub_periods) == 1

    eve = mark_current(periods, datetime(2025, 4, 28, 23, 59))
    assert not any(p.current for p in eve)
    assert eve[0].progress == 0.0


def test_find_period():
    periods = schedule_mudda_dasha(START, 365, Planet.SUN)
    assert find_period(periods, Planet.SATURN).planet is Planet.SATURN
    assert find_period((), Planet.SATURN) is None
