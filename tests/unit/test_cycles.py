"""Unit tests for monthly cycle and week resolution"""

import calendar
import pytest
from datetime import date, datetime, timedelta
from spendwise.domain.cycles import resolve_monthly_cycle, resolve_week
from spendwise.utils.date_utils import day_of_week


def test_monthly_cycle_start_of_month():
    """Test cycle anchored on the 1st covers the whole calendar month"""
    cycle = resolve_monthly_cycle(date(2024, 3, 15), 1)

    assert cycle.start == date(2024, 3, 1)
    assert cycle.end == date(2024, 3, 31)
    assert cycle.days == 31


def test_monthly_cycle_before_start_day_uses_previous_month():
    """Test today before the start day falls in the cycle opened last month"""
    cycle = resolve_monthly_cycle(date(2024, 3, 5), 10)

    assert cycle.start == date(2024, 2, 10)
    assert cycle.end == date(2024, 3, 9)
    assert cycle.days == 29  # February 2024 has 29 days


def test_monthly_cycle_on_start_day():
    """Test the start day itself opens a new cycle"""
    cycle = resolve_monthly_cycle(date(2024, 3, 10), 10)

    assert cycle.start == date(2024, 3, 10)
    assert cycle.end == date(2024, 4, 9)


def test_monthly_cycle_across_year_boundary():
    """Test January dates before the start day reach back into December"""
    cycle = resolve_monthly_cycle(date(2025, 1, 3), 15)

    assert cycle.start == date(2024, 12, 15)
    assert cycle.end == date(2025, 1, 14)


def test_monthly_cycle_start_day_31_in_leap_february():
    """Test start day 31 clamps through a short February"""
    cycle = resolve_monthly_cycle(date(2024, 2, 15), 31)

    assert cycle.start == date(2024, 1, 31)
    assert cycle.end == date(2024, 2, 29)


def test_monthly_cycle_start_day_missing_from_previous_month():
    """Test a February without the 30th hands March 1 to the next cycle"""
    february = resolve_monthly_cycle(date(2024, 2, 29), 30)
    march = resolve_monthly_cycle(date(2024, 3, 1), 30)

    assert february.start == date(2024, 1, 30)
    assert february.end == date(2024, 2, 29)
    assert march.start == date(2024, 3, 1)
    assert march.end == date(2024, 3, 29)


@pytest.mark.parametrize("start_day", [29, 30, 31])
def test_monthly_cycles_are_contiguous_for_late_start_days(start_day):
    """Test consecutive cycles neither overlap nor leave gaps"""
    day = date(2023, 1, 1)
    previous = resolve_monthly_cycle(day, start_day)
    while day < date(2025, 3, 1):
        cycle = resolve_monthly_cycle(day, start_day)

        assert cycle.contains(day)
        if cycle != previous:
            assert previous.end + timedelta(days=1) == cycle.start
            previous = cycle

        day += timedelta(days=1)


def test_monthly_cycle_accepts_datetime():
    """Test time of day is ignored and boundaries span whole days"""
    cycle = resolve_monthly_cycle(datetime(2024, 3, 15, 23, 30), 1)

    assert cycle.start_at == datetime(2024, 3, 1, 0, 0, 0)
    assert cycle.end_at.date() == date(2024, 3, 31)
    assert (cycle.end_at.hour, cycle.end_at.minute, cycle.end_at.second) == (23, 59, 59)


@pytest.mark.parametrize("start_day", [1, 2, 14, 27, 28])
def test_monthly_cycle_length_matches_start_month(start_day):
    """Test every cycle spans the length of its start month and contains today"""
    day = date(2023, 1, 1)
    while day < date(2025, 1, 1):
        cycle = resolve_monthly_cycle(day, start_day)

        assert cycle.start.day == start_day
        assert cycle.days == calendar.monthrange(cycle.start.year, cycle.start.month)[1]
        assert cycle.contains(day)

        day += timedelta(days=3)


def test_week_sunday_start():
    """Test Sunday-anchored week around a Friday"""
    week = resolve_week(date(2024, 3, 15), 0)  # Friday

    assert week.start == date(2024, 3, 10)
    assert week.end == date(2024, 3, 16)


def test_week_monday_start():
    """Test Monday-anchored week"""
    week = resolve_week(date(2024, 3, 15), 1)

    assert week.start == date(2024, 3, 11)
    assert week.end == date(2024, 3, 17)


def test_week_today_is_start_day():
    """Test today on the start weekday opens the week"""
    week = resolve_week(date(2024, 3, 10), 0)  # Sunday

    assert week.start == date(2024, 3, 10)


def test_week_start_after_today_weekday():
    """Test Saturday start reaches back into the previous week"""
    week = resolve_week(date(2024, 3, 15), 6)

    assert week.start == date(2024, 3, 9)
    assert week.end == date(2024, 3, 15)


@pytest.mark.parametrize("week_start_dow", range(7))
def test_week_is_seven_days_starting_on_configured_weekday(week_start_dow):
    """Test week length and anchor for every weekday over a month of days"""
    for offset in range(31):
        today = date(2024, 2, 20) + timedelta(days=offset)
        week = resolve_week(today, week_start_dow)

        assert week.days == 7
        assert day_of_week(week.start) == week_start_dow
        assert week.contains(today)
