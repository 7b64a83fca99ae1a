"""Unit tests for pro-rated allowance projection"""

import pytest
from datetime import date, timedelta
from spendwise.domain.allowance import net_allowance, project_allowance
from spendwise.domain.cycles import resolve_monthly_cycle, resolve_week
from spendwise.domain.models import DateRange

MARCH = DateRange(start=date(2024, 3, 1), end=date(2024, 3, 31))


def test_project_allowance_mid_cycle():
    """Test daily budget and accumulated allowance"""
    projection = project_allowance(date(2024, 3, 10), MARCH, 3100)

    assert projection.days_in_range == 31
    assert projection.daily_budget == 100.0
    assert projection.days_elapsed == 10
    assert projection.allowed_by_today == 1000.0


def test_project_allowance_first_day():
    """Test the first day already counts as elapsed"""
    projection = project_allowance(date(2024, 3, 1), MARCH, 3100)

    assert projection.days_elapsed == 1
    assert projection.allowed_by_today == 100.0


def test_project_allowance_before_start_clamps_to_first_day():
    """Test a day before the range behaves like the first day"""
    projection = project_allowance(date(2024, 2, 20), MARCH, 3100)

    assert projection.days_elapsed == 1


def test_project_allowance_after_end_clamps_to_last_day():
    """Test a day after the range behaves like the last day"""
    projection = project_allowance(date(2024, 4, 20), MARCH, 3100)

    assert projection.days_elapsed == 31
    assert projection.allowed_by_today == pytest.approx(3100)


def test_project_allowance_no_rounding():
    """Test daily budget stays unrounded"""
    week = DateRange(start=date(2024, 3, 10), end=date(2024, 3, 16))
    projection = project_allowance(date(2024, 3, 12), week, 1000)

    assert projection.daily_budget == 1000 / 7
    assert projection.allowed_by_today == (1000 / 7) * 3


@pytest.mark.parametrize("start_day", [1, 5, 28])
def test_project_allowance_conserves_monthly_budget(start_day):
    """Test daily budget times cycle length gives back the budget"""
    cycle = resolve_monthly_cycle(date(2024, 2, 14), start_day)
    projection = project_allowance(cycle.start, cycle, 5200)

    assert projection.daily_budget * projection.days_in_range == pytest.approx(5200)


def test_project_allowance_monotonic_through_week():
    """Test allowance never decreases and reaches the budget on the last day"""
    week = resolve_week(date(2024, 3, 15), 0)
    previous = 0.0

    for offset in range(7):
        projection = project_allowance(week.start + timedelta(days=offset), week, 1300)
        assert projection.allowed_by_today >= previous
        previous = projection.allowed_by_today

    assert previous == pytest.approx(1300)


def test_net_allowance_subtracts_spend():
    """Test net allowance after actual spend, negative when ahead of schedule"""
    projection = project_allowance(date(2024, 3, 10), MARCH, 3100)

    assert net_allowance(projection, 250) == 750.0
    assert net_allowance(projection, 1200) == -200.0
