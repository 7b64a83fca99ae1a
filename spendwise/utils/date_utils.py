"""Date manipulation utilities"""

import math
from datetime import date, datetime

from dateutil.relativedelta import relativedelta


def as_date(value: date | datetime) -> date:
    """Drop the time-of-day component, keeping the calendar day"""
    if isinstance(value, datetime):
        return value.date()
    return value


def add_months(from_date: date, months: int) -> date:
    """
    Calendar month arithmetic.

    Clamps to the destination month's last day instead of rolling over:
    Jan 31 + 1 month -> Feb 29 (leap year) / Feb 28.
    """
    return from_date + relativedelta(months=months)


def with_day(from_date: date, day: int) -> date:
    """Replace the day of month, clamped to the month's last day"""
    return from_date + relativedelta(day=day)


def day_of_week(day: date) -> int:
    """Day of week with 0=Sunday .. 6=Saturday"""
    return (day.weekday() + 1) % 7


def round_half_up(value: float) -> int:
    """Round .5 towards +infinity (round() uses banker's rounding)"""
    return math.floor(value + 0.5)
