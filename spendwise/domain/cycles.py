"""Monthly cycle and week boundary resolution"""

from datetime import date, datetime, timedelta

from spendwise.domain.models import DateRange
from spendwise.utils.date_utils import add_months, as_date, day_of_week, with_day


def _cycle_start(month: date, start_day_of_month: int) -> date:
    """Start of the cycle opened in month; the 1st of the next month when month is too short"""
    start = with_day(month, start_day_of_month)
    if start.day < start_day_of_month:
        start += timedelta(days=1)
    return start


def resolve_monthly_cycle(today: date | datetime, start_day_of_month: int) -> DateRange:
    """
    Resolve the monthly budget cycle containing today.

    The cycle is opened on start_day_of_month of this month when that day has
    been reached, otherwise of the previous month. It ends the day before
    the next cycle starts.

    Start days above 28 are not rejected. A month without the start day
    opens its cycle on the 1st of the following month instead, so the
    cycle before it runs through the whole short month and consecutive
    cycles never overlap.

    Examples:
        (2024-03-15, 1)  -> 2024-03-01 .. 2024-03-31
        (2024-02-15, 31) -> 2024-01-31 .. 2024-02-29
        (2024-03-01, 30) -> 2024-03-01 .. 2024-03-29
    """
    day = as_date(today)

    if day.day >= start_day_of_month:
        opened_in = day
    else:
        opened_in = add_months(day, -1)

    start = _cycle_start(opened_in, start_day_of_month)
    next_start = _cycle_start(add_months(opened_in, 1), start_day_of_month)

    return DateRange(start=start, end=next_start - timedelta(days=1))


def resolve_week(today: date | datetime, week_start_dow: int) -> DateRange:
    """
    Resolve the 7-day week containing today.

    week_start_dow: 0=Sunday .. 6=Saturday
    """
    day = as_date(today)
    diff = (day_of_week(day) - week_start_dow + 7) % 7
    start = day - timedelta(days=diff)
    return DateRange(start=start, end=start + timedelta(days=6))
