"""Pro-rated allowance projection over a cycle or week"""

from datetime import date, datetime

from spendwise.domain.models import AllowanceProjection, DateRange
from spendwise.utils.date_utils import as_date


def project_allowance(
    today: date | datetime,
    boundary: DateRange,
    total_budget: float,
) -> AllowanceProjection:
    """
    Spread total_budget evenly over the range and accumulate it up to today.

    Today is clamped into the range first: a day before the start counts as
    the first day, a day after the end counts as the last day. No rounding
    is applied; currency formatting happens at the edge.

    Example:
        March cycle (31 days), budget 3100, today March 10
        -> daily 100.0, elapsed 10, allowed 1000.0
    """
    days_in_range = boundary.days
    daily_budget = total_budget / days_in_range

    day = min(max(as_date(today), boundary.start), boundary.end)
    days_elapsed = (day - boundary.start).days + 1

    return AllowanceProjection(
        days_in_range=days_in_range,
        daily_budget=daily_budget,
        days_elapsed=days_elapsed,
        allowed_by_today=daily_budget * days_elapsed,
    )


def net_allowance(projection: AllowanceProjection, spent_to_date: float) -> float:
    """How much of today's allowance is left after actual spend"""
    return projection.allowed_by_today - spent_to_date
