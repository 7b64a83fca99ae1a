"""Dashboard summary and weekly details composition"""

from collections import defaultdict
from datetime import date, datetime, timedelta
from typing import Dict, List, Optional, Sequence

from spendwise.domain.allowance import net_allowance, project_allowance
from spendwise.domain.cycles import resolve_monthly_cycle, resolve_week
from spendwise.domain.icons import derive_icon_layout
from spendwise.domain.models import (
    BudgetSettings,
    BudgetSummary,
    DaySpend,
    MonthlySummary,
    Purchase,
    WeekDetails,
    WeeklySummary,
)
from spendwise.domain.spending import (
    big_purchase_threshold,
    purchases_in_range,
    sum_detailed,
    sum_in_range,
)
from spendwise.utils.date_utils import as_date


def build_monthly_summary(
    today: date,
    settings: BudgetSettings,
    purchases: Sequence[Purchase],
) -> MonthlySummary:
    cycle = resolve_monthly_cycle(today, settings.budget_start_day)
    spent = sum_in_range(purchases, cycle.start, cycle.end)
    projection = project_allowance(today, cycle, settings.monthly_budget)
    spent_to_date = sum_in_range(purchases, cycle.start, today)

    return MonthlySummary(
        cycle=cycle,
        budget=settings.monthly_budget,
        spent=spent,
        budget_left=settings.monthly_budget - spent,
        projection=projection,
        spent_to_date=spent_to_date,
        allowed_by_today_net=net_allowance(projection, spent_to_date),
    )


def build_weekly_summary(
    today: date,
    settings: BudgetSettings,
    purchases: Sequence[Purchase],
    week_base: Optional[date] = None,
) -> WeeklySummary:
    """
    Weekly view for the week containing week_base (default: today).

    The big purchase threshold follows the weekly budget, so workspaces
    with different budgets classify the same amount differently.

    The allowance projection is taken over the displayed week with today
    clamped into it, so a past week reports its full allowance.
    """
    week = resolve_week(week_base or today, settings.week_start_day_of_week)
    current_week = resolve_week(today, settings.week_start_day_of_week)

    threshold = big_purchase_threshold(settings.weekly_budget, settings.big_purchase_ratio)
    spend = sum_detailed(purchases, week.start, week.end, threshold)
    projection = project_allowance(today, week, settings.weekly_budget)
    spent_to_date = sum_in_range(purchases, week.start, today)

    icons = derive_icon_layout(
        spent_total=spend.total,
        budget=settings.weekly_budget,
        big_total=spend.big_total,
        small_total=spend.small_total,
    )

    return WeeklySummary(
        week=week,
        budget=settings.weekly_budget,
        big_threshold=threshold,
        spend=spend,
        left=settings.weekly_budget - spend.total,
        projection=projection,
        spent_to_date=spent_to_date,
        allowed_by_today_net=net_allowance(projection, spent_to_date),
        icons=icons,
        is_current_week=week.start == current_week.start,
    )


def build_budget_summary(
    today: date | datetime,
    settings: BudgetSettings,
    monthly_purchases: Sequence[Purchase],
    weekly_purchases: Sequence[Purchase],
    week_base: Optional[date] = None,
) -> BudgetSummary:
    """
    Main entry point: monthly cycle and weekly view for one workspace.

    Callers pass purchases already stripped of soft-deleted records;
    anything outside the resolved ranges is ignored.
    """
    day = as_date(today)
    return BudgetSummary(
        today=day,
        monthly=build_monthly_summary(day, settings, monthly_purchases),
        weekly=build_weekly_summary(
            day,
            settings,
            weekly_purchases,
            as_date(week_base) if week_base else None,
        ),
    )


def build_week_details(
    base_day: date | datetime,
    week_start_dow: int,
    purchases: Sequence[Purchase],
    today: date | datetime,
) -> WeekDetails:
    """Group a week's purchases by day, newest day first"""
    week = resolve_week(base_day, week_start_dow)
    current_week = resolve_week(today, week_start_dow)

    by_day: Dict[date, List[Purchase]] = defaultdict(list)
    for purchase in purchases_in_range(purchases, week.start, week.end):
        by_day[as_date(purchase.date)].append(purchase)

    days = [
        DaySpend(day=day, total=sum((p.amount for p in items), 0.0), purchases=items)
        for day, items in sorted(by_day.items(), key=lambda item: item[0], reverse=True)
    ]

    next_start = week.start + timedelta(days=7)
    return WeekDetails(
        week=week,
        days=days,
        previous_start=week.start - timedelta(days=7),
        next_start=next_start,
        next_disabled=next_start > current_week.start,
    )
