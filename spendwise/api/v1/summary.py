"""GET /v1/summary and /v1/details - budget dashboard endpoints"""

import time
from datetime import date
from typing import Optional
from fastapi import APIRouter, Depends, Query, Request
from sqlalchemy.orm import Session

from spendwise.api.v1.schemas import (
    AllowanceSchema,
    DaySchema,
    IconLayoutSchema,
    MonthlySummarySchema,
    PurchaseResponse,
    SummaryResponse,
    WeekDetailsResponse,
    WeeklySummarySchema,
)
from spendwise.api.dependencies import get_budget_settings, get_request_id, get_today, get_workspace
from spendwise.domain.cycles import resolve_monthly_cycle, resolve_week
from spendwise.domain.models import AllowanceProjection, BudgetSummary, Purchase, WeekDetails
from spendwise.domain.summary import build_budget_summary, build_week_details
from spendwise.infrastructure.database.models import WorkspaceRecord
from spendwise.infrastructure.database.repositories import PurchaseRepository, to_purchase
from spendwise.infrastructure.database.session import get_db
from spendwise.infrastructure.observability.logging import log_summary
from spendwise.infrastructure.observability.metrics import record_summary
from spendwise.utils.formatting import format_currency, format_week_range

router = APIRouter()


def _allowance_schema(projection: AllowanceProjection) -> AllowanceSchema:
    return AllowanceSchema(
        days_in_range=projection.days_in_range,
        daily_budget=projection.daily_budget,
        days_elapsed=projection.days_elapsed,
        allowed_by_today=projection.allowed_by_today,
    )


def to_summary_response(summary: BudgetSummary, currency: str) -> SummaryResponse:
    monthly = summary.monthly
    weekly = summary.weekly
    icons = weekly.icons

    return SummaryResponse(
        today=summary.today,
        currency=currency,
        monthly=MonthlySummarySchema(
            cycle_start=monthly.cycle.start,
            cycle_end=monthly.cycle.end,
            budget=monthly.budget,
            spent=monthly.spent,
            budget_left=monthly.budget_left,
            budget_left_formatted=format_currency(monthly.budget_left, currency),
            allowance=_allowance_schema(monthly.projection),
            spent_to_date=monthly.spent_to_date,
            allowed_by_today_net=monthly.allowed_by_today_net,
            allowed_by_today_net_formatted=format_currency(monthly.allowed_by_today_net, currency),
        ),
        weekly=WeeklySummarySchema(
            week_start=weekly.week.start,
            week_end=weekly.week.end,
            week_range=format_week_range(weekly.week.start, weekly.week.end),
            budget=weekly.budget,
            big_threshold=weekly.big_threshold,
            spent_total=weekly.spend.total,
            big_total=weekly.spend.big_total,
            small_total=weekly.spend.small_total,
            big_count=weekly.spend.big_count,
            small_count=weekly.spend.small_count,
            left=weekly.left,
            status=weekly.status,
            allowance=_allowance_schema(weekly.projection),
            spent_to_date=weekly.spent_to_date,
            allowed_by_today_net=weekly.allowed_by_today_net,
            icons=IconLayoutSchema(
                total_icons=icons.total_icons,
                used_icons=icons.used_icons,
                big_icons=icons.big_icons,
                small_icons=icons.small_icons,
                empty_icons=icons.empty_icons,
                warning_icons_total=icons.warning_icons_total,
                first_row_warnings=icons.first_row_warnings,
                warning_rows=list(icons.warning_rows),
            ),
            is_current_week=weekly.is_current_week,
        ),
    )


def _purchase_item(purchase: Purchase, currency: str) -> PurchaseResponse:
    return PurchaseResponse(
        purchase_id=purchase.purchase_id or "",
        amount=purchase.amount,
        amount_formatted=format_currency(purchase.amount, currency),
        currency=currency,
        date=purchase.date,
        description=purchase.description,
        deleted=False,
    )


def to_week_details_response(details: WeekDetails, currency: str) -> WeekDetailsResponse:
    return WeekDetailsResponse(
        week_start=details.week.start,
        week_end=details.week.end,
        week_range=format_week_range(details.week.start, details.week.end),
        currency=currency,
        days=[
            DaySchema(
                date=day.day,
                day_name=day.day.strftime("%a"),
                total=day.total,
                total_formatted=format_currency(day.total, currency),
                purchases=[_purchase_item(p, currency) for p in day.purchases],
            )
            for day in details.days
        ],
        previous_start=details.previous_start,
        next_start=details.next_start,
        next_disabled=details.next_disabled,
    )


def compute_summary(
    db: Session,
    workspace: WorkspaceRecord,
    today: date,
    week_base: Optional[date],
    request_id: str,
) -> SummaryResponse:
    """
    Load the workspace's active purchases and run the allowance engine.

    Flow:
    1. Resolve the monthly cycle and the displayed week
    2. Fetch non-deleted purchases for both ranges
    3. Build the summary and record metrics and logs
    """
    start_time = time.time()
    budget_settings = get_budget_settings(workspace)

    cycle = resolve_monthly_cycle(today, budget_settings.budget_start_day)
    week = resolve_week(week_base or today, budget_settings.week_start_day_of_week)

    repo = PurchaseRepository(db, workspace.id)
    monthly_purchases = [to_purchase(r) for r in repo.list_active(cycle.start, cycle.end)]
    weekly_purchases = [to_purchase(r) for r in repo.list_active(week.start, week.end)]

    summary = build_budget_summary(today, budget_settings, monthly_purchases, weekly_purchases, week_base)

    duration_ms = (time.time() - start_time) * 1000
    record_summary(summary.weekly.status, summary.weekly.icons.warning_icons_total)
    log_summary(
        request_id,
        str(workspace.id),
        summary.weekly.status,
        summary.weekly.spend.total,
        summary.weekly.icons.warning_icons_total,
        duration_ms,
    )

    return to_summary_response(summary, workspace.currency)


def compute_week_details(
    db: Session,
    workspace: WorkspaceRecord,
    today: date,
    start: Optional[date],
) -> WeekDetailsResponse:
    week = resolve_week(start or today, workspace.week_start_day_of_week)
    records = PurchaseRepository(db, workspace.id).list_active(week.start, week.end)

    details = build_week_details(
        start or today,
        workspace.week_start_day_of_week,
        [to_purchase(r) for r in records],
        today,
    )
    return to_week_details_response(details, workspace.currency)


@router.get("/summary", response_model=SummaryResponse)
def get_summary(
    request: Request,
    week_start: Optional[date] = Query(None, description="Any day of the week to display (default: current week)"),
    workspace: WorkspaceRecord = Depends(get_workspace),
    db: Session = Depends(get_db),
    today: date = Depends(get_today),
):
    """
    Monthly cycle and weekly budget overview.

    Returns:
        Spend, pro-rated allowance to date and the weekly icon layout
    """
    return compute_summary(db, workspace, today, week_start, get_request_id(request))


@router.get("/details", response_model=WeekDetailsResponse)
def get_details(
    start: Optional[date] = Query(None, description="Any day of the week to list (default: current week)"),
    workspace: WorkspaceRecord = Depends(get_workspace),
    db: Session = Depends(get_db),
    today: date = Depends(get_today),
):
    """Day-by-day purchases of one week with previous/next navigation"""
    return compute_week_details(db, workspace, today, start)
