"""Spend aggregation over date ranges"""

from datetime import date, datetime
from typing import Iterable, List

from spendwise.domain.models import Purchase, SpendAggregate
from spendwise.utils.date_utils import as_date


def purchases_in_range(
    purchases: Iterable[Purchase],
    start: date | datetime,
    end: date | datetime,
) -> List[Purchase]:
    """Purchases dated within [start, end], compared by calendar day"""
    first, last = as_date(start), as_date(end)
    return [p for p in purchases if first <= as_date(p.date) <= last]


def sum_in_range(
    purchases: Iterable[Purchase],
    start: date | datetime,
    end: date | datetime,
) -> float:
    """Total amount of purchases dated within [start, end]"""
    return sum((p.amount for p in purchases_in_range(purchases, start, end)), 0.0)


def sum_detailed(
    purchases: Iterable[Purchase],
    start: date | datetime,
    end: date | datetime,
    big_threshold: float,
) -> SpendAggregate:
    """
    Sum purchases in range and split them into big and small.

    A purchase is big iff amount >= big_threshold, so every purchase in
    range lands in exactly one class.
    """
    big_total = 0.0
    small_total = 0.0
    big_count = 0
    small_count = 0

    for purchase in purchases_in_range(purchases, start, end):
        if purchase.amount >= big_threshold:
            big_total += purchase.amount
            big_count += 1
        else:
            small_total += purchase.amount
            small_count += 1

    return SpendAggregate(
        total=big_total + small_total,
        big_total=big_total,
        small_total=small_total,
        big_count=big_count,
        small_count=small_count,
    )


def big_purchase_threshold(weekly_budget: float, ratio: float = 0.25) -> float:
    """Big purchase cut-off as a share of the current weekly budget"""
    return weekly_budget * ratio
