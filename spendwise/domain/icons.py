"""Icon-based weekly progress layout"""

import math
from typing import List

from spendwise.domain.models import IconLayout
from spendwise.utils.date_utils import round_half_up

TOTAL_ICONS = 10
FIRST_ROW_WARNINGS = 2
WARNING_ROW_SIZE = 12


def derive_icon_layout(
    spent_total: float,
    budget: float,
    big_total: float,
    small_total: float,
) -> IconLayout:
    """
    Allocate the 10 progress slots between big, small and empty icons.

    Rules:
    - Used slots follow the spent/budget ratio, capped at 10
    - Any small spend is always visible as at least one icon
    - Used slots split between big and small by their share of spend
    - One warning icon per started 10% of overspend

    Rounding matches Math.round (half up), e.g. 2.5 -> 3.

    Example:
        budget 1300, big 900, small 100
        used = round(1000/1300*10) = 8, big = round(8*0.9) = 7, small = 1
    """
    used_ratio = max(0.0, min(1.0, spent_total / max(1, budget)))
    used_icons = round_half_up(used_ratio * TOTAL_ICONS)

    big_icons = 0
    small_icons = 0
    if spent_total > 0:
        if small_total > 0 and used_icons == 0:
            used_icons = 1

        big_share = big_total / spent_total
        big_icons = round_half_up(used_icons * big_share)
        small_icons = max(0, used_icons - big_icons)

        if small_total > 0 and small_icons == 0:
            if big_icons > 0:
                big_icons -= 1
                small_icons = 1
            elif used_icons < TOTAL_ICONS:
                used_icons += 1
                small_icons = 1
            else:
                small_icons = 1
                big_icons = max(0, used_icons - small_icons)

    empty_icons = max(0, TOTAL_ICONS - used_icons)

    warning_icons_total = count_warning_icons(spent_total, budget)

    return IconLayout(
        total_icons=TOTAL_ICONS,
        used_icons=used_icons,
        big_icons=big_icons,
        small_icons=small_icons,
        empty_icons=empty_icons,
        warning_icons_total=warning_icons_total,
        first_row_warnings=min(FIRST_ROW_WARNINGS, warning_icons_total),
        warning_rows=split_warning_rows(warning_icons_total),
    )


def count_warning_icons(spent_total: float, budget: float) -> int:
    """One warning icon per started 10% spent over budget"""
    overspend = max(0, spent_total - budget)
    if overspend <= 0:
        return 0
    return math.ceil((overspend / max(1, budget)) * 10)


def split_warning_rows(warning_icons_total: int) -> List[int]:
    """Icons beyond the first row, in rows of up to 12"""
    rows = []
    remaining = warning_icons_total - FIRST_ROW_WARNINGS
    while remaining > 0:
        row = min(WARNING_ROW_SIZE, remaining)
        rows.append(row)
        remaining -= row
    return rows
