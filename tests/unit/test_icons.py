"""Unit tests for the weekly icon layout"""

import pytest
from spendwise.domain.icons import count_warning_icons, derive_icon_layout, split_warning_rows


def test_icon_layout_proportional_split():
    """Test 1000 of 1300 spent, mostly big purchases"""
    layout = derive_icon_layout(spent_total=1000, budget=1300, big_total=900, small_total=100)

    assert layout.used_icons == 8  # round(7.69)
    assert layout.big_icons == 7  # round(8 * 0.9)
    assert layout.small_icons == 1
    assert layout.empty_icons == 2
    assert layout.warning_icons_total == 0
    assert layout.warning_rows == []


def test_icon_layout_nothing_spent():
    """Test an untouched budget is all empty slots"""
    layout = derive_icon_layout(spent_total=0, budget=1300, big_total=0, small_total=0)

    assert layout.used_icons == 0
    assert layout.big_icons == 0
    assert layout.small_icons == 0
    assert layout.empty_icons == 10


def test_icon_layout_rounds_half_up():
    """Test 25% spent shows 3 icons, not banker's-rounded 2"""
    layout = derive_icon_layout(spent_total=250, budget=1000, big_total=250, small_total=0)

    assert layout.used_icons == 3
    assert layout.big_icons == 3
    assert layout.small_icons == 0


def test_icon_layout_tiny_small_spend_is_visible():
    """Test small spend that rounds to zero still gets one icon"""
    layout = derive_icon_layout(spent_total=20, budget=1300, big_total=0, small_total=20)

    assert layout.used_icons == 1
    assert layout.small_icons == 1
    assert layout.big_icons == 0
    assert layout.empty_icons == 9


def test_icon_layout_small_steals_from_big():
    """Test small spend takes one icon from big when its share rounds to zero"""
    layout = derive_icon_layout(spent_total=1000, budget=1000, big_total=980, small_total=20)

    assert layout.used_icons == 10
    assert layout.big_icons == 9
    assert layout.small_icons == 1


def test_icon_layout_even_split_tie_goes_to_small():
    """Test a single slot split evenly ends up small"""
    # used = round(0.1) = 0 -> forced to 1; big = round(1 * 0.5) = 1; small 0 -> steal back
    layout = derive_icon_layout(spent_total=10, budget=1000, big_total=5, small_total=5)

    assert layout.used_icons == 1
    assert layout.big_icons == 0
    assert layout.small_icons == 1


def test_icon_layout_full_with_only_big_spend():
    """Test big-only spend never produces small icons"""
    layout = derive_icon_layout(spent_total=1500, budget=1000, big_total=1500, small_total=0)

    assert layout.used_icons == 10
    assert layout.big_icons == 10
    assert layout.small_icons == 0
    assert layout.empty_icons == 0


def test_icon_layout_overspend_first_row_only():
    """Test 20% over budget gives two warning icons on the first row"""
    layout = derive_icon_layout(spent_total=1560, budget=1300, big_total=1300, small_total=260)

    assert layout.warning_icons_total == 2
    assert layout.first_row_warnings == 2
    assert layout.warning_rows == []
    assert layout.used_icons == 10
    assert layout.empty_icons == 0


def test_icon_layout_overspend_extra_rows():
    """Test large overspend spills into rows of twelve"""
    # 300% over -> 30 warning icons: 2 on the first row, then 12, 12, 4
    layout = derive_icon_layout(spent_total=4000, budget=1000, big_total=4000, small_total=0)

    assert layout.warning_icons_total == 30
    assert layout.first_row_warnings == 2
    assert layout.warning_rows == [12, 12, 4]


def test_icon_layout_zero_budget_uses_unit_floor():
    """Test a zero budget divides by one instead of failing"""
    layout = derive_icon_layout(spent_total=0.5, budget=0, big_total=0.5, small_total=0)

    assert layout.used_icons == 5
    assert layout.warning_icons_total == 5


@pytest.mark.parametrize(
    "spent,budget,expected",
    [
        (1000, 1000, 0),
        (1001, 1000, 1),
        (1100, 1000, 1),
        (1101, 1000, 2),
    ],
)
def test_count_warning_icons_per_started_ten_percent(spent, budget, expected):
    """Test one warning icon per started 10% of overspend"""
    assert count_warning_icons(spent, budget) == expected


def test_split_warning_rows_none_beyond_first_row():
    """Test up to two icons need no extra rows"""
    assert split_warning_rows(0) == []
    assert split_warning_rows(2) == []
    assert split_warning_rows(3) == [1]
    assert split_warning_rows(14) == [12]
