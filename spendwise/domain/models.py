"""Domain models - pure Python dataclasses for the allowance engine"""

from dataclasses import dataclass, field
from datetime import date, datetime, time
from typing import List, Optional


@dataclass(frozen=True)
class Purchase:
    """Dated spend record. The engine only reads amount and date."""

    amount: float
    date: date
    description: str = ""
    purchase_id: Optional[str] = None


@dataclass(frozen=True)
class DateRange:
    """Inclusive calendar range (a monthly cycle or a week)"""

    start: date
    end: date

    @property
    def start_at(self) -> datetime:
        """Start floored to the beginning of its day"""
        return datetime.combine(self.start, time.min)

    @property
    def end_at(self) -> datetime:
        """End ceiled to the end of its day"""
        return datetime.combine(self.end, time.max)

    @property
    def days(self) -> int:
        return (self.end - self.start).days + 1

    def contains(self, day: date) -> bool:
        return self.start <= day <= self.end


@dataclass(frozen=True)
class AllowanceProjection:
    """Pro-rated budget available as of a given day"""

    days_in_range: int
    daily_budget: float
    days_elapsed: int
    allowed_by_today: float


@dataclass(frozen=True)
class SpendAggregate:
    """Spend in a range, split into big and small purchases"""

    total: float
    big_total: float
    small_total: float
    big_count: int
    small_count: int

    @property
    def count(self) -> int:
        return self.big_count + self.small_count


@dataclass(frozen=True)
class IconLayout:
    """Fixed 10-slot progress display plus overspend warning rows"""

    total_icons: int
    used_icons: int
    big_icons: int
    small_icons: int
    empty_icons: int
    warning_icons_total: int
    first_row_warnings: int
    warning_rows: List[int] = field(default_factory=list)


@dataclass(frozen=True)
class BudgetSettings:
    """Per-workspace numeric budget configuration"""

    monthly_budget: float
    budget_start_day: int
    weekly_budget: float
    week_start_day_of_week: int
    big_purchase_ratio: float = 0.25


@dataclass(frozen=True)
class MonthlySummary:
    cycle: DateRange
    budget: float
    spent: float
    budget_left: float
    projection: AllowanceProjection
    spent_to_date: float
    allowed_by_today_net: float


@dataclass(frozen=True)
class WeeklySummary:
    week: DateRange
    budget: float
    big_threshold: float
    spend: SpendAggregate
    left: float
    projection: AllowanceProjection
    spent_to_date: float
    allowed_by_today_net: float
    icons: IconLayout
    is_current_week: bool

    @property
    def status(self) -> str:
        return "on_track" if self.left >= 0 else "over"


@dataclass(frozen=True)
class BudgetSummary:
    """Everything the dashboard shows for one workspace on one day"""

    today: date
    monthly: MonthlySummary
    weekly: WeeklySummary


@dataclass(frozen=True)
class DaySpend:
    """Purchases of a single day within a week"""

    day: date
    total: float
    purchases: List[Purchase]


@dataclass(frozen=True)
class WeekDetails:
    """Day-by-day breakdown of one week with navigation anchors"""

    week: DateRange
    days: List[DaySpend]
    previous_start: date
    next_start: date
    next_disabled: bool
