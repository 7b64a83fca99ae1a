"""Display formatting for amounts and week ranges"""

import calendar
from datetime import date


def format_currency(amount: float, currency_code: str) -> str:
    """
    Format an amount with its ISO 4217 code.

    Example:
        format_currency(1234.5, "ILS") -> "1,234.50 ILS"
    """
    return f"{amount:,.2f} {currency_code}"


def format_day_month_short(day: date) -> str:
    return f"{day.day} {calendar.month_abbr[day.month]}"


def format_week_range(start: date, end: date) -> str:
    """
    Human week range for titles.

    Same month: "3-9 March". Across months: "28 Feb - 6 Mar".
    """
    if start.year == end.year and start.month == end.month:
        return f"{start.day}-{end.day} {calendar.month_name[end.month]}"
    return f"{format_day_month_short(start)} - {format_day_month_short(end)}"
