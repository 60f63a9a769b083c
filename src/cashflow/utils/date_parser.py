"""Date parsing utilities."""

from datetime import date, datetime, timedelta
from typing import Optional

from dateutil import parser as date_parser
from dateutil.relativedelta import relativedelta


def to_calendar_day(value: date) -> date:
    """Drop the time part of a datetime; plain dates pass through."""
    if isinstance(value, datetime):
        return value.date()
    return value


def parse_date(date_str: str, today: Optional[date] = None) -> date:
    """Parse a date string into a date object.

    Accepts "today", "yesterday", "tomorrow" and anything dateutil can
    parse ("2024-01-15", "January 15, 2024", ...).

    Args:
        date_str: Date string
        today: Reference day for relative names (defaults to date.today())

    Returns:
        Date object

    Raises:
        ValueError: If date string cannot be parsed
    """
    date_str = date_str.strip().lower()
    today = today or date.today()

    relative_dates = {
        "today": today,
        "yesterday": today - timedelta(days=1),
        "tomorrow": today + timedelta(days=1),
    }
    if date_str in relative_dates:
        return relative_dates[date_str]

    try:
        return date_parser.parse(date_str).date()
    except (ValueError, TypeError, OverflowError) as e:
        raise ValueError(f"Could not parse date '{date_str}': {e}")


def month_range(month_str: str) -> tuple[date, date]:
    """Return the first and last day of a "YYYY-MM" month.

    Raises:
        ValueError: If the string is not a valid year-month
    """
    try:
        year, month = (int(part) for part in month_str.strip().split("-"))
        start = date(year, month, 1)
    except (ValueError, TypeError) as e:
        raise ValueError(f"Could not parse month '{month_str}' (expected YYYY-MM): {e}")
    end = start + relativedelta(months=1) - timedelta(days=1)
    return start, end


def get_date_range(period: str, today: Optional[date] = None) -> tuple[date, date]:
    """Get start and end dates for a named period.

    Args:
        period: "this-month" or "last-month"
        today: Reference day (defaults to date.today())

    Returns:
        Tuple of (start_date, end_date) covering the whole month

    Raises:
        ValueError: If period string is not recognized
    """
    period = period.strip().lower()
    today = today or date.today()

    if period == "this-month":
        return month_range(today.strftime("%Y-%m"))
    if period == "last-month":
        return month_range((today - relativedelta(months=1)).strftime("%Y-%m"))

    raise ValueError(f"Unknown period: '{period}'. Supported periods: this-month, last-month")
