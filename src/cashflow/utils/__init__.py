"""Utility functions for cashflow."""

from cashflow.utils.date_parser import (
    parse_date,
    month_range,
    get_date_range,
    to_calendar_day,
)
from cashflow.utils.amount_parser import parse_amount, to_cents

__all__ = [
    "parse_date",
    "month_range",
    "get_date_range",
    "to_calendar_day",
    "parse_amount",
    "to_cents",
]
