"""Tests for date and amount parsing."""

from datetime import date, datetime, timedelta
from decimal import Decimal

import pytest

from cashflow.utils.amount_parser import parse_amount
from cashflow.utils.date_parser import get_date_range, month_range, parse_date, to_calendar_day

TODAY = date(2024, 3, 15)


def test_parse_absolute_date():
    assert parse_date("2024-01-15") == date(2024, 1, 15)


def test_parse_long_format():
    assert parse_date("January 15, 2024") == date(2024, 1, 15)


@pytest.mark.parametrize(
    "text, offset",
    [("today", 0), ("Yesterday", -1), (" tomorrow ", 1)],
)
def test_parse_relative(text, offset):
    assert parse_date(text, today=TODAY) == TODAY + timedelta(days=offset)


def test_parse_defaults_to_real_today():
    assert parse_date("today") == date.today()


def test_parse_invalid():
    with pytest.raises(ValueError):
        parse_date("not a date")


def test_month_range():
    assert month_range("2024-02") == (date(2024, 2, 1), date(2024, 2, 29))
    assert month_range("2023-12") == (date(2023, 12, 1), date(2023, 12, 31))


@pytest.mark.parametrize("text", ["2024", "2024-13", "jan-2024", ""])
def test_month_range_invalid(text):
    with pytest.raises(ValueError):
        month_range(text)


def test_get_date_range_this_month():
    assert get_date_range("this-month", today=TODAY) == (date(2024, 3, 1), date(2024, 3, 31))


def test_get_date_range_last_month():
    assert get_date_range("last-month", today=TODAY) == (date(2024, 2, 1), date(2024, 2, 29))
    assert get_date_range("last-month", today=date(2024, 1, 10)) == (
        date(2023, 12, 1),
        date(2023, 12, 31),
    )


def test_get_date_range_unknown():
    with pytest.raises(ValueError):
        get_date_range("next-decade")


def test_to_calendar_day():
    assert to_calendar_day(datetime(2024, 1, 15, 23, 59)) == date(2024, 1, 15)
    assert to_calendar_day(date(2024, 1, 15)) == date(2024, 1, 15)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("123.45", Decimal("123.45")),
        ("$1,234.56", Decimal("1234.56")),
        ("R$ 99.90", Decimal("99.90")),
        ("-50", Decimal("50")),
        ("  7 ", Decimal("7")),
        ("10.005", Decimal("10.01")),
        ("10.004", Decimal("10.00")),
    ],
)
def test_parse_amount(text, expected):
    assert parse_amount(text) == expected


@pytest.mark.parametrize("text", ["", "   ", "abc", "0", "0.00", "0.004", "NaN"])
def test_parse_amount_invalid(text):
    with pytest.raises(ValueError):
        parse_amount(text)
