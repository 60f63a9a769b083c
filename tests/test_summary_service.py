"""Tests for the summary service."""

from datetime import date
from decimal import Decimal

import pytest

from cashflow.domain.entities import IntervalKind, PeriodSummary, RecurrencePolicy
from cashflow.domain.errors import ValidationError


@pytest.fixture
def january(transaction_service, default_categories, make_draft):
    """Store a small month of transactions."""
    transaction_service.create_transaction(
        make_draft(
            date=date(2024, 1, 5),
            description="Salary",
            counterparty="ACME",
            raw_amount=Decimal("100"),
            category_name="income",
        )
    )
    transaction_service.create_transaction(
        make_draft(
            date=date(2024, 1, 5),
            description="Rent",
            counterparty="Landlord",
            raw_amount=Decimal("40"),
            category_name="fixed",
            is_paid=False,
        )
    )
    transaction_service.create_transaction(
        make_draft(
            date=date(2024, 1, 20),
            description="Groceries",
            counterparty="Market",
            raw_amount=Decimal("10"),
            category_name="variable",
        )
    )


def test_summarize_period(summary_service, january):
    result = summary_service.summarize_period(date(2024, 1, 1), date(2024, 1, 31))

    assert result.total_income == Decimal("100")
    assert result.total_expenses == Decimal("50")
    assert result.net_balance == Decimal("50")
    assert result.pending_total == Decimal("40")
    assert [d.date for d in result.daily_series] == [date(2024, 1, 5), date(2024, 1, 20)]
    assert result.daily_series[0].income == Decimal("100")
    assert result.daily_series[0].expenses == Decimal("40")


def test_summarize_period_outside_range(summary_service, january):
    result = summary_service.summarize_period(date(2024, 2, 1), date(2024, 2, 29))

    assert result == PeriodSummary()


def test_summarize_with_filter(summary_service, january):
    result = summary_service.summarize_period(selected_filter="fixed-expenses")

    assert result.total_income == Decimal("0")
    assert result.total_expenses == Decimal("40")


def test_summarize_with_search(summary_service, january):
    result = summary_service.summarize_period(search="market")

    assert result.total_expenses == Decimal("10")
    assert len(result.daily_series) == 1


def test_summarize_unknown_filter(summary_service, january):
    with pytest.raises(ValidationError):
        summary_service.summarize_period(selected_filter="bogus")


def test_summarize_recurring_series_by_month(summary_service, transaction_service, make_draft):
    transaction_service.create_transaction(
        make_draft(
            date=date(2024, 1, 31),
            raw_amount=Decimal("25"),
            recurrence_policy=RecurrencePolicy(IntervalKind.MONTHLY, 31, 3),
        )
    )

    february = summary_service.summarize_period(date(2024, 2, 1), date(2024, 2, 29))

    assert february.total_expenses == Decimal("25")
    assert february.pending_total == Decimal("25")
    assert february.daily_series[0].date == date(2024, 2, 29)
