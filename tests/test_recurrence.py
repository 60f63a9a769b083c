"""Tests for recurrence expansion."""

from datetime import date
from decimal import Decimal

import pytest

from cashflow.domain.classification import CategoryClassifier
from cashflow.domain.entities import (
    Category,
    CategoryType,
    IntervalKind,
    RecurrencePolicy,
)
from cashflow.domain.errors import InvalidRecurrencePolicy, ValidationError
from cashflow.domain.recurrence import (
    add_months,
    days_in_month,
    expand,
    month_step,
    occurrence_dates,
)


def _policy(kind=IntervalKind.MONTHLY, day=31, count=3):
    return RecurrencePolicy(interval_kind=kind, day_of_month=day, occurrence_count=count)


class TestMonthArithmetic:
    """Tests for month stepping helpers."""

    @pytest.mark.parametrize(
        "kind, step",
        [
            (IntervalKind.MONTHLY, 1),
            (IntervalKind.QUARTERLY, 3),
            (IntervalKind.SEMIANNUAL, 6),
            (IntervalKind.ANNUAL, 12),
            ("quarterly", 3),
        ],
    )
    def test_month_step(self, kind, step):
        assert month_step(kind) == step

    def test_month_step_unknown_interval(self):
        with pytest.raises(InvalidRecurrencePolicy):
            month_step("weekly")

    def test_days_in_month(self):
        assert days_in_month(2024, 2) == 29
        assert days_in_month(2023, 2) == 28
        assert days_in_month(2023, 4) == 30
        assert days_in_month(2023, 12) == 31

    def test_add_months_clamps_instead_of_rolling_over(self):
        assert add_months(date(2024, 1, 31), 1, 31) == date(2024, 2, 29)
        assert add_months(date(2023, 1, 31), 1, 31) == date(2023, 2, 28)
        assert add_months(date(2023, 1, 31), 3, 31) == date(2023, 4, 30)

    def test_add_months_crosses_year(self):
        assert add_months(date(2023, 11, 15), 3, 15) == date(2024, 2, 15)

    def test_add_months_ignores_base_day(self):
        # Only the base month matters, the requested day is applied afterwards
        assert add_months(date(2024, 1, 31), 1, 5) == date(2024, 2, 5)


class TestExpand:
    """Tests for expanding a draft into a series."""

    def test_series_length(self, make_draft):
        draft = make_draft(recurrence_policy=_policy(count=5))
        assert len(expand(draft)) == 5

    def test_monthly_clamp_in_leap_year(self, make_draft):
        draft = make_draft(
            date=date(2024, 1, 31),
            recurrence_policy=_policy(IntervalKind.MONTHLY, 31, 3),
        )
        series = expand(draft)

        assert [r.date for r in series] == [
            date(2024, 1, 31),
            date(2024, 2, 29),
            date(2024, 3, 31),
        ]

    def test_quarterly_clamp(self, make_draft):
        draft = make_draft(
            date=date(2023, 1, 31),
            recurrence_policy=_policy(IntervalKind.QUARTERLY, 31, 4),
        )
        series = expand(draft)

        assert [r.date for r in series] == [
            date(2023, 1, 31),
            date(2023, 4, 30),
            date(2023, 7, 31),
            date(2023, 10, 31),
        ]

    def test_semiannual_steps(self, make_draft):
        draft = make_draft(
            date=date(2023, 3, 10),
            recurrence_policy=_policy(IntervalKind.SEMIANNUAL, 10, 3),
        )
        assert [r.date for r in expand(draft)] == [
            date(2023, 3, 10),
            date(2023, 9, 10),
            date(2024, 3, 10),
        ]

    def test_annual_leap_day(self, make_draft):
        draft = make_draft(
            date=date(2024, 2, 29),
            recurrence_policy=_policy(IntervalKind.ANNUAL, 29, 5),
        )
        assert [r.date for r in expand(draft)] == [
            date(2024, 2, 29),
            date(2025, 2, 28),
            date(2026, 2, 28),
            date(2027, 2, 28),
            date(2028, 2, 29),
        ]

    def test_clamped_day_does_not_drift(self, make_draft):
        draft = make_draft(
            date=date(2023, 1, 31),
            recurrence_policy=_policy(IntervalKind.MONTHLY, 31, 12),
        )
        series = expand(draft)

        for record in series:
            assert record.date.day == days_in_month(record.date.year, record.date.month)

    def test_dates_strictly_increasing(self, make_draft):
        draft = make_draft(
            date=date(2024, 1, 31),
            recurrence_policy=_policy(IntervalKind.MONTHLY, 1, 6),
        )
        dates = [r.date for r in expand(draft)]

        assert dates[1] == date(2024, 2, 1)
        assert all(later > earlier for earlier, later in zip(dates, dates[1:]))

    def test_only_anchor_keeps_paid_flag(self, make_draft):
        draft = make_draft(is_paid=True, recurrence_policy=_policy(count=4))
        series = expand(draft)

        assert series[0].is_paid is True
        assert all(r.is_paid is False for r in series[1:])

    def test_unpaid_anchor_stays_unpaid(self, make_draft):
        draft = make_draft(is_paid=False, recurrence_policy=_policy(count=2))
        assert [r.is_paid for r in expand(draft)] == [False, False]

    def test_fields_copied_and_sign_constant(self, make_draft):
        draft = make_draft(
            description="Rent",
            counterparty="Landlord",
            raw_amount=Decimal("1200.00"),
            category_name="fixed",
            recurrence_policy=_policy(count=3),
        )
        series = expand(draft)

        for record in series:
            assert record.description == "Rent"
            assert record.counterparty == "Landlord"
            assert record.category_name == "fixed"
            assert record.payment_method == draft.payment_method
            assert record.signed_amount == Decimal("-1200.00")
            assert record.raw_amount == Decimal("1200.00")
            assert record.id is None

    def test_income_series_is_positive(self, make_draft):
        categories = [
            Category(id=1, name="salary", category_type=CategoryType.INCOME, created_at=None)
        ]
        draft = make_draft(
            category_name="salary",
            raw_amount=Decimal("3000"),
            recurrence_policy=_policy(count=3),
        )
        series = expand(draft, CategoryClassifier(categories))

        assert all(r.signed_amount == Decimal("3000") for r in series)

    def test_sign_matches_classification(self, make_draft):
        classifier = CategoryClassifier()
        for category_name in ["income", "fixed", "unknown"]:
            draft = make_draft(category_name=category_name, recurrence_policy=_policy())
            is_income = classifier.classify(category_name).is_income
            for record in expand(draft, classifier):
                assert (record.signed_amount > 0) == is_income

    def test_interval_given_as_string(self, make_draft):
        draft = make_draft(
            date=date(2023, 1, 31),
            recurrence_policy=_policy("quarterly", 31, 2),
        )
        series = expand(draft)

        assert series[1].date == date(2023, 4, 30)
        assert series[1].recurrence_policy.interval_kind is IntervalKind.QUARTERLY


class TestInvalidPolicy:
    """Tests for malformed recurrence policies."""

    def test_missing_policy(self, make_draft):
        with pytest.raises(InvalidRecurrencePolicy):
            expand(make_draft())

    @pytest.mark.parametrize("count", [1, 0, -3, 2.5, True])
    def test_bad_occurrence_count(self, make_draft, count):
        with pytest.raises(InvalidRecurrencePolicy):
            expand(make_draft(recurrence_policy=_policy(count=count)))

    @pytest.mark.parametrize("day", [0, 32, -1])
    def test_bad_day_of_month(self, make_draft, day):
        with pytest.raises(InvalidRecurrencePolicy):
            expand(make_draft(recurrence_policy=_policy(day=day)))

    def test_unknown_interval(self, make_draft):
        with pytest.raises(InvalidRecurrencePolicy):
            expand(make_draft(recurrence_policy=_policy(kind="weekly")))

    def test_is_a_validation_error(self, make_draft):
        with pytest.raises(ValidationError):
            expand(make_draft(recurrence_policy=_policy(count=1)))

    def test_occurrence_dates_validates_lazily_on_iteration(self):
        dates = occurrence_dates(date(2024, 1, 1), _policy(count=1))
        with pytest.raises(InvalidRecurrencePolicy):
            list(dates)
