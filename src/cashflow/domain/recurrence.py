"""Recurrence expansion: one draft into a dated series of records."""

import calendar
from dataclasses import replace
from datetime import date
from typing import Iterator, Optional

from dateutil.relativedelta import relativedelta

from cashflow.domain.classification import CategoryClassifier
from cashflow.domain.entities import (
    MONTH_STEPS,
    IntervalKind,
    RecurrencePolicy,
    TransactionDraft,
    TransactionRecord,
)
from cashflow.domain.errors import InvalidRecurrencePolicy


def month_step(interval_kind: IntervalKind) -> int:
    """Return the number of months between two occurrences."""
    try:
        return MONTH_STEPS[IntervalKind(interval_kind)]
    except ValueError:
        raise InvalidRecurrencePolicy(
            f"Unknown interval '{interval_kind}'. "
            f"Supported intervals: {', '.join(kind.value for kind in IntervalKind)}"
        )


def days_in_month(year: int, month: int) -> int:
    return calendar.monthrange(year, month)[1]


def add_months(base: date, months: int, day_of_month: int) -> date:
    """Move ``base`` forward by whole months and pin the day.

    The month offset is applied to the first of the month, so the day of
    ``base`` never influences which month is reached. ``day_of_month`` is
    clamped to the last day of that month instead of rolling over
    (Jan 31 + 1 month is Feb 28/29, never Mar 2/3).

    Args:
        base: Date whose month is the starting point
        months: Number of months to add
        day_of_month: Desired day in the target month (1..31)

    Returns:
        Date in the target month
    """
    target = base.replace(day=1) + relativedelta(months=months)
    last_day = days_in_month(target.year, target.month)
    return target.replace(day=min(day_of_month, last_day))


def validate_day_of_month(day) -> int:
    """Check a day of month is an integer in 1..31."""
    if isinstance(day, bool) or not isinstance(day, int) or not 1 <= day <= 31:
        raise InvalidRecurrencePolicy(
            f"Day of month must be between 1 and 31, got {day!r}"
        )
    return day


def validate_policy(policy: Optional[RecurrencePolicy]) -> RecurrencePolicy:
    """Check a recurrence policy and return it with a normalized interval.

    Raises:
        InvalidRecurrencePolicy: If the policy is missing or malformed
    """
    if policy is None:
        raise InvalidRecurrencePolicy("Recurrence policy is required")

    count = policy.occurrence_count
    if isinstance(count, bool) or not isinstance(count, int) or count < 2:
        raise InvalidRecurrencePolicy(
            f"Occurrence count must be an integer of at least 2, got {count!r}"
        )

    validate_day_of_month(policy.day_of_month)
    month_step(policy.interval_kind)
    return replace(policy, interval_kind=IntervalKind(policy.interval_kind))


def occurrence_dates(anchor_date: date, policy: RecurrencePolicy) -> Iterator[date]:
    """Yield the date of every occurrence, anchor first.

    Each date is computed from the anchor's month, never from the previous
    occurrence, so a clamped day does not drift into later months.
    """
    policy = validate_policy(policy)
    step = month_step(policy.interval_kind)

    yield anchor_date
    for k in range(1, policy.occurrence_count):
        yield add_months(anchor_date, k * step, policy.day_of_month)


def expand(
    draft: TransactionDraft, classifier: Optional[CategoryClassifier] = None
) -> tuple[TransactionRecord, ...]:
    """Expand a recurring draft into its full series of records.

    The anchor keeps the draft's date and paid flag; every later occurrence
    is unpaid. All records share the draft's sign.

    Args:
        draft: Draft carrying a recurrence policy with at least 2 occurrences
        classifier: Classifier used to sign the amount (defaults to one
            without category metadata)

    Returns:
        Tuple of records ordered by date

    Raises:
        InvalidRecurrencePolicy: If the policy is missing or malformed
    """
    policy = validate_policy(draft.recurrence_policy)
    classifier = classifier or CategoryClassifier()
    amount = classifier.sign(draft.raw_amount, draft.category_name)

    series = []
    for index, occurrence_date in enumerate(occurrence_dates(draft.date, policy)):
        series.append(
            TransactionRecord(
                date=occurrence_date,
                description=draft.description,
                counterparty=draft.counterparty,
                raw_amount=abs(draft.raw_amount),
                category_name=draft.category_name,
                payment_method=draft.payment_method,
                is_paid=draft.is_paid if index == 0 else False,
                signed_amount=amount,
                recurrence_policy=policy,
            )
        )
    return tuple(series)
