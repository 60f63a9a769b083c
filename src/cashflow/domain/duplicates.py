"""Duplicate detection for manually entered transactions."""

from collections import defaultdict
from datetime import date
from decimal import Decimal
from typing import Iterable, Optional

from cashflow.domain.classification import CategoryClassifier
from cashflow.domain.entities import TransactionDraft, TransactionRecord
from cashflow.utils.date_parser import to_calendar_day

AMOUNT_EPSILON = Decimal("0.01")


def _same_entry(
    day: date,
    description: str,
    counterparty: str,
    payment_method,
    amount: Decimal,
    other: TransactionRecord,
) -> bool:
    return (
        to_calendar_day(other.date) == day
        and other.description == description
        and other.counterparty == counterparty
        and other.payment_method == payment_method
        and abs(Decimal(other.signed_amount) - amount) < AMOUNT_EPSILON
    )


def is_duplicate(
    candidate: TransactionDraft,
    existing: Iterable[TransactionRecord],
    classifier: Optional[CategoryClassifier] = None,
) -> bool:
    """Check whether a draft matches an already stored record.

    A match is a record on the same calendar day with equal description,
    counterparty and payment method, and a signed amount less than one cent
    away. The answer is advisory; callers decide whether to block.

    Args:
        candidate: Draft about to be saved
        existing: Stored records to compare against
        classifier: Classifier used to sign the draft's amount

    Returns:
        True if any existing record matches
    """
    classifier = classifier or CategoryClassifier()
    amount = classifier.sign(candidate.raw_amount, candidate.category_name)
    day = to_calendar_day(candidate.date)

    return any(
        _same_entry(
            day,
            candidate.description,
            candidate.counterparty,
            candidate.payment_method,
            amount,
            record,
        )
        for record in existing
    )


def find_duplicate_groups(
    records: Iterable[TransactionRecord],
) -> list[tuple[TransactionRecord, ...]]:
    """Group stored records that the duplicate rule considers equal.

    Records are bucketed by day, description, counterparty and payment
    method. Within a bucket, amounts are sorted and each group holds the
    records less than one cent above its smallest amount, so every pair in
    a group is itself a duplicate. Only groups with two or more records are
    returned, ordered by date.
    """
    buckets: dict[tuple, list[TransactionRecord]] = defaultdict(list)
    for record in records:
        key = (
            to_calendar_day(record.date),
            record.description,
            record.counterparty,
            record.payment_method,
        )
        buckets[key].append(record)

    groups: list[tuple[TransactionRecord, ...]] = []
    for key in sorted(buckets, key=lambda k: (k[0], k[1], k[2], str(k[3]))):
        members = sorted(buckets[key], key=lambda r: Decimal(r.signed_amount))
        current = [members[0]]
        for record in members[1:]:
            lowest = current[0]
            if Decimal(record.signed_amount) - Decimal(lowest.signed_amount) < AMOUNT_EPSILON:
                current.append(record)
            else:
                if len(current) > 1:
                    groups.append(tuple(current))
                current = [record]
        if len(current) > 1:
            groups.append(tuple(current))

    return groups
