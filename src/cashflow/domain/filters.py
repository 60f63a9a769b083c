"""Transaction list filters used by reporting views."""

from typing import Iterable, Optional

from cashflow.domain.classification import INCOME_CATEGORY, INCOME_FILTER
from cashflow.domain.entities import TransactionRecord
from cashflow.domain.errors import ValidationError, unknown_filter

ALL_FILTER = "all"

# Filter key -> category used when a transaction is created from that filter
FILTER_CATEGORIES = {
    ALL_FILTER: INCOME_CATEGORY,
    INCOME_FILTER: INCOME_CATEGORY,
    "fixed-expenses": "fixed",
    "variable-expenses": "variable",
    "people": "people",
    "taxes": "taxes",
    "transfers": "transfer",
}

FILTER_KEYS = list(FILTER_CATEGORIES)


def validate_filter(selected_filter: Optional[str]) -> str:
    """Return the filter key, defaulting to "all".

    Raises:
        ValidationError: If the key is not a known filter
    """
    if selected_filter is None:
        return ALL_FILTER
    if selected_filter not in FILTER_CATEGORIES:
        raise ValidationError(unknown_filter(selected_filter, FILTER_KEYS))
    return selected_filter


def default_category_for_filter(selected_filter: Optional[str]) -> str:
    """Return the category assigned to transactions created under a filter."""
    return FILTER_CATEGORIES[validate_filter(selected_filter)]


def matches_filter(record: TransactionRecord, selected_filter: str) -> bool:
    """Check whether a record belongs to a filter."""
    if selected_filter == ALL_FILTER:
        return True
    if selected_filter == INCOME_FILTER:
        return record.signed_amount > 0
    if selected_filter in ("fixed-expenses", "variable-expenses"):
        return (
            record.signed_amount < 0
            and record.category_name == FILTER_CATEGORIES[selected_filter]
        )
    return record.category_name == FILTER_CATEGORIES[selected_filter]


def matches_search(record: TransactionRecord, search: Optional[str]) -> bool:
    """Case-insensitive substring match on description or counterparty."""
    if not search:
        return True
    needle = search.lower()
    return needle in (record.description or "").lower() or needle in (
        record.counterparty or ""
    ).lower()


def filter_transactions(
    records: Iterable[TransactionRecord],
    selected_filter: Optional[str] = None,
    search: Optional[str] = None,
) -> list[TransactionRecord]:
    """Apply a filter key and a search query to a list of records.

    Args:
        records: Records to filter, order is preserved
        selected_filter: Filter key (see FILTER_KEYS); None means all
        search: Optional free-text query

    Returns:
        Matching records
    """
    selected_filter = validate_filter(selected_filter)
    return [
        record
        for record in records
        if matches_filter(record, selected_filter) and matches_search(record, search)
    ]
