"""Period aggregation: totals and per-day series."""

import logging
from collections import defaultdict
from datetime import date
from decimal import Decimal
from typing import Iterable, Optional

from cashflow.database.base import Database
from cashflow.domain.entities import DailyTotals, PeriodSummary, TransactionRecord
from cashflow.domain.filters import filter_transactions
from cashflow.utils.date_parser import to_calendar_day

logger = logging.getLogger(__name__)

ZERO = Decimal("0")


def summarize(records: Iterable[TransactionRecord]) -> PeriodSummary:
    """Reduce records to income, expense and balance figures.

    Only days present in the input appear in the daily series; no zero
    entries are synthesized for gaps.

    Args:
        records: Signed transaction records, already filtered by the caller

    Returns:
        PeriodSummary with totals and an ascending per-day series
    """
    total_income = ZERO
    total_expenses = ZERO
    pending_total = ZERO
    daily: dict[date, dict[str, Decimal]] = defaultdict(
        lambda: {"income": ZERO, "expenses": ZERO}
    )

    for record in records:
        amount = Decimal(record.signed_amount)
        bucket = daily[to_calendar_day(record.date)]
        if amount > 0:
            total_income += amount
            bucket["income"] += amount
        elif amount < 0:
            total_expenses += -amount
            bucket["expenses"] += -amount
        if not record.is_paid:
            pending_total += abs(amount)

    daily_series = tuple(
        DailyTotals(date=day, income=values["income"], expenses=values["expenses"])
        for day, values in sorted(daily.items())
    )

    return PeriodSummary(
        total_income=total_income,
        total_expenses=total_expenses,
        net_balance=total_income - total_expenses,
        daily_series=daily_series,
        pending_total=pending_total,
    )


class SummaryService:
    """Service for building period summaries from stored transactions."""

    def __init__(self, db: Database):
        """Initialize summary service.

        Args:
            db: Database instance
        """
        self.db = db

    def summarize_period(
        self,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        selected_filter: Optional[str] = None,
        search: Optional[str] = None,
    ) -> PeriodSummary:
        """Summarize stored transactions for a period.

        Args:
            start_date: Optional start date filter (inclusive)
            end_date: Optional end date filter (inclusive)
            selected_filter: Optional filter key
            search: Optional free-text search on description/counterparty

        Returns:
            PeriodSummary for the matching transactions
        """
        records = self.db.list_transactions(start_date=start_date, end_date=end_date)
        records = filter_transactions(records, selected_filter, search)
        logger.debug(
            "Summarizing %d transaction(s) between %s and %s",
            len(records),
            start_date,
            end_date,
        )
        return summarize(records)
