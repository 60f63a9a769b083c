"""Transaction domain service."""

import logging
from dataclasses import replace
from typing import Optional
from datetime import date

from cashflow.database.base import Database
from cashflow.domain.category import CategoryService
from cashflow.domain.duplicates import find_duplicate_groups, is_duplicate
from cashflow.domain.entities import TransactionDraft, TransactionRecord
from cashflow.domain.errors import (
    DuplicateTransactionError,
    NotFoundError,
    ValidationError,
    possible_duplicate,
    transaction_not_found,
)
from cashflow.domain.filters import filter_transactions, validate_filter
from cashflow.domain.recurrence import expand, validate_day_of_month
from cashflow.utils.amount_parser import to_cents

logger = logging.getLogger(__name__)


class TransactionService:
    """Service for creating and managing transactions."""

    def __init__(self, db: Database):
        """Initialize transaction service.

        Args:
            db: Database instance
        """
        self.db = db
        self.categories = CategoryService(db)

    def build_records(
        self, draft: TransactionDraft, selected_filter: Optional[str] = None
    ) -> tuple[TransactionRecord, ...]:
        """Sign a draft and expand it into the records to store.

        The amount is rounded to cents first, so the returned records match
        what storage keeps. A draft without a recurrence policy, or with an
        occurrence count of one, produces a single record.

        Args:
            draft: Transaction draft
            selected_filter: Filter key active while entering the draft

        Returns:
            Records ordered by date, anchor first

        Raises:
            ValidationError: If the amount rounds to zero
            InvalidRecurrencePolicy: If the recurrence policy is malformed
        """
        selected_filter = validate_filter(selected_filter)
        draft = self._rounded(draft)
        classifier = self.categories.get_classifier(selected_filter)
        policy = draft.recurrence_policy

        if policy is None or policy.occurrence_count == 1:
            if policy is not None:
                validate_day_of_month(policy.day_of_month)
            return (
                TransactionRecord(
                    date=draft.date,
                    description=draft.description,
                    counterparty=draft.counterparty,
                    raw_amount=draft.raw_amount,
                    category_name=draft.category_name,
                    payment_method=draft.payment_method,
                    is_paid=draft.is_paid,
                    signed_amount=classifier.sign(draft.raw_amount, draft.category_name),
                ),
            )

        return expand(draft, classifier)

    @staticmethod
    def _rounded(draft: TransactionDraft) -> TransactionDraft:
        amount = to_cents(abs(draft.raw_amount))
        if amount == 0:
            raise ValidationError(
                f"Amount must be at least one cent, got {draft.raw_amount}"
            )
        return replace(draft, raw_amount=amount)

    def check_duplicate(
        self, draft: TransactionDraft, selected_filter: Optional[str] = None
    ) -> bool:
        """Check the draft against stored transactions on the same day."""
        selected_filter = validate_filter(selected_filter)
        draft = self._rounded(draft)
        existing = self.db.list_transactions(start_date=draft.date, end_date=draft.date)
        return is_duplicate(
            draft, existing, self.categories.get_classifier(selected_filter)
        )

    def create_transaction(
        self,
        draft: TransactionDraft,
        selected_filter: Optional[str] = None,
        allow_duplicate: bool = False,
    ) -> list[int]:
        """Create a transaction and, if recurring, all its future occurrences.

        Args:
            draft: Transaction draft
            selected_filter: Filter key active while entering the draft
            allow_duplicate: Save even if the duplicate guard matches

        Returns:
            IDs of the stored records, anchor first

        Raises:
            DuplicateTransactionError: If a matching transaction exists and
                allow_duplicate is False
            InvalidRecurrencePolicy: If the recurrence policy is malformed
        """
        records = self.build_records(draft, selected_filter)

        if self.check_duplicate(draft, selected_filter):
            if not allow_duplicate:
                raise DuplicateTransactionError(
                    possible_duplicate(draft.description, draft.date)
                )
            logger.warning(
                "Saving possible duplicate '%s' on %s", draft.description, draft.date
            )

        ids = self.db.create_transactions(records)
        logger.info(
            "Created %d record(s) for '%s' starting %s",
            len(ids),
            draft.description,
            draft.date,
        )
        return ids

    def get_transaction(self, transaction_id: int) -> Optional[TransactionRecord]:
        return self.db.get_transaction(transaction_id)

    def require_transaction(self, transaction_id: int) -> TransactionRecord:
        """Get transaction by ID or raise NotFoundError."""
        txn = self.db.get_transaction(transaction_id)
        if txn is None:
            raise NotFoundError(transaction_not_found(transaction_id))
        return txn

    def list_transactions(
        self,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        selected_filter: Optional[str] = None,
        search: Optional[str] = None,
    ) -> list[TransactionRecord]:
        """List transactions with filters.

        Args:
            start_date: Optional start date filter
            end_date: Optional end date filter
            selected_filter: Optional filter key (see filters.FILTER_KEYS)
            search: Optional text matched against description/counterparty

        Returns:
            Matching records, newest first
        """
        records = self.db.list_transactions(start_date=start_date, end_date=end_date)
        return filter_transactions(records, selected_filter, search)

    def set_paid(self, transaction_id: int, is_paid: bool) -> None:
        self.require_transaction(transaction_id)
        self.db.update_transaction_paid(transaction_id, is_paid)

    def toggle_paid(self, transaction_id: int) -> bool:
        """Flip the paid flag of a transaction.

        Returns:
            The new paid flag
        """
        txn = self.require_transaction(transaction_id)
        self.db.update_transaction_paid(transaction_id, not txn.is_paid)
        return not txn.is_paid

    def delete_transaction(self, transaction_id: int) -> None:
        """Delete a transaction.

        Raises:
            NotFoundError: If transaction doesn't exist
        """
        self.require_transaction(transaction_id)
        self.db.delete_transaction(transaction_id)
        logger.info("Deleted transaction %d", transaction_id)

    def find_duplicates(
        self,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> list[tuple[TransactionRecord, ...]]:
        """Find groups of stored transactions that look like duplicates."""
        return find_duplicate_groups(
            self.db.list_transactions(start_date=start_date, end_date=end_date)
        )
