"""Abstract database interface."""

from abc import ABC, abstractmethod
from typing import Optional, Sequence
from datetime import date

# Import entities directly to avoid circular import through domain/__init__.py
from cashflow.domain.entities import (
    Category,
    CategoryType,
    TransactionRecord,
)


class Database(ABC):
    """Abstract storage collaborator for cashflow."""

    @abstractmethod
    def connect(self) -> None:
        """Connect to the database."""
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Disconnect from the database."""
        pass

    @abstractmethod
    def initialize_schema(self) -> None:
        """Initialize database schema (create tables)."""
        pass

    # Category operations
    @abstractmethod
    def create_category(self, name: str, category_type: CategoryType) -> int:
        """Create a category. Returns category ID."""
        pass

    @abstractmethod
    def get_category(self, category_id: int) -> Optional[Category]:
        """Get category by ID."""
        pass

    @abstractmethod
    def get_category_by_name(self, name: str) -> Optional[Category]:
        """Get category by name."""
        pass

    @abstractmethod
    def list_categories(self) -> list[Category]:
        """List all categories ordered by name."""
        pass

    # Transaction operations
    @abstractmethod
    def create_transactions(self, records: Sequence[TransactionRecord]) -> list[int]:
        """Insert records in one batch. Returns assigned IDs in input order."""
        pass

    @abstractmethod
    def get_transaction(self, transaction_id: int) -> Optional[TransactionRecord]:
        """Get transaction by ID."""
        pass

    @abstractmethod
    def list_transactions(
        self,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> list[TransactionRecord]:
        """List transactions in an inclusive date range, newest first."""
        pass

    @abstractmethod
    def update_transaction_paid(self, transaction_id: int, is_paid: bool) -> None:
        """Set the paid flag of a transaction."""
        pass

    @abstractmethod
    def delete_transaction(self, transaction_id: int) -> None:
        """Delete a transaction."""
        pass
