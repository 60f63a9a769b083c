"""Domain model entities for cashflow.

These are pure data classes representing ledger concepts, independent of
the database schema. The engine modules (classification, recurrence,
duplicates, summary) consume and produce only these types.
"""

from dataclasses import dataclass, field
from datetime import datetime, date
from decimal import Decimal
from enum import Enum
from typing import Optional


class CategoryType(str, Enum):
    """Whether money in a category enters or leaves the ledger."""

    INCOME = "income"
    EXPENSE = "expense"


class PaymentMethod(str, Enum):
    """How a transaction was paid. Carried through untouched."""

    PIX = "pix"
    CREDIT = "credit"
    DEBIT = "debit"
    CASH = "cash"
    TRANSFER = "transfer"


class IntervalKind(str, Enum):
    """Spacing between occurrences of a recurring transaction."""

    MONTHLY = "monthly"
    QUARTERLY = "quarterly"
    SEMIANNUAL = "semiannual"
    ANNUAL = "annual"


MONTH_STEPS = {
    IntervalKind.MONTHLY: 1,
    IntervalKind.QUARTERLY: 3,
    IntervalKind.SEMIANNUAL: 6,
    IntervalKind.ANNUAL: 12,
}


@dataclass(frozen=True)
class Category:
    """Category metadata entry."""

    id: int
    name: str
    category_type: CategoryType
    created_at: datetime


@dataclass(frozen=True)
class RecurrencePolicy:
    """How a draft repeats: interval, target day and total occurrences."""

    interval_kind: IntervalKind
    day_of_month: int
    occurrence_count: int


@dataclass(frozen=True)
class TransactionDraft:
    """User-entered transaction before signing and expansion."""

    date: date
    description: str
    counterparty: str
    raw_amount: Decimal
    category_name: str
    payment_method: PaymentMethod
    is_paid: bool = True
    recurrence_policy: Optional[RecurrencePolicy] = None


@dataclass(frozen=True)
class TransactionRecord:
    """Signed transaction, either freshly generated or loaded from storage.

    ``id`` stays None until the storage layer assigns one.
    """

    date: date
    description: str
    counterparty: str
    raw_amount: Decimal
    category_name: str
    payment_method: PaymentMethod
    is_paid: bool
    signed_amount: Decimal
    recurrence_policy: Optional[RecurrencePolicy] = None
    id: Optional[int] = None

    @property
    def is_income(self) -> bool:
        return self.signed_amount > 0


@dataclass(frozen=True)
class DailyTotals:
    """Income and expense sums for one calendar day."""

    date: date
    income: Decimal
    expenses: Decimal


@dataclass(frozen=True)
class PeriodSummary:
    """Aggregate figures over an arbitrary set of transactions."""

    total_income: Decimal = Decimal("0")
    total_expenses: Decimal = Decimal("0")
    net_balance: Decimal = Decimal("0")
    daily_series: tuple[DailyTotals, ...] = field(default_factory=tuple)
    pending_total: Decimal = Decimal("0")
