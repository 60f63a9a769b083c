"""Mapper functions to convert between domain models and SQLAlchemy models.

This layer isolates the conversion logic, so the engine never sees ORM rows
and the schema never has to mirror the engine's types one to one.
"""

from decimal import Decimal

from cashflow.domain import entities as domain
from cashflow.database.models import (
    Category as ORMCategory,
    Transaction as ORMTransaction,
)


def category_to_domain(orm_category: ORMCategory) -> domain.Category:
    """Convert SQLAlchemy Category model to domain Category entity."""
    return domain.Category(
        id=orm_category.id,
        name=orm_category.name,
        category_type=domain.CategoryType(orm_category.category_type),
        created_at=orm_category.created_at,
    )


def transaction_to_domain(orm_transaction: ORMTransaction) -> domain.TransactionRecord:
    """Convert SQLAlchemy Transaction model to domain TransactionRecord."""
    policy = None
    if orm_transaction.interval_kind is not None:
        policy = domain.RecurrencePolicy(
            interval_kind=domain.IntervalKind(orm_transaction.interval_kind),
            day_of_month=orm_transaction.day_of_month,
            occurrence_count=orm_transaction.occurrence_count,
        )

    amount = Decimal(orm_transaction.amount)
    return domain.TransactionRecord(
        id=orm_transaction.id,
        date=orm_transaction.date,
        description=orm_transaction.description,
        counterparty=orm_transaction.counterparty,
        raw_amount=abs(amount),
        category_name=orm_transaction.category_name,
        payment_method=domain.PaymentMethod(orm_transaction.payment_method),
        is_paid=orm_transaction.is_paid,
        signed_amount=amount,
        recurrence_policy=policy,
    )


def transaction_to_orm(record: domain.TransactionRecord) -> ORMTransaction:
    """Build an unsaved SQLAlchemy Transaction from a domain record."""
    policy = record.recurrence_policy
    return ORMTransaction(
        date=record.date,
        description=record.description,
        counterparty=record.counterparty,
        category_name=record.category_name,
        payment_method=domain.PaymentMethod(record.payment_method),
        amount=record.signed_amount,
        is_paid=record.is_paid,
        interval_kind=policy.interval_kind if policy else None,
        day_of_month=policy.day_of_month if policy else None,
        occurrence_count=policy.occurrence_count if policy else None,
    )
