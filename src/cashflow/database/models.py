"""SQLAlchemy models for cashflow database."""

from datetime import datetime, UTC
from sqlalchemy import (
    Column,
    Integer,
    String,
    DateTime,
    Date,
    Numeric,
    Boolean,
    Enum as SAEnum,
    create_engine,
)
from sqlalchemy.orm import declarative_base, sessionmaker, Session

from cashflow.domain.entities import CategoryType, IntervalKind, PaymentMethod

Base = declarative_base()


def _enum_column(enum_cls, name: str) -> SAEnum:
    return SAEnum(
        enum_cls,
        name=name,
        values_callable=lambda members: [member.value for member in members],
    )


class Category(Base):
    """Category metadata model."""

    __tablename__ = "categories"

    id = Column(Integer, primary_key=True)
    name = Column(String, unique=True, nullable=False)
    category_type = Column(
        _enum_column(CategoryType, "categorytype"),
        default=CategoryType.EXPENSE,
        nullable=False,
    )
    created_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)


class Transaction(Base):
    """Transaction model.

    Recurrence columns are null for one-off transactions. Each occurrence of
    a series is its own row with no link to its siblings.
    """

    __tablename__ = "transactions"

    id = Column(Integer, primary_key=True)
    date = Column(Date, nullable=False, index=True)
    description = Column(String, nullable=False)
    counterparty = Column(String, nullable=False)
    category_name = Column(String, nullable=False)
    payment_method = Column(_enum_column(PaymentMethod, "paymentmethod"), nullable=False)
    amount = Column(Numeric(10, 2), nullable=False)
    is_paid = Column(Boolean, default=True, nullable=False)
    interval_kind = Column(_enum_column(IntervalKind, "intervalkind"), nullable=True)
    day_of_month = Column(Integer, nullable=True)
    occurrence_count = Column(Integer, nullable=True)
    created_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)


def create_session_factory(database_url: str) -> sessionmaker[Session]:
    """Create a SQLAlchemy session factory."""
    engine = create_engine(database_url, echo=False)
    Base.metadata.create_all(engine)
    return sessionmaker(bind=engine)
