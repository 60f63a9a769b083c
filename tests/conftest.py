"""Shared pytest fixtures for cashflow tests."""

import tempfile
import os
from datetime import date
from decimal import Decimal
import pytest

from cashflow.database.factories import create_sqlite_database
from cashflow.domain.category import CategoryService
from cashflow.domain.entities import PaymentMethod, TransactionDraft
from cashflow.domain.summary import SummaryService
from cashflow.domain.transaction import TransactionService


@pytest.fixture
def temp_db():
    """Create a temporary database for testing."""
    # Create a temporary file for the database
    fd, db_path = tempfile.mkstemp(suffix=".db")
    os.close(fd)

    # Create database
    db = create_sqlite_database(database_path=db_path)
    # Store the path for tests that need it
    db.database_path = db_path
    db.connect()
    db.initialize_schema()

    yield db

    # Cleanup
    db.disconnect()
    if os.path.exists(db_path):
        os.unlink(db_path)


@pytest.fixture
def category_service(temp_db):
    """Create a CategoryService with a temporary database."""
    return CategoryService(temp_db)


@pytest.fixture
def transaction_service(temp_db):
    """Create a TransactionService with a temporary database."""
    return TransactionService(temp_db)


@pytest.fixture
def summary_service(temp_db):
    """Create a SummaryService with a temporary database."""
    return SummaryService(temp_db)


@pytest.fixture
def default_categories(category_service):
    """Seed the default categories and return them keyed by name."""
    category_service.init_default_categories()
    return {cat.name: cat for cat in category_service.list_categories()}


@pytest.fixture
def make_draft():
    """Return a factory for transaction drafts with sensible defaults."""

    def _make(**overrides):
        fields = {
            "date": date(2024, 1, 15),
            "description": "Groceries",
            "counterparty": "Market",
            "raw_amount": Decimal("50.00"),
            "category_name": "variable",
            "payment_method": PaymentMethod.DEBIT,
            "is_paid": True,
            "recurrence_policy": None,
        }
        fields.update(overrides)
        return TransactionDraft(**fields)

    return _make


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()
