"""Shared pytest fixtures for spendtracker tests."""

import tempfile
import os
from datetime import date
from decimal import Decimal
from pathlib import Path
import pytest

from spendtracker.database.factories import create_sqlite_database
from spendtracker.domain.category import CategoryService
from spendtracker.domain.csv_import import StatementImportService
from spendtracker.domain.ledger import CategoryLedger
from spendtracker.domain.transaction import TransactionService


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
def import_service(temp_db):
    """Create a StatementImportService with a temporary database."""
    return StatementImportService(temp_db)


@pytest.fixture
def ledger(temp_db):
    """Create a CategoryLedger with a temporary database."""
    return CategoryLedger(temp_db)


@pytest.fixture
def sample_categories(category_service):
    """Create a few categories and return their IDs by name."""
    return {
        name: category_service.create_category(name=name, description=description)
        for name, description in [
            ("Groceries", "Supermarkets and food stores"),
            ("Dining", "Restaurants and coffee"),
            ("Utilities", None),
        ]
    }


@pytest.fixture
def sample_transactions(transaction_service):
    """Create uncategorized transactions and return their IDs by description."""
    rows = [
        (date(2024, 1, 15), "Grocery Store", Decimal("54.20"), None),
        (date(2024, 1, 20), "Coffee Shop", Decimal("4.50"), None),
        (date(2024, 2, 2), "Electric Company", Decimal("120.00"), None),
        (date(2024, 2, 5), "Refund", None, Decimal("15.00")),
    ]
    return {
        description: transaction_service.create_transaction(
            date=txn_date, description=description, debit=debit, credit=credit
        )
        for txn_date, description, debit, credit in rows
    }


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()


@pytest.fixture
def fixtures_dir():
    """Return the path to the test fixtures directory."""
    return Path(__file__).parent / "fixtures"
