"""Tests for database mappers."""

from datetime import datetime, date, UTC
from decimal import Decimal

from spendtracker.database.models import (
    Category as ORMCategory,
    Transaction as ORMTransaction,
)
from spendtracker.database.mappers import (
    category_to_domain,
    new_transaction_to_orm,
    transaction_to_domain,
)
from spendtracker.domain.entities import Category, NewTransaction, Transaction


class TestCategoryMapper:
    """Tests for Category mapper."""

    def test_category_to_domain(self):
        """Test converting ORM Category to domain Category."""
        created = datetime.now(UTC)
        orm_category = ORMCategory(id=3, name="Dining", description=None, created_date=created)

        category = category_to_domain(orm_category)

        assert category == Category(id=3, name="Dining", description=None, created_date=created)


class TestTransactionMapper:
    """Tests for Transaction mappers."""

    def test_transaction_to_domain_with_category(self):
        """Test that the category name is taken from the relationship."""
        created = datetime.now(UTC)
        orm_category = ORMCategory(id=7, name="Groceries", created_date=created)
        orm_transaction = ORMTransaction(
            id=1,
            date=date(2024, 1, 15),
            description="Grocery Store",
            debit=Decimal("54.20"),
            credit=None,
            balance=Decimal("1945.80"),
            category_id=7,
            category=orm_category,
            upload_batch_id="batch-1",
            created_date=created,
        )

        txn = transaction_to_domain(orm_transaction)

        assert isinstance(txn, Transaction)
        assert txn.category_id == 7
        assert txn.category_name == "Groceries"
        assert txn.debit == Decimal("54.20")
        assert txn.balance == Decimal("1945.80")
        assert txn.upload_batch_id == "batch-1"

    def test_transaction_to_domain_uncategorized(self):
        """Test converting a transaction without category."""
        orm_transaction = ORMTransaction(
            id=2,
            date=date(2024, 1, 16),
            description="Salary",
            credit=Decimal("2500.00"),
            upload_batch_id="batch-1",
            created_date=datetime.now(UTC),
        )

        txn = transaction_to_domain(orm_transaction)

        assert txn.category_id is None
        assert txn.category_name is None
        assert txn.debit is None
        assert txn.credit == Decimal("2500.00")

    def test_new_transaction_to_orm(self):
        """Test building an unsaved ORM Transaction."""
        created = datetime.now(UTC)
        new_txn = NewTransaction(
            date=date(2024, 1, 20),
            description="Coffee Shop",
            upload_batch_id="batch-9",
            created_date=created,
            debit=Decimal("4.50"),
        )

        orm_transaction = new_transaction_to_orm(new_txn)

        assert orm_transaction.id is None
        assert orm_transaction.description == "Coffee Shop"
        assert orm_transaction.debit == Decimal("4.50")
        assert orm_transaction.credit is None
        assert orm_transaction.category_id is None
        assert orm_transaction.upload_batch_id == "batch-9"
        assert orm_transaction.created_date == created
