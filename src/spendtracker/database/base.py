"""Abstract database interface."""

from abc import ABC, abstractmethod
from typing import Optional
from datetime import date
from decimal import Decimal

# Import entities directly to avoid circular import through domain/__init__.py
from spendtracker.domain.entities import (
    Category,
    NewTransaction,
    Transaction,
)


class Database(ABC):
    """Abstract database interface for spendtracker.

    Write operations commit their own unit of work. Implementations roll
    back and raise PersistenceError when a commit fails.
    """

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

    @abstractmethod
    def open_session(self) -> "Database":
        """Open an independent handle on the same store.

        The handle has its own unit of work and must be closed with
        disconnect(). Use one per request or per thread; a single handle is
        not safe to share between threads.
        """
        pass

    # Category operations
    @abstractmethod
    def create_category(self, name: str, description: Optional[str] = None) -> int:
        """Create a category. Returns category ID."""
        pass

    @abstractmethod
    def get_category(self, category_id: int) -> Optional[Category]:
        """Get category by ID."""
        pass

    @abstractmethod
    def get_category_by_name(self, name: str) -> Optional[Category]:
        """Get category by exact name."""
        pass

    @abstractmethod
    def list_categories(self) -> list[Category]:
        """List all categories ordered by name."""
        pass

    @abstractmethod
    def update_category(self, category_id: int, name: str, description: Optional[str]) -> None:
        """Update category name and description."""
        pass

    @abstractmethod
    def delete_category(self, category_id: int) -> None:
        """Delete a category."""
        pass

    @abstractmethod
    def get_category_transaction_count(self, category_id: int) -> int:
        """Get count of transactions assigned to a category."""
        pass

    # Transaction operations
    @abstractmethod
    def create_transaction(
        self,
        date: date,
        description: str,
        upload_batch_id: str,
        debit: Optional[Decimal] = None,
        credit: Optional[Decimal] = None,
        balance: Optional[Decimal] = None,
        category_id: Optional[int] = None,
    ) -> int:
        """Create a transaction. Returns transaction ID."""
        pass

    @abstractmethod
    def add_transactions(self, transactions: list[NewTransaction]) -> list[int]:
        """Insert transactions in a single commit. Returns IDs in input order.

        Either every transaction is stored or none is.
        """
        pass

    @abstractmethod
    def get_transaction(self, transaction_id: int) -> Optional[Transaction]:
        """Get transaction by ID."""
        pass

    @abstractmethod
    def list_transactions(
        self,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        category_id: Optional[int] = None,
        uncategorized: bool = False,
        upload_batch_id: Optional[str] = None,
    ) -> list[Transaction]:
        """List transactions with optional filters, newest first.

        Args:
            start_date: Optional start date filter (inclusive)
            end_date: Optional end date filter (inclusive)
            category_id: Optional category ID filter
            uncategorized: If True, only return transactions without a category
            upload_batch_id: Optional import batch filter
        """
        pass

    @abstractmethod
    def update_transaction_category(self, transaction_id: int, category_id: Optional[int]) -> None:
        """Update transaction category (None clears it)."""
        pass

    @abstractmethod
    def update_transactions_category(
        self, transaction_ids: list[int], category_id: Optional[int]
    ) -> list[int]:
        """Assign a category to many transactions in a single commit.

        Returns the IDs that existed and were updated.
        """
        pass

    @abstractmethod
    def delete_transaction(self, transaction_id: int) -> None:
        """Delete a transaction."""
        pass

    @abstractmethod
    def delete_transactions_by_batch(self, upload_batch_id: str) -> int:
        """Delete every transaction of an import batch. Returns count deleted."""
        pass
