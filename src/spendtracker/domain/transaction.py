"""Transaction domain service."""

import logging
import uuid
from collections import defaultdict
from typing import Optional
from datetime import date
from decimal import Decimal
from spendtracker.database.base import Database
from spendtracker.domain.entities import (
    BulkCategorizeResult,
    Transaction as TransactionEntity,
)
from spendtracker.domain.errors import (
    NotFoundError,
    ValidationError,
    category_not_found,
    transaction_not_found,
)
from spendtracker.domain.normalizer import normalize_description

logger = logging.getLogger(__name__)


class TransactionService:
    """Service for managing transactions."""

    def __init__(self, db: Database):
        """Initialize transaction service.

        Args:
            db: Database instance
        """
        self.db = db

    def _require_category(self, category_id: int) -> None:
        if self.db.get_category(category_id) is None:
            raise NotFoundError(category_not_found(category_id))

    def create_transaction(
        self,
        date: date,
        description: Optional[str],
        debit: Optional[Decimal] = None,
        credit: Optional[Decimal] = None,
        balance: Optional[Decimal] = None,
        category_id: Optional[int] = None,
    ) -> int:
        """Create a single transaction outside of a statement import.

        The transaction gets its own upload batch ID.

        Args:
            date: Transaction date
            description: Description ("Unknown" if blank)
            debit: Optional money spent (must not be negative)
            credit: Optional money received (must not be negative)
            balance: Optional running balance
            category_id: Optional category ID

        Returns:
            Transaction ID

        Raises:
            ValidationError: If debit or credit is negative
            NotFoundError: If category doesn't exist
        """
        for label, amount in (("Debit", debit), ("Credit", credit)):
            if amount is not None and amount < 0:
                raise ValidationError(f"{label} amount cannot be negative")

        if category_id is not None:
            self._require_category(category_id)

        return self.db.create_transaction(
            date=date,
            description=normalize_description(description),
            upload_batch_id=str(uuid.uuid4()),
            debit=debit,
            credit=credit,
            balance=balance,
            category_id=category_id,
        )

    def get_transaction(self, transaction_id: int) -> Optional[TransactionEntity]:
        """Get transaction by ID.

        Args:
            transaction_id: Transaction ID

        Returns:
            Transaction entity or None if not found
        """
        return self.db.get_transaction(transaction_id)

    def list_transactions(
        self,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        category_id: Optional[int] = None,
        uncategorized: bool = False,
    ) -> list[TransactionEntity]:
        """List transactions with filters, newest first.

        Args:
            start_date: Optional start date filter
            end_date: Optional end date filter
            category_id: Optional category ID filter
            uncategorized: If True, only transactions without a category

        Returns:
            List of transaction entities
        """
        return self.db.list_transactions(
            start_date=start_date,
            end_date=end_date,
            category_id=category_id,
            uncategorized=uncategorized,
        )

    def assign_category(self, transaction_id: int, category_id: int) -> TransactionEntity:
        """Assign a category to a transaction.

        Raises:
            NotFoundError: If transaction or category doesn't exist
        """
        if self.db.get_transaction(transaction_id) is None:
            raise NotFoundError(transaction_not_found(transaction_id))
        self._require_category(category_id)

        self.db.update_transaction_category(transaction_id, category_id)
        return self.db.get_transaction(transaction_id)

    def remove_category(self, transaction_id: int) -> TransactionEntity:
        """Clear the category of a transaction.

        Raises:
            NotFoundError: If transaction doesn't exist
        """
        if self.db.get_transaction(transaction_id) is None:
            raise NotFoundError(transaction_not_found(transaction_id))

        self.db.update_transaction_category(transaction_id, None)
        return self.db.get_transaction(transaction_id)

    def bulk_categorize(self, transaction_ids: list[int], category_id: int) -> BulkCategorizeResult:
        """Assign one category to many transactions.

        Missing transactions are reported and skipped; the others are updated
        together in one commit.

        Raises:
            ValidationError: If no transaction IDs are given
            NotFoundError: If category doesn't exist
        """
        # Remove duplicates while preserving order
        unique_ids = list(dict.fromkeys(transaction_ids))
        if not unique_ids:
            raise ValidationError("No transaction IDs provided")
        self._require_category(category_id)

        updated = set(self.db.update_transactions_category(unique_ids, category_id))
        errors = [
            f"Transaction ID {txn_id} not found" for txn_id in unique_ids if txn_id not in updated
        ]
        logger.info(
            "Categorized %d transactions as category %d (%d not found)",
            len(updated),
            category_id,
            len(errors),
        )
        return BulkCategorizeResult(processed=len(updated), failed=len(errors), errors=errors)

    def delete_transaction(self, transaction_id: int) -> None:
        """Delete a transaction.

        Args:
            transaction_id: Transaction ID to delete

        Raises:
            NotFoundError: If transaction doesn't exist
        """
        if self.db.get_transaction(transaction_id) is None:
            raise NotFoundError(transaction_not_found(transaction_id))

        self.db.delete_transaction(transaction_id)

    def list_batch(self, upload_batch_id: str) -> list[TransactionEntity]:
        """List the transactions created by one import batch."""
        return self.db.list_transactions(upload_batch_id=upload_batch_id)

    def delete_batch(self, upload_batch_id: str) -> int:
        """Roll back an import batch by deleting its transactions.

        Returns:
            Number of transactions deleted

        Raises:
            NotFoundError: If no transaction belongs to the batch
        """
        deleted = self.db.delete_transactions_by_batch(upload_batch_id)
        if deleted == 0:
            raise NotFoundError(f"Import batch '{upload_batch_id}' not found")
        logger.info("Deleted %d transactions of batch %s", deleted, upload_batch_id)
        return deleted

    def monthly_spending_summary(self, year: int) -> dict[str, Decimal]:
        """Debit totals of categorized transactions per month and category.

        Args:
            year: Calendar year

        Returns:
            Mapping of "YYYY-MM - <category name>" to total spending
        """
        transactions = self.db.list_transactions(
            start_date=date(year, 1, 1), end_date=date(year, 12, 31)
        )
        summary: dict[str, Decimal] = defaultdict(Decimal)
        for txn in sorted(transactions, key=lambda t: (t.date, t.id)):
            if txn.debit is None or txn.category_id is None:
                continue
            summary[f"{txn.date:%Y-%m} - {txn.category_name}"] += txn.debit
        return dict(summary)
