"""Category spending aggregates.

Totals are derived from the transactions currently assigned to a category
every time they are requested, so reassignment never leaves stale figures.
"""

import calendar
from collections import defaultdict
from datetime import date
from decimal import Decimal

from spendtracker.database.base import Database
from spendtracker.domain.entities import (
    Category,
    CategorySpending,
    MonthlySpending,
    Transaction,
)
from spendtracker.domain.errors import NotFoundError, category_not_found


def sum_debits(transactions: list[Transaction]) -> Decimal:
    """Sum the debit side of transactions; credits are not spending."""
    return sum((txn.debit for txn in transactions if txn.debit is not None), Decimal("0"))


class CategoryLedger:
    """Read-side spending figures per category."""

    def __init__(self, db: Database):
        """Initialize category ledger.

        Args:
            db: Database instance
        """
        self.db = db

    def _require_category(self, category_id: int) -> Category:
        category = self.db.get_category(category_id)
        if category is None:
            raise NotFoundError(category_not_found(category_id))
        return category

    def total_spending_by_category(self, category_id: int) -> Decimal:
        """Sum of debits over all transactions assigned to a category.

        Raises:
            NotFoundError: If category doesn't exist
        """
        self._require_category(category_id)
        return sum_debits(self.db.list_transactions(category_id=category_id))

    def _monthly_debits(self, category_id: int, year: int) -> dict[int, list[Transaction]]:
        """Group a category's debit transactions in a year by month."""
        transactions = self.db.list_transactions(
            start_date=date(year, 1, 1),
            end_date=date(year, 12, 31),
            category_id=category_id,
        )
        by_month: dict[int, list[Transaction]] = defaultdict(list)
        for txn in transactions:
            if txn.debit is not None:
                by_month[txn.date.month].append(txn)
        return by_month

    def monthly_spending_by_category(self, category_id: int, year: int) -> dict[int, Decimal]:
        """Debit totals per calendar month of a year.

        Only months with at least one debit transaction are present.

        Args:
            category_id: Category ID
            year: Calendar year

        Returns:
            Mapping of month number (1-12) to total spending

        Raises:
            NotFoundError: If category doesn't exist
        """
        self._require_category(category_id)
        by_month = self._monthly_debits(category_id, year)
        return {month: sum_debits(by_month[month]) for month in sorted(by_month)}

    def category_spending(self, category_id: int, year: int) -> CategorySpending:
        """Total spending of a category with a month-by-month breakdown for a year.

        Raises:
            NotFoundError: If category doesn't exist
        """
        category = self._require_category(category_id)
        transactions = self.db.list_transactions(category_id=category_id)
        by_month = self._monthly_debits(category_id, year)

        breakdown = [
            MonthlySpending(
                year=year,
                month=month,
                month_name=calendar.month_name[month],
                total_spending=sum_debits(by_month[month]),
                transaction_count=len(by_month[month]),
            )
            for month in sorted(by_month)
        ]

        return CategorySpending(
            category_id=category.id,
            category_name=category.name,
            total_spending=sum_debits(transactions),
            transaction_count=len(transactions),
            monthly_breakdown=breakdown,
        )
