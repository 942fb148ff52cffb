"""Domain model entities for spendtracker.

These are pure data classes representing business concepts, independent of
database schema. Repository implementations convert their rows into these
before handing them to the domain services.
"""

from dataclasses import dataclass, field
from datetime import datetime, date
from decimal import Decimal
from typing import Optional


@dataclass(frozen=True)
class Category:
    """Spending category domain entity."""

    id: int
    name: str
    description: Optional[str]
    created_date: datetime


@dataclass(frozen=True)
class CategorySummary:
    """Category with aggregates derived from its current transactions."""

    id: int
    name: str
    description: Optional[str]
    created_date: datetime
    transaction_count: int
    total_spending: Decimal


@dataclass(frozen=True)
class Transaction:
    """Transaction domain entity (one ledger line)."""

    id: int
    date: date
    description: str
    debit: Optional[Decimal]
    credit: Optional[Decimal]
    balance: Optional[Decimal]
    category_id: Optional[int]
    category_name: Optional[str]
    upload_batch_id: str
    created_date: datetime


@dataclass(frozen=True)
class NewTransaction:
    """Transaction that has not been assigned an ID by the store yet."""

    date: date
    description: str
    upload_batch_id: str
    created_date: datetime
    debit: Optional[Decimal] = None
    credit: Optional[Decimal] = None
    balance: Optional[Decimal] = None
    category_id: Optional[int] = None


@dataclass(frozen=True)
class NormalizedTransaction:
    """Statement row that passed normalization."""

    line_number: int
    date: date
    description: str
    debit: Optional[Decimal] = None
    credit: Optional[Decimal] = None
    balance: Optional[Decimal] = None


@dataclass(frozen=True)
class RowError:
    """Statement row that could not be normalized."""

    line_number: int
    reason: str
    raw_value: Optional[str] = None

    def __str__(self) -> str:
        if self.raw_value is None:
            return f"Line {self.line_number}: {self.reason}"
        return f"Line {self.line_number}: {self.reason} '{self.raw_value}'"


@dataclass(frozen=True)
class ImportOutcome:
    """Summary of one statement upload."""

    total_records: int
    successful_imports: int
    failed_imports: int
    upload_batch_id: str
    errors: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class MonthlySpending:
    """Debit total of one category for one calendar month."""

    year: int
    month: int
    month_name: str
    total_spending: Decimal
    transaction_count: int


@dataclass(frozen=True)
class CategorySpending:
    """Spending overview of a category with its monthly breakdown."""

    category_id: int
    category_name: str
    total_spending: Decimal
    transaction_count: int
    monthly_breakdown: list[MonthlySpending] = field(default_factory=list)


@dataclass(frozen=True)
class BulkCategorizeResult:
    """Result of assigning one category to many transactions."""

    processed: int
    failed: int
    errors: list[str] = field(default_factory=list)
