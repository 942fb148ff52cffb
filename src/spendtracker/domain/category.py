"""Category domain service."""

from typing import Optional
from spendtracker.database.base import Database
from spendtracker.domain.entities import (
    Category as CategoryEntity,
    CategorySummary,
    Transaction as TransactionEntity,
)
from spendtracker.domain.errors import (
    ConflictError,
    DependencyError,
    NotFoundError,
    ValidationError,
    category_delete_blocked,
    category_not_found,
    duplicate_category_name,
)
from spendtracker.domain.ledger import sum_debits

NAME_MAX_LENGTH = 100
DESCRIPTION_MAX_LENGTH = 500


class CategoryService:
    """Service for managing categories."""

    def __init__(self, db: Database):
        """Initialize category service.

        Args:
            db: Database instance
        """
        self.db = db

    def _validate(self, name: str, description: Optional[str]) -> str:
        """Return the cleaned name, or raise ValidationError."""
        name = (name or "").strip()
        if not name:
            raise ValidationError("Category name cannot be empty")
        if len(name) > NAME_MAX_LENGTH:
            raise ValidationError(f"Category name cannot exceed {NAME_MAX_LENGTH} characters")
        if description is not None and len(description) > DESCRIPTION_MAX_LENGTH:
            raise ValidationError(
                f"Category description cannot exceed {DESCRIPTION_MAX_LENGTH} characters"
            )
        return name

    def create_category(self, name: str, description: Optional[str] = None) -> int:
        """Create a category.

        Args:
            name: Category name (unique)
            description: Optional description

        Returns:
            Category ID

        Raises:
            ValidationError: If name is empty or too long
            ConflictError: If a category with the same name exists
        """
        name = self._validate(name, description)
        if self.db.get_category_by_name(name) is not None:
            raise ConflictError(duplicate_category_name(name))

        return self.db.create_category(name=name, description=description)

    def get_category(self, category_id: int) -> Optional[CategoryEntity]:
        """Get category by ID.

        Args:
            category_id: Category ID

        Returns:
            Category entity or None if not found
        """
        return self.db.get_category(category_id)

    def get_category_by_name(self, name: str) -> Optional[CategoryEntity]:
        """Get category by exact name."""
        return self.db.get_category_by_name(name)

    def list_categories(self) -> list[CategoryEntity]:
        """List all categories ordered by name."""
        return self.db.list_categories()

    def get_category_summary(self, category_id: int) -> CategorySummary:
        """Get a category with its transaction count and total spending.

        Raises:
            NotFoundError: If category doesn't exist
        """
        category = self.db.get_category(category_id)
        if category is None:
            raise NotFoundError(category_not_found(category_id))
        return self._summarize(category)

    def list_category_summaries(self) -> list[CategorySummary]:
        """List all categories with derived aggregates."""
        return [self._summarize(category) for category in self.db.list_categories()]

    def _summarize(self, category: CategoryEntity) -> CategorySummary:
        transactions = self.db.list_transactions(category_id=category.id)
        return CategorySummary(
            id=category.id,
            name=category.name,
            description=category.description,
            created_date=category.created_date,
            transaction_count=len(transactions),
            total_spending=sum_debits(transactions),
        )

    def update_category(self, category_id: int, name: str, description: Optional[str] = None) -> None:
        """Rename a category and replace its description.

        Args:
            category_id: Category ID to update
            name: New category name
            description: New description (None clears it)

        Raises:
            NotFoundError: If category doesn't exist
            ValidationError: If name is empty or too long
            ConflictError: If another category already has the name
        """
        if self.db.get_category(category_id) is None:
            raise NotFoundError(category_not_found(category_id))

        name = self._validate(name, description)
        existing = self.db.get_category_by_name(name)
        if existing is not None and existing.id != category_id:
            raise ConflictError(f"Another category with name '{name}' already exists")

        self.db.update_category(category_id, name=name, description=description)

    def delete_category(self, category_id: int) -> None:
        """Delete a category.

        Args:
            category_id: Category ID to delete

        Raises:
            NotFoundError: If category doesn't exist
            DependencyError: If transactions are still assigned to it
        """
        category = self.db.get_category(category_id)
        if category is None:
            raise NotFoundError(category_not_found(category_id))

        transaction_count = self.db.get_category_transaction_count(category_id)
        if transaction_count > 0:
            raise DependencyError(category_delete_blocked(category.name, transaction_count))

        self.db.delete_category(category_id)

    def list_category_transactions(self, category_id: int) -> list[TransactionEntity]:
        """List the transactions assigned to a category, newest first.

        Raises:
            NotFoundError: If category doesn't exist
        """
        if self.db.get_category(category_id) is None:
            raise NotFoundError(category_not_found(category_id))
        return self.db.list_transactions(category_id=category_id)
