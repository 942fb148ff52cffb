"""Shared domain error messages and error types."""


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""


class NotFoundError(DomainError):
    """Requested transaction or category does not exist."""


class ConflictError(DomainError):
    """Domain conflict, such as a duplicate category name."""


class DependencyError(DomainError):
    """Operation blocked due to dependent domain data."""


class StreamError(DomainError):
    """Statement input cannot be opened, decoded or tokenized as CSV."""


class PersistenceError(DomainError):
    """Writing to the transaction store failed and was rolled back."""


def transaction_not_found(transaction_id: int) -> str:
    """Return message for missing transaction."""
    return f"Transaction with ID {transaction_id} not found"


def category_not_found(category_id: int) -> str:
    """Return message for missing category by ID."""
    return f"Category with ID {category_id} not found"


def category_name_not_found(name: str) -> str:
    """Return message for missing category by name."""
    return f"Category '{name}' not found"


def duplicate_category_name(name: str) -> str:
    """Return message for duplicate category name."""
    return f"Category with name '{name}' already exists"


def category_delete_blocked(name: str, transaction_count: int) -> str:
    """Return message when a category still owns transactions."""
    return (
        f"Cannot delete category '{name}' because it has {transaction_count} "
        f"associated transaction{'s' if transaction_count != 1 else ''}. "
        "Please reassign or remove these transactions first."
    )
