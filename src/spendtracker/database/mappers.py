"""Mapper functions to convert between domain models and SQLAlchemy models.

This layer isolates the conversion logic so the domain services never see
ORM objects.
"""

from spendtracker.domain import entities as domain
from spendtracker.database.models import (
    Category as ORMCategory,
    Transaction as ORMTransaction,
)


def category_to_domain(orm_category: ORMCategory) -> domain.Category:
    """Convert SQLAlchemy Category model to domain Category entity."""
    return domain.Category(
        id=orm_category.id,
        name=orm_category.name,
        description=orm_category.description,
        created_date=orm_category.created_date,
    )


def transaction_to_domain(orm_transaction: ORMTransaction) -> domain.Transaction:
    """Convert SQLAlchemy Transaction model to domain Transaction entity."""
    category = orm_transaction.category
    return domain.Transaction(
        id=orm_transaction.id,
        date=orm_transaction.date,
        description=orm_transaction.description,
        debit=orm_transaction.debit,
        credit=orm_transaction.credit,
        balance=orm_transaction.balance,
        category_id=orm_transaction.category_id,
        category_name=category.name if category is not None else None,
        upload_batch_id=orm_transaction.upload_batch_id,
        created_date=orm_transaction.created_date,
    )


def new_transaction_to_orm(new_transaction: domain.NewTransaction) -> ORMTransaction:
    """Build an unsaved SQLAlchemy Transaction from a domain NewTransaction."""
    return ORMTransaction(
        date=new_transaction.date,
        description=new_transaction.description,
        debit=new_transaction.debit,
        credit=new_transaction.credit,
        balance=new_transaction.balance,
        category_id=new_transaction.category_id,
        upload_batch_id=new_transaction.upload_batch_id,
        created_date=new_transaction.created_date,
    )
