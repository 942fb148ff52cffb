"""Category routes."""

from datetime import datetime, UTC

from fastapi import APIRouter, Depends, Response

from spendtracker.api.deps import get_db
from spendtracker.api.schemas import (
    CategoryIn,
    CategoryOut,
    CategorySpendingOut,
    TransactionOut,
)
from spendtracker.database.base import Database
from spendtracker.domain.category import CategoryService
from spendtracker.domain.ledger import CategoryLedger

router = APIRouter(prefix="/categories", tags=["categories"])


@router.get("", response_model=list[CategoryOut])
def list_categories(db: Database = Depends(get_db)):
    """List categories with transaction counts and spending."""
    return [CategoryOut.model_validate(cat) for cat in CategoryService(db).list_category_summaries()]


@router.post("", response_model=CategoryOut, status_code=201)
def create_category(payload: CategoryIn, db: Database = Depends(get_db)):
    service = CategoryService(db)
    category_id = service.create_category(name=payload.name, description=payload.description)
    return CategoryOut.model_validate(service.get_category_summary(category_id))


@router.get("/{category_id}", response_model=CategoryOut)
def get_category(category_id: int, db: Database = Depends(get_db)):
    return CategoryOut.model_validate(CategoryService(db).get_category_summary(category_id))


@router.put("/{category_id}", response_model=CategoryOut)
def update_category(category_id: int, payload: CategoryIn, db: Database = Depends(get_db)):
    service = CategoryService(db)
    service.update_category(category_id, name=payload.name, description=payload.description)
    return CategoryOut.model_validate(service.get_category_summary(category_id))


@router.delete("/{category_id}", status_code=204)
def delete_category(category_id: int, db: Database = Depends(get_db)):
    """Delete a category; refused while transactions are assigned to it."""
    CategoryService(db).delete_category(category_id)
    return Response(status_code=204)


@router.get("/{category_id}/transactions", response_model=list[TransactionOut])
def list_category_transactions(category_id: int, db: Database = Depends(get_db)):
    transactions = CategoryService(db).list_category_transactions(category_id)
    return [TransactionOut.model_validate(txn) for txn in transactions]


@router.get("/{category_id}/spending", response_model=float)
def category_total_spending(category_id: int, db: Database = Depends(get_db)):
    """Sum of debits of the category's transactions."""
    return float(CategoryLedger(db).total_spending_by_category(category_id))


@router.get("/{category_id}/spending/monthly", response_model=CategorySpendingOut)
def category_monthly_spending(category_id: int, year: int = 0, db: Database = Depends(get_db)):
    """Category spending with a month-by-month breakdown (default: current year)."""
    if year == 0:
        year = datetime.now(UTC).year
    spending = CategoryLedger(db).category_spending(category_id, year)
    return CategorySpendingOut.model_validate(spending)
