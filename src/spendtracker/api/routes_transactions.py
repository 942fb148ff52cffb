"""Transaction routes, including the statement upload endpoint."""

import io
import logging
from datetime import date, datetime, UTC
from decimal import Decimal
from typing import Optional

from fastapi import APIRouter, Depends, File, HTTPException, Query, Response, UploadFile
from fastapi.responses import JSONResponse

from spendtracker.api.deps import get_db
from spendtracker.api.schemas import (
    AssignCategoryIn,
    BulkCategorizeIn,
    BulkCategorizeOut,
    ImportOutcomeOut,
    TransactionOut,
)
from spendtracker.database.base import Database
from spendtracker.domain.csv_import import StatementImportService
from spendtracker.domain.errors import NotFoundError, transaction_not_found
from spendtracker.domain.transaction import TransactionService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/transactions", tags=["transactions"])


@router.post("/upload", response_model=ImportOutcomeOut)
def upload_statement(
    file: Optional[UploadFile] = File(None),
    db: Database = Depends(get_db),
):
    """Import a bank statement CSV as one batch.

    Responds 400 when no file is sent, the name does not end in .csv, or
    no row could be imported (the outcome is still returned in that case).
    """
    if file is None or not file.filename:
        raise HTTPException(status_code=400, detail="No file uploaded")

    if not file.filename.lower().endswith(".csv"):
        raise HTTPException(status_code=400, detail="File must be a CSV file")

    content = file.file.read()
    if not content:
        raise HTTPException(status_code=400, detail="No file uploaded")

    try:
        outcome = StatementImportService(db).import_stream(io.BytesIO(content))
    except Exception:
        logger.exception("Error uploading CSV file %s", file.filename)
        raise HTTPException(
            status_code=500, detail="An error occurred while processing the CSV file"
        )

    payload = ImportOutcomeOut.model_validate(outcome)
    if outcome.successful_imports == 0:
        return JSONResponse(status_code=400, content=payload.model_dump(mode="json", by_alias=True))
    return payload


@router.get("", response_model=list[TransactionOut])
def list_transactions(
    category_id: Optional[int] = Query(None, alias="categoryId"),
    start_date: Optional[date] = Query(None, alias="startDate"),
    end_date: Optional[date] = Query(None, alias="endDate"),
    uncategorized: bool = False,
    db: Database = Depends(get_db),
):
    """List transactions, newest first."""
    transactions = TransactionService(db).list_transactions(
        start_date=start_date,
        end_date=end_date,
        category_id=category_id,
        uncategorized=uncategorized,
    )
    return [TransactionOut.model_validate(txn) for txn in transactions]


@router.get("/summary/monthly", response_model=dict[str, float])
def monthly_summary(year: int = 0, db: Database = Depends(get_db)):
    """Spending per "YYYY-MM - Category" for a year (default: current year)."""
    if year == 0:
        year = datetime.now(UTC).year
    summary = TransactionService(db).monthly_spending_summary(year)
    return {key: float(total) for key, total in summary.items()}


@router.post("/bulk-categorize", response_model=BulkCategorizeOut)
def bulk_categorize(payload: BulkCategorizeIn, db: Database = Depends(get_db)):
    """Assign one category to many transactions."""
    result = TransactionService(db).bulk_categorize(payload.transaction_ids, payload.category_id)
    return BulkCategorizeOut.model_validate(result)


@router.get("/{transaction_id}", response_model=TransactionOut)
def get_transaction(transaction_id: int, db: Database = Depends(get_db)):
    txn = TransactionService(db).get_transaction(transaction_id)
    if txn is None:
        raise NotFoundError(transaction_not_found(transaction_id))
    return TransactionOut.model_validate(txn)


@router.put("/{transaction_id}/category", response_model=TransactionOut)
def assign_category(
    transaction_id: int, payload: AssignCategoryIn, db: Database = Depends(get_db)
):
    txn = TransactionService(db).assign_category(transaction_id, payload.category_id)
    return TransactionOut.model_validate(txn)


@router.delete("/{transaction_id}/category", response_model=TransactionOut)
def remove_category(transaction_id: int, db: Database = Depends(get_db)):
    txn = TransactionService(db).remove_category(transaction_id)
    return TransactionOut.model_validate(txn)


@router.delete("/{transaction_id}", status_code=204)
def delete_transaction(transaction_id: int, db: Database = Depends(get_db)):
    TransactionService(db).delete_transaction(transaction_id)
    return Response(status_code=204)
