"""Statement row normalization.

Bank exports differ in currency formatting and sometimes omit the balance,
so optional amounts are parsed liberally. Only the transaction date is
mandatory.
"""

from typing import Mapping, Optional, Union

from spendtracker.domain.csv_reader import (
    TRANSACTION_DATE,
    DESCRIPTION,
    DEBITS,
    CREDITS,
    BALANCE,
)
from spendtracker.domain.entities import NormalizedTransaction, RowError
from spendtracker.utils.amount_parser import normalize_amount
from spendtracker.utils.date_parser import parse_date

UNKNOWN_DESCRIPTION = "Unknown"
DESCRIPTION_MAX_LENGTH = 500
INVALID_DATE = "Invalid transaction date"


def normalize_description(value: Optional[str]) -> str:
    """Return a stored description, falling back to the placeholder."""
    if value is None or not value.strip():
        return UNKNOWN_DESCRIPTION
    return value.strip()[:DESCRIPTION_MAX_LENGTH]


def normalize_row(
    row: Mapping[str, str], line_number: int
) -> Union[NormalizedTransaction, RowError]:
    """Convert a raw statement row into a transaction record.

    Args:
        row: Column name -> raw value mapping from the record reader
        line_number: 1-based source line of the row (the header is line 1)

    Returns:
        NormalizedTransaction, or RowError if the date is missing or invalid
    """
    raw_date = row.get(TRANSACTION_DATE)
    try:
        txn_date = parse_date(raw_date or "")
    except ValueError:
        return RowError(line_number=line_number, reason=INVALID_DATE, raw_value=raw_date or "")

    return NormalizedTransaction(
        line_number=line_number,
        date=txn_date,
        description=normalize_description(row.get(DESCRIPTION)),
        debit=normalize_amount(row.get(DEBITS), absolute=True),
        credit=normalize_amount(row.get(CREDITS), absolute=True),
        balance=normalize_amount(row.get(BALANCE)),
    )
