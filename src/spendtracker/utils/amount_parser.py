"""Amount parsing utilities."""

from decimal import Decimal, InvalidOperation
from typing import Optional

CENTS = Decimal("0.01")


def parse_amount(amount_str: str) -> Decimal:
    """Parse an amount string into a Decimal.

    Handles the formats bank statement exports use:
    - "123.45"
    - "$123.45"
    - "-123.45"
    - "-$123.45"
    - "1,234.56"

    Args:
        amount_str: Amount string

    Returns:
        Decimal amount rounded to cents

    Raises:
        ValueError: If amount string cannot be parsed
    """
    if not amount_str or not amount_str.strip():
        raise ValueError("Empty amount string")

    # Remove currency symbol and thousands separators
    cleaned = amount_str.strip().replace("$", "").replace(",", "").strip()

    try:
        amount = Decimal(cleaned)
        if amount.is_finite():
            return amount.quantize(CENTS)
    except InvalidOperation:
        pass

    raise ValueError(f"Could not parse amount '{amount_str.strip()}'")


def normalize_amount(amount_str: Optional[str], absolute: bool = False) -> Optional[Decimal]:
    """Parse an optional statement amount.

    Blank or unparseable values are treated as absent rather than as errors.

    Args:
        amount_str: Raw field value, possibly None
        absolute: If True, discard the sign (debit and credit columns)

    Returns:
        Decimal amount or None
    """
    if amount_str is None or not amount_str.strip():
        return None

    try:
        amount = parse_amount(amount_str)
    except ValueError:
        return None

    return abs(amount) if absolute else amount
