"""Tests for amount parsing."""

import pytest
from decimal import Decimal
from spendtracker.utils.amount_parser import parse_amount, normalize_amount


def test_parse_plain_amount():
    """Test parsing a plain decimal."""
    assert parse_amount("123.45") == Decimal("123.45")


def test_parse_currency_and_thousands_separator():
    """Test stripping '$' and ',' from amounts."""
    assert parse_amount("$1,234.56") == Decimal("1234.56")
    assert parse_amount("-$1,234.56") == Decimal("-1234.56")


def test_parse_surrounding_whitespace():
    """Test whitespace around and inside the symbol is ignored."""
    assert parse_amount("  $ 12.00 ") == Decimal("12.00")


def test_parse_rounds_to_cents():
    """Test amounts are quantized to two decimal places."""
    assert parse_amount("10") == Decimal("10.00")
    assert str(parse_amount("10")) == "10.00"


@pytest.mark.parametrize("value", ["", "   ", "abc", "12.3.4", "NaN", "Infinity", "1e40"])
def test_parse_invalid_amount_raises(value):
    """Test unparseable amounts raise ValueError."""
    with pytest.raises(ValueError):
        parse_amount(value)


def test_normalize_blank_is_absent():
    """Test blank or missing values normalize to None."""
    assert normalize_amount(None) is None
    assert normalize_amount("") is None
    assert normalize_amount("  ") is None


def test_normalize_garbage_is_absent():
    """Test unparseable values normalize to None instead of raising."""
    assert normalize_amount("n/a") is None


def test_normalize_absolute_discards_sign():
    """Test debit/credit style normalization forces non-negative values."""
    assert normalize_amount("-50.00", absolute=True) == Decimal("50.00")
    assert normalize_amount("50.00", absolute=True) == Decimal("50.00")


def test_normalize_keeps_sign_by_default():
    """Test balance style normalization keeps the sign."""
    assert normalize_amount("-50.00") == Decimal("-50.00")
