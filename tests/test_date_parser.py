"""Tests for date parsing."""

import pytest
from datetime import date, timedelta
from dateutil.relativedelta import relativedelta
from spendtracker.utils.date_parser import parse_date, get_date_range


def test_parse_iso_date():
    """Test parsing ISO dates."""
    assert parse_date("2024-01-15") == date(2024, 1, 15)


def test_parse_us_date():
    """Test parsing month/day/year dates as exported by US banks."""
    assert parse_date("01/15/2024") == date(2024, 1, 15)


def test_parse_long_date():
    """Test parsing written-out dates."""
    assert parse_date("January 15, 2024") == date(2024, 1, 15)


def test_parse_discards_time_of_day():
    """Test date/time values keep only the calendar date."""
    assert parse_date("2024-01-15 23:59:59") == date(2024, 1, 15)
    assert parse_date("1/15/2024 8:30 AM") == date(2024, 1, 15)


@pytest.mark.parametrize("value", ["", "   ", "not a date", "2024-13-45"])
def test_parse_invalid_date_raises(value):
    """Test invalid dates raise ValueError."""
    with pytest.raises(ValueError):
        parse_date(value)


@pytest.mark.parametrize("value", ["March", "5", "Jan 15", "2024", "February 2024", "Monday"])
def test_parse_partial_date_raises(value):
    """Test dates missing a year, month or day are rejected."""
    with pytest.raises(ValueError, match="Incomplete date"):
        parse_date(value)


def test_parse_leap_day():
    """Test a complete leap day is accepted."""
    assert parse_date("02/29/2024") == date(2024, 2, 29)


def test_get_date_range_this_month():
    """Test this-month range."""
    today = date.today()
    assert get_date_range("this-month") == (today.replace(day=1), today)


def test_get_date_range_this_year():
    """Test this-year range."""
    today = date.today()
    assert get_date_range("this-year") == (today.replace(month=1, day=1), today)


def test_get_date_range_last_month():
    """Test last-month range covers the whole previous month."""
    start, end = get_date_range("last-month")
    today = date.today()
    assert start == (today - relativedelta(months=1)).replace(day=1)
    assert end == today.replace(day=1) - timedelta(days=1)


def test_get_date_range_last_year():
    """Test last-year range covers the whole previous year."""
    start, end = get_date_range("last-year")
    year = date.today().year - 1
    assert (start, end) == (date(year, 1, 1), date(year, 12, 31))


def test_get_date_range_unknown_period():
    """Test unknown periods raise ValueError."""
    with pytest.raises(ValueError) as excinfo:
        get_date_range("next-decade")
    assert "Unknown period" in str(excinfo.value)
