"""Date parsing utilities."""

from datetime import date, datetime, timedelta
from dateutil import parser as date_parser
from dateutil.relativedelta import relativedelta

# Fill-ins for missing parts; they differ in year, month and day (both leap
# years) so any part absent from the input changes the result
_DEFAULTS = (datetime(2000, 1, 1), datetime(2004, 12, 28))


def parse_date(date_str: str) -> date:
    """Parse a date string into a date object.

    Accepts anything python-dateutil understands ("2024-01-15",
    "01/15/2024", "January 15, 2024", "2024-01-15 13:45:00", ...) as long as
    year, month and day are all given; partial values such as "March" or "5"
    are rejected instead of being completed from today. The time of day, if
    present, is discarded.

    Args:
        date_str: Date or date/time string

    Returns:
        Date object

    Raises:
        ValueError: If date string is empty or cannot be parsed
    """
    if date_str is None or not date_str.strip():
        raise ValueError("Empty date string")

    text = date_str.strip()
    try:
        first, second = (date_parser.parse(text, default=default).date() for default in _DEFAULTS)
    except (ValueError, OverflowError, TypeError) as e:
        raise ValueError(f"Could not parse date '{text}': {e}")

    if first != second:
        raise ValueError(f"Incomplete date '{text}': year, month and day are required")
    return first


def _month_start(day: date) -> date:
    return day.replace(day=1)


def _year_start(day: date) -> date:
    return day.replace(month=1, day=1)


# Each period maps today to an inclusive (start, end) pair
_PERIODS = {
    "this-month": lambda today: (_month_start(today), today),
    "this-year": lambda today: (_year_start(today), today),
    "last-month": lambda today: (
        _month_start(today - relativedelta(months=1)),
        _month_start(today) - timedelta(days=1),
    ),
    "last-year": lambda today: (
        _year_start(today) - relativedelta(years=1),
        _year_start(today) - timedelta(days=1),
    ),
}


def get_date_range(period: str) -> tuple[date, date]:
    """Get start and end dates for a named period relative to today.

    Args:
        period: One of this-month, this-year, last-month, last-year

    Returns:
        Tuple of (start_date, end_date), both inclusive

    Raises:
        ValueError: If period string is not recognized
    """
    key = period.strip().lower()
    if key not in _PERIODS:
        raise ValueError(
            f"Unknown period: '{key}'. Supported periods: {', '.join(_PERIODS)}"
        )
    return _PERIODS[key](date.today())
