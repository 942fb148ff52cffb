"""Utility functions for spendtracker."""

from spendtracker.utils.date_parser import parse_date, get_date_range
from spendtracker.utils.amount_parser import parse_amount, normalize_amount

__all__ = ["parse_date", "get_date_range", "parse_amount", "normalize_amount"]
