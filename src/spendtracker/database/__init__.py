"""Database layer for spendtracker application."""

from spendtracker.database.base import Database
from spendtracker.database.factories import create_database, create_sqlite_database

__all__ = ["Database", "create_database", "create_sqlite_database"]
