"""Database factory functions for creating database instances."""

import os
from pathlib import Path
from typing import Optional

from spendtracker.database.sqlalchemy_db import SQLAlchemyDatabase

DATABASE_URL_ENV = "SPENDTRACKER_DATABASE_URL"
DB_PATH_ENV = "SPENDTRACKER_DB_PATH"


def create_sqlite_database(database_path: Optional[str] = None) -> SQLAlchemyDatabase:
    """Create a SQLite database instance.

    Args:
        database_path: Path to SQLite database file. If None, checks SPENDTRACKER_DB_PATH
            environment variable, then defaults to ~/.spendtracker/spendtracker.db

    Returns:
        SQLAlchemyDatabase instance configured for SQLite
    """
    if database_path is None:
        # Check environment variable
        database_path = os.environ.get(DB_PATH_ENV)

    if database_path is None:
        # Default to ~/.spendtracker/spendtracker.db
        home = Path.home()
        db_dir = home / ".spendtracker"
        db_dir.mkdir(exist_ok=True)
        database_path = str(db_dir / "spendtracker.db")
    else:
        Path(database_path).parent.mkdir(parents=True, exist_ok=True)

    database_url = f"sqlite:///{database_path}"
    return SQLAlchemyDatabase(database_url)


def create_database(database_url: Optional[str] = None) -> SQLAlchemyDatabase:
    """Create a database instance from a SQLAlchemy URL.

    Args:
        database_url: SQLAlchemy URL. If None, checks SPENDTRACKER_DATABASE_URL,
            then falls back to the SQLite file from create_sqlite_database

    Returns:
        SQLAlchemyDatabase instance
    """
    if database_url is None:
        database_url = os.environ.get(DATABASE_URL_ENV)

    if database_url is None:
        return create_sqlite_database()

    return SQLAlchemyDatabase(database_url)
