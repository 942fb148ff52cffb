"""Shared dependencies for the HTTP API routes."""

from typing import Generator

from fastapi import Request

from spendtracker.database.base import Database


def get_db(request: Request) -> Generator[Database, None, None]:
    """Yield a database handle for one request and close it afterwards.

    Each request gets its own session on the application's store, so
    concurrent requests never share a unit of work.

    Typical usage in routes:
        db: Database = Depends(get_db)
    """
    db = request.app.state.db.open_session()
    try:
        yield db
    finally:
        db.disconnect()
