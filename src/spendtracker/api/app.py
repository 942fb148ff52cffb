"""FastAPI application factory.

Run with:
    uvicorn --factory spendtracker.api.app:create_app
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from spendtracker.api import routes_categories, routes_transactions
from spendtracker.database.base import Database
from spendtracker.database.factories import create_database
from spendtracker.domain.errors import (
    ConflictError,
    DependencyError,
    NotFoundError,
    ValidationError,
)

logger = logging.getLogger(__name__)

ERROR_STATUS = (
    (NotFoundError, 404),
    (ConflictError, 409),
    (ValidationError, 400),
    (DependencyError, 400),
)


def create_app(db: Optional[Database] = None) -> FastAPI:
    """Create the API application.

    Args:
        db: Store to serve; requests open their own sessions on it. If None,
            one is created from the environment
            (SPENDTRACKER_DATABASE_URL, then SPENDTRACKER_DB_PATH).
    """
    app = FastAPI(title="SpendTracker API")

    if db is None:
        db = create_database()
        db.connect()
        db.initialize_schema()
    app.state.db = db

    for error_type, status_code in ERROR_STATUS:
        app.add_exception_handler(error_type, _error_handler(status_code))

    app.include_router(routes_transactions.router)
    app.include_router(routes_categories.router)

    @app.get("/health")
    def health():
        return {"status": "ok"}

    return app


def _error_handler(status_code: int):
    """Build a handler that renders a domain error with the given status."""

    async def handler(request: Request, exc: Exception) -> JSONResponse:
        logger.info("%s %s -> %d: %s", request.method, request.url.path, status_code, exc)
        return JSONResponse(status_code=status_code, content={"detail": str(exc)})

    return handler
