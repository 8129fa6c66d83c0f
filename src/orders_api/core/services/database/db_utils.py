"""Helpers for translating driver errors into application errors."""

from loguru import logger
from sqlalchemy.exc import IntegrityError

from src.orders_api.core.errors import (
    OrdersApiError,
    ReferentialIntegrityViolation,
    UnexpectedStoreError,
    UniqueConstraintViolation,
)

# PostgreSQL SQLSTATE codes
FOREIGN_KEY_VIOLATION = "23503"
UNIQUE_VIOLATION = "23505"


def _sqlstate(error: IntegrityError) -> str | None:
    orig = error.orig
    return getattr(orig, "sqlstate", None) or getattr(orig, "pgcode", None)


def classify_integrity_error(error: IntegrityError, table: str) -> OrdersApiError:
    """Map an ``IntegrityError`` raised by the driver onto the error taxonomy.

    PostgreSQL reports a SQLSTATE; SQLite only reports a message, so both are
    inspected.
    """
    state = _sqlstate(error)
    message = str(error.orig).lower()

    if state == FOREIGN_KEY_VIOLATION or "foreign key" in message:
        return ReferentialIntegrityViolation(table)
    if state == UNIQUE_VIOLATION or "unique" in message or "duplicate key" in message:
        return UniqueConstraintViolation(table)

    logger.error("Unclassified integrity error on {}: {}", table, error.orig)
    return UnexpectedStoreError("write", f"Integrity error on {table}")
