"""Mapping of driver integrity errors onto the store error taxonomy."""

import pytest
from sqlalchemy.exc import IntegrityError

from src.orders_api.core.errors import (
    ReferentialIntegrityViolation,
    UnexpectedStoreError,
    UniqueConstraintViolation,
)
from src.orders_api.core.services.database.db_utils import classify_integrity_error


def _integrity_error(orig: Exception) -> IntegrityError:
    return IntegrityError("INSERT ...", {}, orig)


class _PgError(Exception):
    def __init__(self, message: str, sqlstate: str):
        super().__init__(message)
        self.sqlstate = sqlstate


class TestClassifyIntegrityError:
    def test_sqlite_foreign_key_message(self):
        error = classify_integrity_error(
            _integrity_error(Exception("FOREIGN KEY constraint failed")), "products"
        )
        assert isinstance(error, ReferentialIntegrityViolation)
        assert error.details == {"table": "products"}

    def test_sqlite_unique_message(self):
        error = classify_integrity_error(
            _integrity_error(Exception("UNIQUE constraint failed: categories.name")), "categories"
        )
        assert isinstance(error, UniqueConstraintViolation)

    @pytest.mark.parametrize(
        ("sqlstate", "expected"),
        [("23503", ReferentialIntegrityViolation), ("23505", UniqueConstraintViolation)],
    )
    def test_postgres_sqlstate(self, sqlstate, expected):
        error = classify_integrity_error(_integrity_error(_PgError("violation", sqlstate)), "users")
        assert isinstance(error, expected)

    def test_other_integrity_errors_are_unexpected(self):
        error = classify_integrity_error(
            _integrity_error(Exception("NOT NULL constraint failed: categories.name")), "categories"
        )
        assert isinstance(error, UnexpectedStoreError)
