"""Core services exports."""

from .database.db_session import DbSessionService
from .password_service import PasswordService

__all__ = [
    "DbSessionService",
    "PasswordService",
]
