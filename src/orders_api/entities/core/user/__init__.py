"""User entity module.

This module contains all User-related classes organized by responsibility:
- User: stored record (with password hash) and its request/response models
- UserTable: Database persistence model
- UserRepository: Data access layer
"""

from .entity import User, UserCreate, UserLogin, UserRead, UserUpdate
from .repository import UserRepository
from .table import UserTable

__all__ = [
    "User",
    "UserCreate",
    "UserLogin",
    "UserRead",
    "UserUpdate",
    "UserRepository",
    "UserTable",
]
