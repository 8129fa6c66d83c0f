"""Entity package: Category."""

from .entity import Category, CategoryCreate, CategoryRead, CategoryUpdate
from .repository import CategoryRepository
from .table import CategoryTable

__all__ = [
    "Category",
    "CategoryCreate",
    "CategoryRead",
    "CategoryUpdate",
    "CategoryRepository",
    "CategoryTable",
]
