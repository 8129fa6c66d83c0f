"""Entities organized by business concept.

Each entity has its own package containing:
- entity.py: stored record snapshot plus request/response models
- table.py: Database persistence model
- repository.py: Data access layer built on ``VersionedRepository``

Importing this package registers every table with ``SQLModel.metadata``.
"""

from .core.user import User, UserRepository, UserTable
from .service.category import Category, CategoryRepository, CategoryTable
from .service.customer import Customer, CustomerRepository, CustomerTable
from .service.product import Product, ProductRepository, ProductTable
from .service.supplier import Supplier, SupplierRepository, SupplierTable

__all__ = [
    "User",
    "UserTable",
    "UserRepository",
    "Customer",
    "CustomerTable",
    "CustomerRepository",
    "Category",
    "CategoryTable",
    "CategoryRepository",
    "Supplier",
    "SupplierTable",
    "SupplierRepository",
    "Product",
    "ProductTable",
    "ProductRepository",
]
