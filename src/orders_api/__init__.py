"""Orders API.

CRUD backend for users, customers, categories, suppliers and products with
optimistic-concurrency-controlled updates and password authentication.
"""

__version__ = "0.1.0"
