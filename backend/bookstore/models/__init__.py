# Models package init
"""
Bookstore Backend — ORM Models
================================

Importing this package registers every table with Base.metadata, which is
what Alembic autogenerate and the test schema fixture rely on.
"""

from bookstore.models.author import Author
from bookstore.models.book import Book

__all__ = ["Author", "Book"]
