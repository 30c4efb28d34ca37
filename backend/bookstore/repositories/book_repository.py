"""Book persistence operations."""

from bookstore.models.book import Book
from bookstore.repositories.base import Repository


class BookRepository(Repository[Book]):
    model = Book
