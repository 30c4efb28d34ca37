"""Author persistence operations."""

from bookstore.models.author import Author
from bookstore.repositories.base import Repository


class AuthorRepository(Repository[Author]):
    model = Author
