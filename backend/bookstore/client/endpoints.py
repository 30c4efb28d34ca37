"""
Bookstore Backend — Client Endpoints
======================================

Fixed API locations consumed by the client repositories. The base URL comes
from settings.api_base_url (API_BASE_URL in the environment).
"""

from dataclasses import dataclass

from bookstore.config import settings


@dataclass(frozen=True)
class EndPoints:
    """Resource URLs under one base URL. Resource URLs carry no trailing slash."""
    base_url: str

    @property
    def authors(self) -> str:
        return f"{self.base_url}/api/authors"

    @property
    def books(self) -> str:
        return f"{self.base_url}/api/books"

    @property
    def login(self) -> str:
        return f"{self.base_url}/api/users/login"

    @property
    def register(self) -> str:
        return f"{self.base_url}/api/users/register"

    @classmethod
    def from_settings(cls) -> "EndPoints":
        return cls(base_url=settings.api_base_url)
