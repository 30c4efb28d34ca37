# Schemas package init
"""
Bookstore Backend — Transfer Objects
======================================

Pydantic models forming the wire contract shared by the API routes and the
client repositories. Each entity has a create-shaped, an update-shaped and a
read-shaped model.
"""

from bookstore.schemas.author import AuthorCreate, AuthorResponse, AuthorUpdate
from bookstore.schemas.book import BookCreate, BookResponse, BookUpdate
from bookstore.schemas.common import ErrorResponse, HealthResponse
from bookstore.schemas.user import TokenResponse, UserLogin, UserRegistration

__all__ = [
    "AuthorCreate",
    "AuthorResponse",
    "AuthorUpdate",
    "BookCreate",
    "BookResponse",
    "BookUpdate",
    "ErrorResponse",
    "HealthResponse",
    "TokenResponse",
    "UserLogin",
    "UserRegistration",
]
