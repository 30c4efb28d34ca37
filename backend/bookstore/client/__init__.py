# Client package init
"""
Bookstore Backend — HTTP Client Repositories
==============================================

What:  The UI-side counterpart of the API: typed wrappers that issue HTTP
       requests to the fixed endpoints and decode the JSON responses into the
       same DTOs the API uses.

Inventory:
    - endpoints.py:        EndPoints (base URL + resource URLs)
    - base_repository.py:  BaseRepository[T] (get / get_all / create / update / delete)
    - repositories.py:     AuthorClient, BookClient
    - authentication.py:   AuthenticationClient (register / login / logout)
"""

from bookstore.client.authentication import AuthenticationClient
from bookstore.client.base_repository import BaseRepository, build_http_client
from bookstore.client.endpoints import EndPoints
from bookstore.client.repositories import AuthorClient, BookClient

__all__ = [
    "AuthenticationClient",
    "AuthorClient",
    "BaseRepository",
    "BookClient",
    "EndPoints",
    "build_http_client",
]
