"""
Bookstore Backend — Authors Routes
====================================

What:  /api/authors endpoints (list, get, create, update, delete).
How:   The generic CRUD router bound to AuthorRepository and the author DTOs.
"""

from bookstore.repositories.author_repository import AuthorRepository
from bookstore.routes.crud import CrudResource, build_crud_router
from bookstore.schemas.author import AuthorCreate, AuthorResponse, AuthorUpdate

AUTHORS = CrudResource(
    name="Author",
    plural="Authors",
    path="authors",
    repository=AuthorRepository,
    create_schema=AuthorCreate,
    update_schema=AuthorUpdate,
    response_schema=AuthorResponse,
)

router = build_crud_router(AUTHORS)
