"""
Bookstore Backend — Books Routes
==================================

What:  /api/books endpoints (list, get, create, update, delete).
How:   The generic CRUD router bound to BookRepository and the book DTOs.
       A book's author_id is checked by the database foreign key; a write
       naming a missing author surfaces as an IntegrityError → 500.
"""

from bookstore.repositories.book_repository import BookRepository
from bookstore.routes.crud import CrudResource, build_crud_router
from bookstore.schemas.book import BookCreate, BookResponse, BookUpdate

BOOKS = CrudResource(
    name="Book",
    plural="Books",
    path="books",
    repository=BookRepository,
    create_schema=BookCreate,
    update_schema=BookUpdate,
    response_schema=BookResponse,
)

router = build_crud_router(BOOKS)
