# Repositories package init
"""
Bookstore Backend — Entity Repositories
=========================================

What:  Persistence operations for one entity type behind a uniform contract.
How:   Repository[T] implements the contract once; AuthorRepository and
       BookRepository bind it to their ORM model.

Contract (identical for every entity type):
    find_all()        → list of entities (empty list when there are none)
    find_by_id(id)    → entity or None
    does_exist(id)    → bool
    create(entity)    → bool   (stage insert, then save)
    update(entity)    → bool   (full-row replace by primary key, then save)
    delete(entity)    → bool   (stage removal, then save)
    save()            → bool   (commit; True iff something was staged)
"""

from bookstore.repositories.author_repository import AuthorRepository
from bookstore.repositories.base import Repository
from bookstore.repositories.book_repository import BookRepository

__all__ = ["AuthorRepository", "BookRepository", "Repository"]
