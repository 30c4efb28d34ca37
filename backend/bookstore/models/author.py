"""
Bookstore Backend — Author SQLAlchemy Model
=============================================

What:  ORM model representing the `authors` table.
How:   Inherits from the shared DeclarativeBase; Alembic reads this for
       migrations.
Who:   Used by AuthorRepository for CRUD operations.

Table Design:
    - Integer surrogate primary key (autoincrement)
    - first_name / last_name: required, up to 50 characters
    - One-to-many to Book. Deleting an author leaves its books in place with
      author_id set to NULL.
"""

from typing import TYPE_CHECKING, List

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from bookstore.database import Base

if TYPE_CHECKING:
    from bookstore.models.book import Book


class Author(Base):
    """An author of zero or more books."""

    __tablename__ = "authors"

    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
    )

    first_name: Mapped[str] = mapped_column(
        String(50),
        nullable=False,
    )

    last_name: Mapped[str] = mapped_column(
        String(50),
        nullable=False,
    )

    # Deleting an author nulls author_id on its loaded books; the foreign key
    # does the same for databases that enforce ON DELETE SET NULL.
    books: Mapped[List["Book"]] = relationship(back_populates="author")

    def __repr__(self) -> str:
        return f"<Author(id={self.id}, name='{self.first_name} {self.last_name}')>"
