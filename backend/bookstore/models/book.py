"""
Bookstore Backend — Book SQLAlchemy Model
===========================================

What:  ORM model representing the `books` table.
Who:   Used by BookRepository for CRUD operations and by Alembic.

Table Design:
    - Integer surrogate primary key (autoincrement)
    - title required; year, isbn, summary, image_url optional
    - author_id: nullable foreign key to authors.id. Referential integrity is
      enforced by the database, not by application code.
"""

from typing import TYPE_CHECKING, Optional

from sqlalchemy import ForeignKey, Index, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from bookstore.database import Base

if TYPE_CHECKING:
    from bookstore.models.author import Author


class Book(Base):
    """A catalogued book, optionally linked to its author."""

    __tablename__ = "books"

    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
    )

    title: Mapped[str] = mapped_column(String(200), nullable=False)

    year: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)

    isbn: Mapped[Optional[str]] = mapped_column(String(20), nullable=True)

    summary: Mapped[Optional[str]] = mapped_column(String(500), nullable=True)

    # Absolute or site-relative URL of the cover image
    image_url: Mapped[Optional[str]] = mapped_column(String(500), nullable=True)

    author_id: Mapped[Optional[int]] = mapped_column(
        Integer,
        ForeignKey("authors.id", ondelete="SET NULL"),
        nullable=True,
    )

    author: Mapped[Optional["Author"]] = relationship(back_populates="books")

    # Listing an author's books filters on author_id
    __table_args__ = (
        Index("idx_books_author_id", "author_id"),
    )

    def __repr__(self) -> str:
        return f"<Book(id={self.id}, title='{self.title}', author_id={self.author_id})>"
