"""
Bookstore Backend — Book Transfer Objects
===========================================

What:  Create / update / read shapes of a book at the API boundary.

Field rules:
    - title:     required, 1-200 characters
    - year:      optional publication year
    - isbn:      optional, up to 20 characters (ISBN-10/13 with separators)
    - summary:   optional, up to 500 characters
    - image_url: optional cover image URL, up to 500 characters
    - author_id: optional reference to an existing author. Whether the author
                 exists is decided by the database foreign key.
"""

from typing import Optional

from pydantic import BaseModel, Field


class BookCreate(BaseModel):
    """Body of POST /api/books."""
    title: str = Field(min_length=1, max_length=200, description="Book title")
    year: Optional[int] = Field(default=None, description="Publication year")
    isbn: Optional[str] = Field(default=None, max_length=20, description="ISBN")
    summary: Optional[str] = Field(default=None, max_length=500, description="Short summary")
    image_url: Optional[str] = Field(default=None, max_length=500, description="Cover image URL")
    author_id: Optional[int] = Field(default=None, description="Id of the book's author")


class BookUpdate(BookCreate):
    """Body of PUT /api/books/{id}; `id` must equal the path id."""
    id: int = Field(strict=True, description="Identifier of the book being replaced")


class BookResponse(BaseModel):
    """
    What:  Read shape returned by GET /api/books and GET /api/books/{id}.
    Note:  Flat. The author is referenced by author_id only.
    """
    id: int = Field(description="Book identifier")
    title: str
    year: Optional[int] = None
    isbn: Optional[str] = None
    summary: Optional[str] = None
    image_url: Optional[str] = None
    author_id: Optional[int] = None

    model_config = {"from_attributes": True}
