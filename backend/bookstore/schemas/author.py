"""
Bookstore Backend — Author Transfer Objects
=============================================

What:  Create / update / read shapes of an author at the API boundary.
"""

from pydantic import BaseModel, Field


class AuthorCreate(BaseModel):
    """
    What:  Body of POST /api/authors.
    Who:   Sent by AuthorClient.add and validated by the Authors router.
    """
    first_name: str = Field(min_length=1, max_length=50, description="Given name")
    last_name: str = Field(min_length=1, max_length=50, description="Family name")


class AuthorUpdate(AuthorCreate):
    """
    What:  Body of PUT /api/authors/{id}. Full replacement of every field.
    Rule:  `id` must be an integer (booleans and numeric strings are rejected)
           equal to the id in the URL path (checked by the router).
    """
    id: int = Field(strict=True, description="Identifier of the author being replaced")


class AuthorResponse(BaseModel):
    """Read shape returned by GET /api/authors and GET /api/authors/{id}."""
    id: int = Field(description="Author identifier")
    first_name: str = Field(description="Given name")
    last_name: str = Field(description="Family name")

    model_config = {"from_attributes": True}
