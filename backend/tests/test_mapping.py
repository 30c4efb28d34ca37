"""Tests for DTO ↔ entity conversion."""

import pytest
from pydantic import BaseModel

from bookstore.mapping import to_dto, to_dtos, to_entity
from bookstore.models import Author, Book
from bookstore.schemas import AuthorCreate, AuthorResponse, BookResponse, BookUpdate


class TestToEntity:
    def test_create_dto_has_no_id(self):
        author = to_entity(Author, AuthorCreate(first_name="Frank", last_name="Herbert"))

        assert isinstance(author, Author)
        assert author.id is None
        assert author.last_name == "Herbert"

    def test_update_dto_carries_id_and_nulls(self):
        book = to_entity(Book, BookUpdate(id=5, title="Dune"))

        assert book.id == 5
        assert book.title == "Dune"
        assert book.summary is None

    def test_dto_without_mapped_fields_is_rejected(self):
        class Unrelated(BaseModel):
            colour: str

        with pytest.raises(ValueError):
            to_entity(Author, Unrelated(colour="blue"))


class TestToDto:
    def test_reads_orm_attributes(self):
        dto = to_dto(AuthorResponse, Author(id=1, first_name="Frank", last_name="Herbert"))

        assert dto == AuthorResponse(id=1, first_name="Frank", last_name="Herbert")

    def test_book_is_flat(self):
        dto = to_dto(BookResponse, Book(id=2, title="Dune", author_id=1))

        assert dto.author_id == 1
        assert "author" not in dto.model_dump()

    def test_to_dtos_keeps_order(self):
        books = [Book(id=2, title="B"), Book(id=1, title="A")]

        assert [dto.id for dto in to_dtos(BookResponse, books)] == [2, 1]
