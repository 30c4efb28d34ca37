"""
Bookstore Backend — Entity Client Repositories
================================================

BaseRepository bound to the author and book DTOs, with the resource URL
filled in from EndPoints:

    async with AuthorClient() as authors:
        await authors.add(AuthorCreate(first_name="Frank", last_name="Herbert"))
        everyone = await authors.list()
"""

from typing import List, Optional

import httpx

from bookstore.client.base_repository import BaseRepository, item_url
from bookstore.client.endpoints import EndPoints
from bookstore.schemas.author import AuthorCreate, AuthorResponse, AuthorUpdate
from bookstore.schemas.book import BookCreate, BookResponse, BookUpdate


class AuthorClient(BaseRepository[AuthorResponse]):
    """Client for /api/authors."""

    def __init__(
        self,
        client: Optional[httpx.AsyncClient] = None,
        endpoints: Optional[EndPoints] = None,
    ):
        super().__init__(AuthorResponse, client)
        self.url = (endpoints or EndPoints.from_settings()).authors

    async def list(self) -> Optional[List[AuthorResponse]]:
        return await self.get_all(self.url)

    async def fetch(self, author_id: int) -> Optional[AuthorResponse]:
        return await self.get(self.url, author_id)

    async def add(self, author: Optional[AuthorCreate]) -> bool:
        return await self.create(self.url, author)

    async def replace(self, author: Optional[AuthorUpdate]) -> bool:
        if author is None:
            return False
        return await self.update(item_url(self.url, author.id), author)

    async def remove(self, author_id: int) -> bool:
        return await self.delete(self.url, author_id)


class BookClient(BaseRepository[BookResponse]):
    """Client for /api/books."""

    def __init__(
        self,
        client: Optional[httpx.AsyncClient] = None,
        endpoints: Optional[EndPoints] = None,
    ):
        super().__init__(BookResponse, client)
        self.url = (endpoints or EndPoints.from_settings()).books

    async def list(self) -> Optional[List[BookResponse]]:
        return await self.get_all(self.url)

    async def fetch(self, book_id: int) -> Optional[BookResponse]:
        return await self.get(self.url, book_id)

    async def add(self, book: Optional[BookCreate]) -> bool:
        return await self.create(self.url, book)

    async def replace(self, book: Optional[BookUpdate]) -> bool:
        if book is None:
            return False
        return await self.update(item_url(self.url, book.id), book)

    async def remove(self, book_id: int) -> bool:
        return await self.delete(self.url, book_id)
