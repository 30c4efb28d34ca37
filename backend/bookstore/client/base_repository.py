"""
Bookstore Backend — Generic Client Repository
===============================================

What:  Typed HTTP access to one resource of the Bookstore API.
How:   Wraps an httpx.AsyncClient. Bodies are serialized from pydantic DTOs;
       200 responses are decoded into the repository's DTO type `T`.
Who:   AuthorClient / BookClient (repositories.py) and the UI.

Result rules:
    get(url, id)        → T on 200, else None (404 and 500 look the same)
    get_all(url)        → list[T] on 200, else None
    create(url, dto)    → True iff 201;  False without a request for None
    update(url, dto)    → True iff 204;  False without a request for None
    delete(url, id)     → True iff 204;  False without a request for id < 1

Transport failures (connection refused, timeouts) raise httpx exceptions;
nothing is retried.
"""

import logging
from typing import Generic, List, Optional, Type, TypeVar

import httpx
from pydantic import BaseModel, TypeAdapter

from bookstore.config import settings

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)


def build_http_client() -> httpx.AsyncClient:
    """AsyncClient with the configured timeout and JSON Accept header."""
    return httpx.AsyncClient(
        timeout=settings.client_timeout,
        headers={"Accept": "application/json"},
    )


def item_url(url: str, entity_id: int) -> str:
    """`url` + `/id`, tolerating a trailing slash on `url`."""
    return f"{url.rstrip('/')}/{entity_id}"


class BaseRepository(Generic[T]):
    """
    HTTP repository decoding responses into `model`.

    Args:
        model:  Read DTO the API returns for this resource (e.g. AuthorResponse)
        client: Shared httpx.AsyncClient. When omitted a private one is built
                from settings and closed by aclose().
    """

    def __init__(self, model: Type[T], client: Optional[httpx.AsyncClient] = None):
        self.model = model
        self._owns_client = client is None
        self.client = client if client is not None else build_http_client()
        self._list_adapter = TypeAdapter(List[model])

    async def get(self, url: str, entity_id: int) -> Optional[T]:
        target = item_url(url, entity_id)
        response = await self.client.get(target)
        if response.status_code == httpx.codes.OK:
            return self.model.model_validate(response.json())
        logger.info("GET %s returned %d", target, response.status_code)
        return None

    async def get_all(self, url: str) -> Optional[List[T]]:
        response = await self.client.get(url)
        if response.status_code == httpx.codes.OK:
            return self._list_adapter.validate_python(response.json())
        logger.info("GET %s returned %d", url, response.status_code)
        return None

    async def create(self, url: str, entity: Optional[BaseModel]) -> bool:
        if entity is None:
            return False
        response = await self.client.post(url, json=entity.model_dump(mode="json"))
        return response.status_code == httpx.codes.CREATED

    async def update(self, url: str, entity: Optional[BaseModel]) -> bool:
        """PUT `entity` to `url`; the caller's url already ends in the id."""
        if entity is None:
            return False
        response = await self.client.put(url, json=entity.model_dump(mode="json"))
        return response.status_code == httpx.codes.NO_CONTENT

    async def delete(self, url: str, entity_id: int) -> bool:
        if entity_id < 1:
            return False
        response = await self.client.delete(item_url(url, entity_id))
        return response.status_code == httpx.codes.NO_CONTENT

    async def aclose(self) -> None:
        """Close the HTTP client if this repository built it."""
        if self._owns_client:
            await self.client.aclose()

    async def __aenter__(self) -> "BaseRepository[T]":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()
