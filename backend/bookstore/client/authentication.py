"""
Bookstore Backend — Authentication Client
===========================================

What:  Register / login / logout against the identity provider's fixed
       endpoints (/api/users/register, /api/users/login).
How:   A successful login stores the returned token and sets
       `Authorization: Bearer <token>` on the shared httpx.AsyncClient, so
       AuthorClient / BookClient built on the same client send it too.

    http = build_http_client()
    auth = AuthenticationClient(http)
    if await auth.login(UserLogin(email_address=..., password=...)):
        books = BookClient(http)
"""

import logging
from typing import Optional

import httpx
from pydantic import ValidationError

from bookstore.client.base_repository import build_http_client
from bookstore.client.endpoints import EndPoints
from bookstore.schemas.user import TokenResponse, UserLogin, UserRegistration

logger = logging.getLogger(__name__)

AUTHORIZATION_HEADER = "Authorization"


class AuthenticationClient:
    """Login state for one shared HTTP client."""

    def __init__(
        self,
        client: Optional[httpx.AsyncClient] = None,
        endpoints: Optional[EndPoints] = None,
    ):
        self._owns_client = client is None
        self.client = client if client is not None else build_http_client()
        self.endpoints = endpoints or EndPoints.from_settings()
        self.token: Optional[str] = None

    @property
    def is_authenticated(self) -> bool:
        return self.token is not None

    async def register(self, registration: UserRegistration) -> bool:
        """True on any 2xx from the register endpoint."""
        response = await self.client.post(
            self.endpoints.register,
            json=registration.model_dump(mode="json"),
        )
        if response.is_success:
            return True
        logger.warning("Registration rejected with status %d", response.status_code)
        return False

    async def login(self, credentials: UserLogin) -> bool:
        """
        Exchange credentials for a token.

        Returns False (and stays logged out) on a non-2xx status or a body
        that is not a TokenResponse.
        """
        response = await self.client.post(
            self.endpoints.login,
            json=credentials.model_dump(mode="json"),
        )
        if not response.is_success:
            logger.warning("Login rejected with status %d", response.status_code)
            return False
        try:
            token = TokenResponse.model_validate(response.json()).token
        except (ValueError, ValidationError) as e:
            logger.warning("Login response carried no usable token: %s", e)
            return False

        self.token = token
        self.client.headers[AUTHORIZATION_HEADER] = f"Bearer {token}"
        return True

    def logout(self) -> None:
        self.token = None
        self.client.headers.pop(AUTHORIZATION_HEADER, None)

    async def aclose(self) -> None:
        if self._owns_client:
            await self.client.aclose()
