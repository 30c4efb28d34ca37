"""Tests for AuthenticationClient and the credential schemas."""

import json

import httpx
import pytest
from pydantic import ValidationError

from bookstore.client import AuthenticationClient, AuthorClient, EndPoints
from bookstore.schemas import UserLogin, UserRegistration

ENDPOINTS = EndPoints(base_url="http://identity.test")


def identity_provider(token="abc.def.ghi", login_status=200):
    """Handler imitating the register and login endpoints."""

    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.path == "/api/users/register":
            return httpx.Response(200)
        if request.url.path == "/api/users/login":
            if login_status != 200:
                return httpx.Response(login_status)
            return httpx.Response(200, json={"token": token})
        # Any other call echoes whatever Authorization header it carried
        return httpx.Response(200, json={"authorization": request.headers.get("Authorization")})

    return handler


@pytest.fixture
def credentials():
    return UserLogin(email_address="reader@example.com", password="secret1")


class TestLogin:
    @pytest.mark.asyncio
    async def test_login_sets_bearer_header(self, credentials):
        async with httpx.AsyncClient(transport=httpx.MockTransport(identity_provider())) as http:
            auth = AuthenticationClient(http, ENDPOINTS)

            assert await auth.login(credentials) is True
            assert auth.is_authenticated
            assert http.headers["Authorization"] == "Bearer abc.def.ghi"

            echoed = await http.get("http://identity.test/anything")
            assert echoed.json()["authorization"] == "Bearer abc.def.ghi"

    @pytest.mark.asyncio
    async def test_token_is_shared_with_resource_clients(self, credentials):
        async with httpx.AsyncClient(transport=httpx.MockTransport(identity_provider())) as http:
            auth = AuthenticationClient(http, ENDPOINTS)
            authors = AuthorClient(http, ENDPOINTS)

            await auth.login(credentials)

            assert authors.client.headers["Authorization"] == "Bearer abc.def.ghi"

    @pytest.mark.asyncio
    async def test_rejected_login_returns_false(self, credentials):
        handler = identity_provider(login_status=401)
        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as http:
            auth = AuthenticationClient(http, ENDPOINTS)

            assert await auth.login(credentials) is False
            assert not auth.is_authenticated
            assert "Authorization" not in http.headers

    @pytest.mark.asyncio
    async def test_login_without_token_returns_false(self, credentials):
        def handler(request):
            return httpx.Response(200, json={"unexpected": True})

        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as http:
            assert await AuthenticationClient(http, ENDPOINTS).login(credentials) is False

    @pytest.mark.asyncio
    async def test_logout_clears_header(self, credentials):
        async with httpx.AsyncClient(transport=httpx.MockTransport(identity_provider())) as http:
            auth = AuthenticationClient(http, ENDPOINTS)
            await auth.login(credentials)

            auth.logout()

            assert auth.token is None
            assert "Authorization" not in http.headers


class TestRegister:
    @pytest.mark.asyncio
    async def test_register_posts_form(self):
        sent = []

        def handler(request):
            sent.append(request)
            return httpx.Response(201)

        registration = UserRegistration(
            email_address="reader@example.com", password="secret1", confirm_password="secret1"
        )
        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as http:
            assert await AuthenticationClient(http, ENDPOINTS).register(registration) is True

        assert str(sent[0].url) == "http://identity.test/api/users/register"
        assert json.loads(sent[0].content)["email_address"] == "reader@example.com"

    @pytest.mark.asyncio
    async def test_register_rejected(self):
        registration = UserRegistration(
            email_address="reader@example.com", password="secret1", confirm_password="secret1"
        )
        transport = httpx.MockTransport(lambda request: httpx.Response(409))
        async with httpx.AsyncClient(transport=transport) as http:
            assert await AuthenticationClient(http, ENDPOINTS).register(registration) is False


class TestCredentialSchemas:
    def test_password_mismatch_is_rejected(self):
        with pytest.raises(ValidationError):
            UserRegistration(
                email_address="reader@example.com", password="secret1", confirm_password="secret2"
            )

    def test_password_length_bounds(self):
        with pytest.raises(ValidationError):
            UserRegistration(email_address="reader@example.com", password="abc", confirm_password="abc")

    def test_invalid_email_is_rejected(self):
        with pytest.raises(ValidationError):
            UserLogin(email_address="not-an-email", password="secret1")
