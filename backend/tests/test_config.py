"""
Bookstore Backend — Configuration, Startup and Health Tests
=============================================================

What:  Settings validation, engine options per backend, the startup
       database wait and GET /health.
"""

from unittest.mock import MagicMock, patch

import pytest
from pydantic import ValidationError
from sqlalchemy.pool import NullPool
from tenacity import stop_after_attempt, wait_none

from bookstore import __version__
from bookstore import database
from bookstore.client import EndPoints
from bookstore.config import Settings


class TestSettings:
    def test_log_level_is_normalized(self):
        assert Settings(log_level="debug").log_level == "DEBUG"

    def test_invalid_log_level_is_rejected(self):
        with pytest.raises(ValidationError):
            Settings(log_level="LOUD")

    def test_cors_origins_are_split(self):
        s = Settings(cors_origins="http://a.test, http://b.test,")
        assert s.cors_origins_list == ["http://a.test", "http://b.test"]

    def test_api_base_url_trailing_slash_is_stripped(self):
        s = Settings(api_base_url="https://books.test/")
        assert EndPoints(base_url=s.api_base_url).authors == "https://books.test/api/authors"


class TestEngineOptions:
    def test_sqlite_gets_no_pool_sizing(self):
        options = database.engine_options("sqlite+aiosqlite:///x.db")
        assert "pool_size" not in options
        assert options["poolclass"] is NullPool

    def test_server_database_gets_pool(self):
        options = database.engine_options("postgresql+asyncpg://u:p@h/db")
        assert options["pool_pre_ping"] is True
        assert options["pool_size"] >= 5


class TestStartupWait:
    @pytest.mark.asyncio
    async def test_wait_for_database_succeeds(self):
        await database.wait_for_database()

    @pytest.mark.asyncio
    async def test_wait_for_database_gives_up_and_reraises(self):
        unreachable = MagicMock()
        unreachable.connect.side_effect = OSError("connection refused")
        fast = database.wait_for_database.retry_with(wait=wait_none(), stop=stop_after_attempt(3))

        with patch.object(database, "engine", unreachable):
            with pytest.raises(OSError):
                await fast()

        assert unreachable.connect.call_count == 3


class TestHealth:
    @pytest.mark.asyncio
    async def test_health_reports_connected(self, test_client):
        response = await test_client.get("/health")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "healthy"
        assert body["database"] == "connected"
        assert body["version"] == __version__
