"""
Bookstore Backend — Test Configuration (conftest.py)
======================================================

What:  Shared pytest fixtures for the entire test suite.
How:   The environment is pointed at a throwaway SQLite database BEFORE any
       bookstore module is imported; endpoint tests run the real app over
       ASGITransport with the session dependency bound to a fresh
       per-test database.

Fixtures (all function-scoped):
    ├── mock_db_session: AsyncMock standing in for AsyncSession
    ├── db_engine:       async engine on a temp SQLite file, schema created
    ├── session_factory: async_sessionmaker over db_engine
    ├── db_session:      one AsyncSession for repository tests
    └── test_client:     HTTPX AsyncClient talking to the FastAPI app
"""

import os
import tempfile

# Must run before bookstore.config is imported anywhere
os.environ["DATABASE_URL"] = (
    "sqlite+aiosqlite:///"
    + os.path.join(tempfile.mkdtemp(prefix="bookstore_test_"), "app.db")
)
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["API_BASE_URL"] = "http://test"

from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

import bookstore.models  # noqa: F401  (registers tables on Base.metadata)
from bookstore.database import Base, get_db_session


@pytest.fixture
def mock_db_session():
    """
    A mock async database session for fault-injection tests.

    Staged-change collections start empty; tests fill them as needed.
    """
    session = AsyncMock()
    session.execute = AsyncMock()
    session.get = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.delete = AsyncMock()
    session.close = AsyncMock()
    session.add = MagicMock()
    session.new = []
    session.dirty = []
    session.deleted = []
    return session


@pytest_asyncio.fixture
async def db_engine(tmp_path):
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'bookstore.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def session_factory(db_engine):
    return async_sessionmaker(db_engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def db_session(session_factory):
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def test_client(session_factory):
    """
    HTTPX AsyncClient routed straight into a fresh app instance.

    Usage:
        async def test_list(test_client):
            response = await test_client.get("/api/authors")
            assert response.status_code == 200
    """
    from bookstore.main import create_app

    app = create_app()

    async def override_session():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db_session] = override_session

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture
def author_payload():
    return {"first_name": "Frank", "last_name": "Herbert"}


@pytest.fixture
def book_payload():
    return {
        "title": "Dune",
        "year": 1965,
        "isbn": "978-0441013593",
        "summary": "A desert planet and the spice that rules the universe.",
        "image_url": "https://covers.example/dune.jpg",
        "author_id": None,
    }
