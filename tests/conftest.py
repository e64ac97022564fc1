"""Shared pytest fixtures configured to use SQLite in-memory for unit tests."""

import logging
import os
from uuid import uuid4

# Tell app lifespan to skip real DB init
os.environ.setdefault("POSTBOOK_SKIP_LIFESPAN_DB", "1")

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from postbook.api.dependencies import get_optional_response_cache, get_response_cache
from postbook.config import Settings, get_settings
from postbook.core.cache import ResponseCache
from postbook.core.models import BaseModel, User
from postbook.database import get_db_session
from postbook.main import app
from postbook.security.jwt import create_access_token
from postbook.security.password import hash_password

# Silence extremely verbose DEBUG logs from aiosqlite to keep test output readable
logging.getLogger("aiosqlite").setLevel(logging.WARNING)

TEST_PASSWORD = "TestPassword123!"


@pytest.fixture(scope="session")
def test_settings():
    """Override settings for testing using SQLite in-memory DB."""
    return Settings(
        database_url="sqlite+aiosqlite:///:memory:",
        secret_key="test-secret-key",
        debug=True,
        redis_url=os.getenv("TEST_REDIS_URL", "redis://localhost:6379/15"),
    )


@pytest.fixture
async def test_engine(test_settings):
    """A fresh SQLite in-memory database per test."""
    engine = create_async_engine(
        test_settings.database_url,
        echo=False,
        poolclass=StaticPool,  # keep the same memory DB across connections
        connect_args={"check_same_thread": False},
    )

    # SQLite needs this for ON DELETE CASCADE
    @event.listens_for(engine.sync_engine, "connect")
    def _set_sqlite_pragma(dbapi_connection, connection_record):  # noqa: ANN001
        cursor = dbapi_connection.cursor()
        try:
            cursor.execute("PRAGMA foreign_keys=ON")
        finally:
            cursor.close()

    async with engine.begin() as conn:
        await conn.run_sync(BaseModel.metadata.create_all)

    try:
        yield engine
    finally:
        await engine.dispose()


@pytest.fixture
def session_maker(test_engine):
    return async_sessionmaker(test_engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
async def test_session(session_maker):
    """Session for arranging data directly in the database."""
    async with session_maker() as session:
        try:
            yield session
        finally:
            await session.rollback()


@pytest.fixture
def response_cache(test_settings):
    """An isolated cache; nothing leaks between tests."""
    return ResponseCache.from_settings(test_settings)


@pytest.fixture
def test_app(session_maker, response_cache, test_settings):
    """FastAPI app with database, cache and settings overridden."""

    async def _override_get_db():
        async with session_maker() as session:
            yield session

    app.dependency_overrides[get_db_session] = _override_get_db
    app.dependency_overrides[get_response_cache] = lambda: response_cache
    app.dependency_overrides[get_optional_response_cache] = lambda: response_cache
    app.dependency_overrides[get_settings] = lambda: test_settings
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
async def async_client(test_app):
    """Create async test client."""
    transport = ASGITransport(app=test_app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


async def _create_user(session: AsyncSession, username: str) -> User:
    user = User(
        username=username,
        password_hash=hash_password(TEST_PASSWORD),
        full_name=username.replace("_", " ").title(),
        is_active=True,
    )
    session.add(user)
    await session.commit()
    await session.refresh(user)
    return user


@pytest.fixture
async def test_user(test_session):
    """Create a test user in the database."""
    return await _create_user(test_session, f"testuser_{uuid4().hex[:8]}")


@pytest.fixture
async def other_user(test_session):
    """A second user, for ownership checks."""
    return await _create_user(test_session, f"otheruser_{uuid4().hex[:8]}")


def _bearer(user: User) -> dict:
    access_token = create_access_token({"sub": str(user.id)})
    return {"Authorization": f"Bearer {access_token}"}


@pytest.fixture
def auth_headers(test_user):
    """Create authentication headers with a valid JWT token."""
    return _bearer(test_user)


@pytest.fixture
def other_auth_headers(other_user):
    return _bearer(other_user)


@pytest.fixture
def test_post_data():
    """Sample post data for testing."""
    return {
        "title": "Test Post",
        "content": "This is a test post content",
        "category": "Work",
        "tags": ["test", "example"],
    }
