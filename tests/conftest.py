"""Shared fixtures: in-memory database and authenticated clients."""

from collections.abc import AsyncGenerator, Callable

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from mockinterview.db import get_db
from mockinterview.main import app
from mockinterview.models.base import Base
from mockinterview.security import create_access_token

TEST_DATABASE_URL = "sqlite+aiosqlite://"

USER_ID = "11111111-1111-4111-8111-111111111111"
OTHER_USER_ID = "22222222-2222-4222-8222-222222222222"


@pytest.fixture
async def test_engine():
    """Create an async SQLite engine for testing."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        echo=False,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def test_session_factory(test_engine) -> async_sessionmaker[AsyncSession]:
    """Create the session factory bound to the test engine."""
    return async_sessionmaker(test_engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
async def test_session(test_session_factory) -> AsyncGenerator[AsyncSession, None]:
    """Create a test session."""
    async with test_session_factory() as session:
        yield session


@pytest.fixture
def auth_headers() -> Callable[[str], dict[str, str]]:
    """Build bearer headers for a user id."""

    def _headers(user_id: str = USER_ID) -> dict[str, str]:
        token = create_access_token(user_id, f"{user_id[:8]}@example.com")
        return {"Authorization": f"Bearer {token}"}

    return _headers


@pytest.fixture
async def api_client(
    test_session_factory,
    monkeypatch: pytest.MonkeyPatch,
) -> AsyncGenerator[AsyncClient, None]:
    """Async client whose requests and background tasks use the test database."""

    async def _get_db():
        async with test_session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db] = _get_db
    monkeypatch.setattr(
        "mockinterview.services.submission.async_session_factory",
        test_session_factory,
    )
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()
