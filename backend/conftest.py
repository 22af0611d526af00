"""Global pytest fixtures for testing."""

import contextlib
import os
from collections.abc import AsyncGenerator
from pathlib import Path
from types import SimpleNamespace
from typing import Any

import dotenv
import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import NullPool

from voyage_api.main import app
from voyage_database import Base
from voyage_database.session import get_session, get_session_factory

with contextlib.suppress(OSError):
    dotenv.load_dotenv()


class MockArqRedis:
    """Mock ArqRedis for testing."""

    def __init__(self):
        self.enqueued_jobs: list[tuple[str, dict[str, Any]]] = []

    async def enqueue_job(self, func_name: str, *args: Any, **kwargs: Any) -> SimpleNamespace:
        """Mock enqueue_job that records calls without actually queuing."""
        self.enqueued_jobs.append((func_name, kwargs))
        return SimpleNamespace(job_id=f"job-{len(self.enqueued_jobs)}")

    def reset(self) -> None:
        """Reset recorded jobs."""
        self.enqueued_jobs.clear()


# Global mock redis instance for testing
mock_redis = MockArqRedis()

# Test database URL - TEST_DATABASE_URL wins, otherwise a throwaway SQLite file per test
TEST_DATABASE_URL = os.getenv("TEST_DATABASE_URL")

# Safety check: ensure tests only run on a test database
if TEST_DATABASE_URL is not None and "test" not in TEST_DATABASE_URL:
    raise RuntimeError(
        f"Safety check failed: TEST_DATABASE_URL must point to a test database "
        f"(name should contain 'test'). Current: {TEST_DATABASE_URL}"
    )


@pytest_asyncio.fixture
async def test_engine(tmp_path: Path) -> AsyncGenerator[AsyncEngine, None]:
    """Create test database engine with a fresh schema."""
    url = TEST_DATABASE_URL or f"sqlite+aiosqlite:///{tmp_path / 'voyage_test.db'}"
    engine = create_async_engine(
        url,
        echo=False,
        poolclass=NullPool,  # Disable connection pooling for tests
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    # Cleanup
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest.fixture
def session_factory(test_engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Session factory bound to the test engine."""
    return async_sessionmaker(bind=test_engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def db_session(
    session_factory: async_sessionmaker[AsyncSession],
) -> AsyncGenerator[AsyncSession, None]:
    """Create a database session for seeding and assertions."""
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def client(
    session_factory: async_sessionmaker[AsyncSession],
) -> AsyncGenerator[AsyncClient, None]:
    """Create test HTTP client with database and redis overrides."""
    from voyage_api.dependencies import get_redis_pool

    async def override_get_session():
        async with session_factory() as session:
            yield session

    async def override_get_redis_pool():
        return mock_redis

    app.dependency_overrides[get_session] = override_get_session
    app.dependency_overrides[get_session_factory] = lambda: session_factory
    app.dependency_overrides[get_redis_pool] = override_get_redis_pool

    # Reset mock redis state before each test
    mock_redis.reset()

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest.fixture
def test_mock_redis() -> MockArqRedis:
    """Provide access to the mock redis instance for testing."""
    return mock_redis
