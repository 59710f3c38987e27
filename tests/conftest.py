"""Pytest fixtures for testing."""
import os
from collections.abc import AsyncGenerator, Generator
from uuid import UUID

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import (
    AsyncConnection,
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
)
from sqlalchemy.pool import StaticPool

from models.base import Base
from models.bookmark import Bookmark
from models.bookmark_in_list import BookmarkInList
from models.bookmark_list import BookmarkList

TEST_JWT_SECRET = "test-jwt-secret-with-enough-length-for-hs256"
SQLITE_URL = "sqlite+aiosqlite://"

USER_A = "auth0|user-a"
USER_B = "auth0|user-b"

# Constant for non-existent entity ID
FAKE_UUID = UUID("00000000-0000-0000-0000-000000000000")


@pytest.fixture(scope="session")
def database_url() -> Generator[str]:
    """
    Get the test database URL and set it in the environment.

    Uses in-memory SQLite by default. Set TEST_USE_POSTGRES=1 to run against
    a PostgreSQL container instead.

    This must be set before any app imports that trigger Settings validation.
    """
    os.environ["JWT_SECRET"] = TEST_JWT_SECRET
    # Ensure tests never run in dev mode regardless of local .env
    os.environ["DEV_MODE"] = "false"

    if os.environ.get("TEST_USE_POSTGRES") == "1":
        from testcontainers.postgres import PostgresContainer  # noqa: PLC0415

        with PostgresContainer("postgres:16", driver="asyncpg") as postgres:
            url = postgres.get_connection_url()
            os.environ["DATABASE_URL"] = url
            yield url
    else:
        os.environ["DATABASE_URL"] = SQLITE_URL
        yield SQLITE_URL


@pytest.fixture
async def async_engine(database_url: str) -> AsyncGenerator[AsyncEngine]:
    """Create an async engine for testing."""
    from db.session import build_engine  # noqa: PLC0415

    if database_url.startswith("sqlite"):
        # One shared connection so the in-memory database outlives each checkout
        engine = build_engine(database_url, poolclass=StaticPool)
    else:
        engine = build_engine(database_url)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest.fixture
async def db_connection(async_engine: AsyncEngine) -> AsyncGenerator[AsyncConnection]:
    """
    Create a connection with a transaction that will be rolled back after the test.

    This provides test isolation - each test runs in its own transaction
    that is rolled back, so tests don't affect each other.
    """
    async with async_engine.connect() as connection:
        transaction = await connection.begin()
        try:
            yield connection
        finally:
            await transaction.rollback()


@pytest.fixture
async def db_session(db_connection: AsyncConnection) -> AsyncGenerator[AsyncSession]:
    """
    Create an async session bound to the test transaction.

    Uses begin_nested() for savepoints, allowing the session's flush/commit
    to work within our outer test transaction.
    """
    session_factory = async_sessionmaker(
        bind=db_connection,
        class_=AsyncSession,
        expire_on_commit=False,
        join_transaction_mode="create_savepoint",
    )

    async with session_factory() as session:
        yield session


async def make_bookmark(
    db_session: AsyncSession,
    user_id: str,
    url: str = "https://example.com",
) -> Bookmark:
    """Create a bookmark owned by ``user_id``."""
    bookmark = Bookmark(user_id=user_id, url=url, title=url)
    db_session.add(bookmark)
    await db_session.flush()
    await db_session.refresh(bookmark)
    return bookmark


async def count_memberships(
    db_session: AsyncSession,
    *,
    list_id: UUID | None = None,
    bookmark_id: UUID | None = None,
) -> int:
    """Count membership rows, optionally filtered by list and/or bookmark."""
    query = select(func.count()).select_from(BookmarkInList)
    if list_id is not None:
        query = query.where(BookmarkInList.list_id == list_id)
    if bookmark_id is not None:
        query = query.where(BookmarkInList.bookmark_id == bookmark_id)
    return await db_session.scalar(query) or 0


async def make_list(
    db_session: AsyncSession,
    user_id: str,
    name: str = "Reading",
    list_type: str = "manual",
    query: str | None = None,
    parent_id: UUID | None = None,
) -> BookmarkList:
    """Create a list owned by ``user_id`` through the service layer."""
    from schemas.bookmark_list import BookmarkListCreate  # noqa: PLC0415
    from services.bookmark_list_service import create_list  # noqa: PLC0415

    data = BookmarkListCreate(
        name=name,
        icon="📚",
        type=list_type,
        query=query,
        parent_id=parent_id,
    )
    return await create_list(db_session, user_id, data)


@pytest.fixture
async def user_a_bookmark(db_session: AsyncSession) -> Bookmark:
    """A bookmark owned by user A."""
    return await make_bookmark(db_session, USER_A, "https://example.com/a")


@pytest.fixture
async def user_b_bookmark(db_session: AsyncSession) -> Bookmark:
    """A bookmark owned by user B."""
    return await make_bookmark(db_session, USER_B, "https://example.com/b")


@pytest.fixture
async def manual_list(db_session: AsyncSession) -> BookmarkList:
    """A manual list owned by user A."""
    return await make_list(db_session, USER_A, name="Reading")


@pytest.fixture
async def smart_list(db_session: AsyncSession) -> BookmarkList:
    """A smart list owned by user A."""
    return await make_list(
        db_session, USER_A, name="Unread", list_type="smart", query="is:unread",
    )


@pytest.fixture
async def client(
    db_session: AsyncSession,
) -> AsyncGenerator[AsyncClient]:
    """Create a test client with database session override."""
    # Clear the settings cache so it picks up DATABASE_URL from environment
    from core.config import get_settings  # noqa: PLC0415

    get_settings.cache_clear()

    from api.main import app  # noqa: PLC0415
    from db.session import get_async_session  # noqa: PLC0415

    async def override_get_async_session() -> AsyncGenerator[AsyncSession]:
        yield db_session

    app.dependency_overrides[get_async_session] = override_get_async_session

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as test_client:
        yield test_client

    app.dependency_overrides.clear()
