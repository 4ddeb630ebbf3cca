"""Root conftest: shared test configuration and store fixtures.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db dependency overridden to use the test session factory
    - Settings never point at a real PostgreSQL instance

Design Decisions:
    - SQLite in-memory + StaticPool: fast, no external dependency, one shared connection
      so every session sees the same tables
    - ON CONFLICT DO NOTHING and FOR UPDATE compile on both dialects, so the
      set-union path is exercised for real
"""

import os

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("DATABASE_PING_ON_STARTUP", "false")
os.environ.setdefault("LOG_FORMAT", "text")

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncSession, create_async_engine, async_sessionmaker,
)
from sqlalchemy.pool import StaticPool  # noqa: E402

import kanban.models  # noqa: E402,F401
from kanban.db.base import Base  # noqa: E402
from kanban.infrastructure.database import get_db  # noqa: E402
from kanban.repositories import SqlBoardRepository, SqlCardRepository  # noqa: E402
from kanban.services import BoardService, CardService  # noqa: E402


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False, poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
def card_repository(test_db):
    return SqlCardRepository(test_db, timeout_seconds=5)


@pytest.fixture
def board_repository(test_db):
    return SqlBoardRepository(test_db, timeout_seconds=5)


@pytest.fixture
def card_service(card_repository):
    return CardService(card_repository)


@pytest.fixture
def board_service(board_repository):
    return BoardService(board_repository)


@pytest.fixture
async def client(test_session_factory):
    """FastAPI test client with DB dependency overridden."""
    from kanban.main import app

    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
