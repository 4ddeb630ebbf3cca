"""Settings: URL rewriting and timeout validation."""

import pytest
from pydantic import ValidationError

from kanban.config import Settings


def test_postgres_url_rewritten_for_asyncpg():
    s = Settings(database_url="postgresql://u:p@host:5432/kanban")
    assert s.database_url == "postgresql+asyncpg://u:p@host:5432/kanban"


def test_async_urls_left_alone():
    s = Settings(database_url="sqlite+aiosqlite:///:memory:")
    assert s.database_url == "sqlite+aiosqlite:///:memory:"


def test_timeout_must_be_positive():
    with pytest.raises(ValidationError):
        Settings(store_timeout_seconds=0)


def test_default_timeout_matches_request_deadline():
    assert Settings().store_timeout_seconds == 10.0
