"""SqlCardRepository: persistence translation, id validation and error mapping.

Tests:
    - create assigns the id and round-trips every field
    - get_all returns cards in creation order
    - get_by_id: malformed id fails before store access, unknown id is NotFound
    - Store failures, slow stores and undecodable rows map onto the taxonomy
"""

import asyncio
from datetime import datetime, timedelta, timezone
from unittest.mock import AsyncMock, MagicMock
from uuid import uuid4

import pytest
from sqlalchemy.exc import OperationalError

from kanban.core.entities import new_card
from kanban.core.errors import (
    DecodeError, InvalidIdentifierError, ResourceNotFoundError,
    StoreTimeoutError, StoreUnavailableError,
)
from kanban.models.card import Card as CardModel
from kanban.repositories import SqlCardRepository

NOW = datetime(2026, 10, 19, 9, 30, tzinfo=timezone.utc)


def _make_mock_db():
    """Create a mock AsyncSession with required methods."""
    db = AsyncMock()
    db.add = MagicMock()
    db.execute = AsyncMock()
    return db


async def test_create_assigns_id_and_round_trips(card_repository):
    created = await card_repository.create(new_card("Fix bug", "desc", "todo", NOW))
    assert created.id is not None

    fetched = await card_repository.get_by_id(str(created.id))
    assert fetched.id == created.id
    assert (fetched.title, fetched.description, fetched.section) == ("Fix bug", "desc", "todo")
    assert fetched.created_at == NOW
    assert fetched.created_at.tzinfo is not None


async def test_create_ignores_preset_id(card_repository):
    card = new_card("t", "", "todo", NOW)
    preset = uuid4()
    card.id = preset
    created = await card_repository.create(card)
    assert created.id != preset


async def test_get_all_in_creation_order(card_repository):
    first = await card_repository.create(new_card("a", "", "todo", NOW))
    second = await card_repository.create(
        new_card("b", "", "done", NOW + timedelta(seconds=1)),
    )
    cards = await card_repository.get_all()
    assert [c.id for c in cards] == [first.id, second.id]


async def test_get_all_empty(card_repository):
    assert await card_repository.get_all() == []


async def test_get_by_unknown_id_is_not_found(card_repository):
    with pytest.raises(ResourceNotFoundError):
        await card_repository.get_by_id(str(uuid4()))


async def test_malformed_id_never_reaches_store():
    db = _make_mock_db()
    repo = SqlCardRepository(db)
    with pytest.raises(InvalidIdentifierError):
        await repo.get_by_id("not-an-id")
    db.execute.assert_not_awaited()


async def test_connection_failure_is_store_unavailable():
    db = _make_mock_db()
    db.execute.side_effect = OperationalError("SELECT", {}, Exception("connection reset"))
    repo = SqlCardRepository(db)
    with pytest.raises(StoreUnavailableError):
        await repo.get_all()


async def test_slow_store_times_out():
    db = _make_mock_db()

    async def slow(*args, **kwargs):
        await asyncio.sleep(1)

    db.execute.side_effect = slow
    repo = SqlCardRepository(db, timeout_seconds=0.01)
    with pytest.raises(StoreTimeoutError):
        await repo.get_by_id(str(uuid4()))


async def test_undecodable_row_is_decode_error():
    row = CardModel(id=uuid4(), title=None, description="", section="todo", created_at=NOW)
    result = MagicMock()
    result.scalars.return_value.all.return_value = [row]
    db = _make_mock_db()
    db.execute.return_value = result
    repo = SqlCardRepository(db)
    with pytest.raises(DecodeError) as info:
        await repo.get_all()
    assert "title" in info.value.message
