"""Card Repository: card entities to and from the cards table.

Invariants:
    - get_by_id parses the id before any store access (InvalidIdentifierError)
    - create never trusts an id on the incoming entity; the store assigns it
    - get_all returns cards in creation order

Design Decisions:
    - Entity returned by create is a copy carrying the store-assigned id
"""

import logging
from dataclasses import replace

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from kanban.core.domain_types import CardId, parse_card_id
from kanban.core.entities import Card
from kanban.core.errors import ResourceNotFoundError
from kanban.infrastructure.database import store_operation
from kanban.models.card import Card as CardModel
from kanban.repositories.decoding import ensure_utc, require_str, require_uuid

logger = logging.getLogger(__name__)

_RESOURCE = "Card"


def _to_entity(row: CardModel) -> Card:
    return Card(
        id=CardId(require_uuid(row.id, "id", _RESOURCE)),
        title=require_str(row.title, "title", _RESOURCE),
        description=require_str(row.description, "description", _RESOURCE),
        section=require_str(row.section, "section", _RESOURCE),
        created_at=ensure_utc(row.created_at, _RESOURCE),
    )


class SqlCardRepository:
    """CardRepository backed by an AsyncSession."""

    def __init__(self, db: AsyncSession, timeout_seconds: float = 10.0):
        self.db = db
        self.timeout_seconds = timeout_seconds

    async def get_all(self) -> list[Card]:
        async with store_operation("find cards", self.timeout_seconds):
            result = await self.db.execute(
                select(CardModel).order_by(CardModel.created_at, CardModel.id),
            )
            rows = result.scalars().all()
        return [_to_entity(row) for row in rows]

    async def get_by_id(self, card_id: str) -> Card:
        parsed = parse_card_id(card_id)
        async with store_operation("find card", self.timeout_seconds):
            result = await self.db.execute(
                select(CardModel).where(CardModel.id == parsed),
            )
            row = result.scalar_one_or_none()
        if row is None:
            logger.info(
                f"Card {parsed} not found", extra={"card_id": parsed},
            )
            raise ResourceNotFoundError(_RESOURCE, str(parsed))
        return _to_entity(row)

    async def create(self, card: Card) -> Card:
        row = CardModel(
            title=card.title,
            description=card.description,
            section=card.section,
            created_at=card.created_at,
        )
        async with store_operation("insert card", self.timeout_seconds):
            self.db.add(row)
            await self.db.flush()
            card_id = CardId(row.id)
            await self.db.commit()
        logger.info(f"Card {card_id} created", extra={"card_id": card_id})
        return replace(card, id=card_id)
