"""Card Schemas: request bodies and response envelopes for /cards routes.

Invariants:
    - CreateCardRequest.title: 1-200 chars; description and section default to ""
    - createdAt is never read from requests (server-assigned)
"""

from datetime import datetime
from uuid import UUID

from pydantic import Field

from kanban.core.entities import Card
from kanban.schemas.base import CamelModel


class GetCardRequest(CamelModel):
    id: str


class CreateCardRequest(CamelModel):
    title: str = Field(min_length=1, max_length=200)
    description: str = Field("", max_length=10_000)
    section: str = Field("", max_length=100)


class CardOut(CamelModel):
    id: UUID
    title: str
    description: str
    section: str
    created_at: datetime

    @classmethod
    def from_entity(cls, card: Card) -> "CardOut":
        return cls(
            id=card.id,
            title=card.title,
            description=card.description,
            section=card.section,
            created_at=card.created_at,
        )


class CardEnvelope(CamelModel):
    card: CardOut


class CardListEnvelope(CamelModel):
    cards: list[CardOut]
