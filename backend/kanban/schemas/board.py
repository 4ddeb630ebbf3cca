"""Board Schemas: request bodies and response envelopes for /boards routes.

Invariants:
    - CreateBoardRequest.name: 1-200 chars, kept verbatim (alias derives from it as-is)
    - AddCardToBoardRequest accepts cardId or CardId for the card id
    - Responses wrap boards as {"board": ...} or {"boards": [...]}
"""

from datetime import datetime
from uuid import UUID

from pydantic import AliasChoices, Field

from kanban.core.entities import Board
from kanban.schemas.base import CamelModel


class GetBoardRequest(CamelModel):
    id: str


class CreateBoardRequest(CamelModel):
    name: str = Field(min_length=1, max_length=200)


class AddCardToBoardRequest(CamelModel):
    board_id: str
    # Older clients post "CardId"
    card_id: str = Field(
        validation_alias=AliasChoices("cardId", "CardId", "card_id"),
    )


class BoardOut(CamelModel):
    id: UUID
    name: str
    alias: str
    card_ids: list[UUID]
    created_at: datetime

    @classmethod
    def from_entity(cls, board: Board) -> "BoardOut":
        return cls(
            id=board.id,
            name=board.name,
            alias=board.alias,
            card_ids=list(board.card_ids),
            created_at=board.created_at,
        )


class BoardEnvelope(CamelModel):
    board: BoardOut


class BoardListEnvelope(CamelModel):
    boards: list[BoardOut]
