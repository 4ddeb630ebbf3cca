"""Boundary Protocols: contracts between services and the persistence shell.

Invariants:
    - Services depend on these Protocols, never on SQLAlchemy
    - Id-taking lookups accept raw strings; parsing happens inside the implementation
    - update_board takes an already-parsed BoardId (callers validated ids first)

Design Decisions:
    - Protocol over ABC: structural subtyping, tests pass AsyncMock or fakes freely
    - Async in Protocol: implementations do IO
"""

from dataclasses import dataclass, field
from typing import Protocol

from kanban.core.domain_types import BoardId, CardId
from kanban.core.entities import Board, Card


@dataclass(frozen=True)
class BoardUpdate:
    """Atomic partial update for a board. add_card_ids has set-union semantics."""
    add_card_ids: frozenset[CardId] = field(default_factory=frozenset)


class CardRepository(Protocol):
    """Contract for card persistence."""
    async def get_all(self) -> list[Card]: ...
    async def get_by_id(self, card_id: str) -> Card: ...
    async def create(self, card: Card) -> Card: ...


class BoardRepository(Protocol):
    """Contract for board persistence."""
    async def get_all(self) -> list[Board]: ...
    async def get_by_id(self, board_id: str) -> Board: ...
    async def get_by_alias(self, alias: str) -> Board: ...
    async def create_board(self, board: Board) -> Board: ...
    async def update_board(self, board_id: BoardId, update: BoardUpdate) -> Board: ...
