"""Board Service: board creation and the board/card linking workflow.

Invariants:
    - create_board: alias = name.lower(), empty card set, created_at = now (UTC)
    - add_card parses BOTH ids before touching the store; a malformed id means no write
    - add_card is idempotent: the store applies set-union, repeating it changes nothing
    - add_card does not check that the card exists (weak reference)

Design Decisions:
    - Alias collisions between names differing only in case are accepted, not guarded
    - Returned board is the state re-read after the update (see SqlBoardRepository.update_board)
"""

import logging
from datetime import datetime, timezone

from kanban.core.domain_types import parse_board_id, parse_card_id
from kanban.core.entities import Board, new_board
from kanban.core.repository_protocols import BoardRepository, BoardUpdate

logger = logging.getLogger(__name__)


class BoardService:
    """Board use cases."""

    def __init__(self, repository: BoardRepository):
        self.repository = repository

    async def get_all(self) -> list[Board]:
        return await self.repository.get_all()

    async def get_by_id(self, board_id: str) -> Board:
        return await self.repository.get_by_id(board_id)

    async def get_by_alias(self, alias: str) -> Board:
        return await self.repository.get_by_alias(alias)

    async def create_board(self, name: str) -> Board:
        board = new_board(name, now=datetime.now(timezone.utc))
        return await self.repository.create_board(board)

    async def add_card(self, board_id: str, card_id: str) -> Board:
        """Add card_id to the board's card set and return the refreshed board."""
        board_uuid = parse_board_id(board_id)
        card_uuid = parse_card_id(card_id)
        logger.info(
            f"Adding card {card_uuid} to board {board_uuid}",
            extra={"board_id": board_uuid, "card_id": card_uuid},
        )
        return await self.repository.update_board(
            board_uuid, BoardUpdate(add_card_ids=frozenset({card_uuid})),
        )
