"""Board Repository: board entities to and from boards + board_cards.

Invariants:
    - get_by_id parses the id before any store access (InvalidIdentifierError)
    - get_by_alias is an exact match; no case folding or trimming of the input
    - update_board is one transaction: lock the board row, insert membership rows with
      conflict-ignore against the (board_id, card_id) key, commit
    - card_ids come back in the order the cards were added
    - create_board stores the board alone; membership only grows through update_board

Design Decisions:
    - Set-union via the store (primary key + ON CONFLICT DO NOTHING), never by read-time
      dedup: concurrent adds of the same card cannot produce duplicates
    - update_board re-reads after commit in a separate statement. Another writer can act
      in between, so the returned board may already include their change (known race,
      left unresolved)
    - get_by_alias on a shared alias returns whichever row the store yields first; no
      tie-break is promised
"""

import logging
from collections import defaultdict
from collections.abc import Iterable
from dataclasses import replace
from datetime import datetime, timezone
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.ext.asyncio import AsyncSession

from kanban.core.domain_types import BoardId, CardId, parse_board_id
from kanban.core.entities import Board
from kanban.core.errors import ResourceNotFoundError, StoreUnavailableError
from kanban.core.repository_protocols import BoardUpdate
from kanban.infrastructure.database import store_operation
from kanban.models.board import Board as BoardModel, BoardCard
from kanban.repositories.decoding import ensure_utc, require_str, require_uuid

logger = logging.getLogger(__name__)

_RESOURCE = "Board"

# Dialects with INSERT ... ON CONFLICT DO NOTHING
_CONFLICT_IGNORING_INSERTS = {
    "postgresql": postgresql.insert,
    "sqlite": sqlite.insert,
}


def _to_entity(row: BoardModel, card_ids: list[CardId]) -> Board:
    return Board(
        id=BoardId(require_uuid(row.id, "id", _RESOURCE)),
        name=require_str(row.name, "name", _RESOURCE),
        alias=require_str(row.alias, "alias", _RESOURCE),
        created_at=ensure_utc(row.created_at, _RESOURCE),
        card_ids=card_ids,
    )


class SqlBoardRepository:
    """BoardRepository backed by an AsyncSession."""

    def __init__(self, db: AsyncSession, timeout_seconds: float = 10.0):
        self.db = db
        self.timeout_seconds = timeout_seconds

    async def _card_ids_for(self, *criteria) -> defaultdict[UUID, list[CardId]]:
        """Membership sets keyed by board, each in insertion order.

        No criteria loads every membership row; the statement binds a fixed
        number of parameters however many boards exist.
        """
        members: defaultdict[UUID, list[CardId]] = defaultdict(list)
        stmt = select(BoardCard.board_id, BoardCard.card_id).order_by(
            BoardCard.added_at, BoardCard.card_id,
        )
        if criteria:
            stmt = stmt.where(*criteria)
        result = await self.db.execute(stmt)
        for board_id, card_id in result.all():
            members[board_id].append(
                CardId(require_uuid(card_id, "cardIds", _RESOURCE)),
            )
        return members

    async def _find_one(self, operation: str, *criteria) -> tuple[BoardModel | None, list[CardId]]:
        async with store_operation(operation, self.timeout_seconds):
            result = await self.db.execute(
                select(BoardModel)
                .where(*criteria)
                .order_by(BoardModel.created_at, BoardModel.id)
                .limit(1)
                .execution_options(populate_existing=True),
            )
            row = result.scalars().first()
            if row is None:
                return None, []
            members = await self._card_ids_for(BoardCard.board_id == row.id)
        return row, members[row.id]

    async def get_all(self) -> list[Board]:
        async with store_operation("find boards", self.timeout_seconds):
            result = await self.db.execute(
                select(BoardModel).order_by(BoardModel.created_at, BoardModel.id),
            )
            rows = result.scalars().all()
            members = await self._card_ids_for()
        return [_to_entity(row, members[row.id]) for row in rows]

    async def get_by_id(self, board_id: str) -> Board:
        parsed = parse_board_id(board_id)
        row, card_ids = await self._find_one("find board", BoardModel.id == parsed)
        if row is None:
            logger.info(
                f"Board {parsed} not found", extra={"board_id": parsed},
            )
            raise ResourceNotFoundError(_RESOURCE, str(parsed))
        return _to_entity(row, card_ids)

    async def get_by_alias(self, alias: str) -> Board:
        row, card_ids = await self._find_one(
            "find board by alias", BoardModel.alias == alias,
        )
        if row is None:
            logger.info(
                f"Board with alias '{alias}' not found", extra={"alias": alias},
            )
            raise ResourceNotFoundError(_RESOURCE, alias)
        return _to_entity(row, card_ids)

    async def create_board(self, board: Board) -> Board:
        row = BoardModel(
            name=board.name,
            alias=board.alias,
            created_at=board.created_at,
        )
        async with store_operation("insert board", self.timeout_seconds):
            self.db.add(row)
            await self.db.flush()
            board_id = BoardId(row.id)
            await self.db.commit()
        logger.info(f"Board {board_id} created", extra={"board_id": board_id})
        return replace(board, id=board_id, card_ids=[])

    async def update_board(self, board_id: BoardId, update: BoardUpdate) -> Board:
        """Apply update atomically, then re-read the board."""
        async with store_operation("update board", self.timeout_seconds):
            result = await self.db.execute(
                select(BoardModel.id)
                .where(BoardModel.id == board_id)
                .with_for_update(),
            )
            found = result.scalar_one_or_none() is not None
            if found:
                if update.add_card_ids:
                    await self.db.execute(
                        self._add_cards_statement(board_id, update.add_card_ids),
                    )
                await self.db.commit()
            else:
                await self.db.rollback()
        if not found:
            logger.info(
                f"Board {board_id} not found for update", extra={"board_id": board_id},
            )
            raise ResourceNotFoundError(_RESOURCE, str(board_id))
        return await self.get_by_id(str(board_id))

    def _add_cards_statement(self, board_id: UUID, card_ids: Iterable[CardId]):
        """INSERT membership rows, silently skipping ones already present."""
        dialect = self.db.get_bind().dialect.name
        insert = _CONFLICT_IGNORING_INSERTS.get(dialect)
        if insert is None:
            raise StoreUnavailableError(
                f"set-union insert not supported on {dialect}", "update board",
            )
        now = datetime.now(timezone.utc)
        values = [
            {"board_id": board_id, "card_id": card_id, "added_at": now}
            for card_id in sorted(set(card_ids), key=str)
        ]
        return insert(BoardCard).values(values).on_conflict_do_nothing(
            index_elements=["board_id", "card_id"],
        )
