"""Request-scoped service construction for FastAPI Depends().

Invariants:
    - One AsyncSession per request (get_db), shared by the repositories of that request
    - Store deadline comes from settings, applied per repository operation
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from kanban.config import get_settings
from kanban.infrastructure.database import get_db
from kanban.repositories import SqlBoardRepository, SqlCardRepository
from kanban.services import BoardService, CardService


def get_board_service(db: AsyncSession = Depends(get_db)) -> BoardService:
    timeout = get_settings().store_timeout_seconds
    return BoardService(SqlBoardRepository(db, timeout_seconds=timeout))


def get_card_service(db: AsyncSession = Depends(get_db)) -> CardService:
    timeout = get_settings().store_timeout_seconds
    return CardService(SqlCardRepository(db, timeout_seconds=timeout))
