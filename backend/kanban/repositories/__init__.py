"""Repositories: SQLAlchemy implementations of the core repository Protocols.

Invariants:
    - Repositories receive a request-scoped AsyncSession; they never open engines
    - Every store call runs inside store_operation() (deadline + error translation)
    - Rows are rehydrated into core entities before leaving this package

Design Decisions:
    - One module per aggregate, mirroring models/
"""

from kanban.repositories.board_repository import SqlBoardRepository
from kanban.repositories.card_repository import SqlCardRepository

__all__ = ["SqlBoardRepository", "SqlCardRepository"]
