"""Services Layer: entity construction and board/card orchestration.

Invariants:
    - Services depend on repository Protocols only (no SQLAlchemy imports)
    - Services read the clock; core constructors stay pure
    - Errors pass through unchanged: no catching, no retries

Design Decisions:
    - One service per aggregate, constructed per request by api/dependencies.py
"""

from kanban.services.board_service import BoardService
from kanban.services.card_service import CardService

__all__ = ["BoardService", "CardService"]
