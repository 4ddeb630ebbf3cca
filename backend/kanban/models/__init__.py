"""ORM Models: SQLAlchemy declarative models for cards, boards and board membership.

Invariants:
    - All models inherit from Base (db/base.py)
    - Cards and boards are independent roots; board_cards links them by id only

Design Decisions:
    - One file per aggregate for locality
    - All models imported here so Base.metadata is complete before create_all or alembic runs
"""

from kanban.models.card import Card  # noqa: F401
from kanban.models.board import Board, BoardCard  # noqa: F401
