"""Entities: Card and Board value objects plus the pure constructors services use.

Invariants:
    - id is None until the store assigns one; never set by constructors here
    - Board.alias == Board.name.lower() at creation, no trimming or collision guard
    - Board.card_ids holds no duplicates (the store enforces this on add)
    - created_at is always timezone-aware UTC

Design Decisions:
    - Plain dataclasses, not ORM models: services and routes never see SQLAlchemy rows
    - Clock passed in (now) so construction stays deterministic and testable
"""

from dataclasses import dataclass, field
from datetime import datetime

from kanban.core.domain_types import BoardId, CardId


@dataclass
class Card:
    """A kanban card. Never updated after creation."""
    title: str
    description: str
    section: str
    created_at: datetime
    id: CardId | None = None


@dataclass
class Board:
    """A kanban board referencing cards by id (weak reference, no ownership)."""
    name: str
    alias: str
    created_at: datetime
    card_ids: list[CardId] = field(default_factory=list)
    id: BoardId | None = None


def derive_alias(name: str) -> str:
    """Alias is the lowercased name. Boards differing only in case share an alias."""
    return name.lower()


def new_card(title: str, description: str, section: str, now: datetime) -> Card:
    return Card(
        title=title, description=description, section=section, created_at=now,
    )


def new_board(name: str, now: datetime) -> Board:
    return Board(
        name=name, alias=derive_alias(name), created_at=now, card_ids=[],
    )
