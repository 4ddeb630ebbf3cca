"""Board ORM: persists boards and their card membership set.

Invariants:
    - alias is indexed but NOT unique: several boards may share one
    - alias is Text, never narrower than any lowercased name
    - board_cards primary key (board_id, card_id) makes the membership a set
    - board_cards.card_id has no foreign key: a board may reference a card that does
      not exist (weak reference)
    - Deleting a board cascades to its membership rows

Design Decisions:
    - Membership table over a JSON array column: "insert, ignore on conflict" against
      the composite key is the store-native set-union, atomic per statement
    - added_at kept so responses list card ids in the order they joined the board
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import String, Text, DateTime, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.dialects.postgresql import UUID

from kanban.db.base import Base


class Board(Base):
    """Kanban board row."""
    __tablename__ = "boards"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    # Text: lowercasing can lengthen a name (one "İ" becomes two code points)
    alias: Mapped[str] = mapped_column(Text, nullable=False, index=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )


class BoardCard(Base):
    """One card id in one board's membership set."""
    __tablename__ = "board_cards"

    board_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), ForeignKey("boards.id", ondelete="CASCADE"),
        primary_key=True,
    )
    card_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True,
    )
    added_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
