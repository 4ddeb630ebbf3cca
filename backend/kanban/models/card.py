"""Card ORM: persists kanban cards.

Invariants:
    - id is UUID primary key, assigned on insert (never client-supplied)
    - title is non-nullable; description and section default to empty strings
    - created_at is set by the service, never updated

Design Decisions:
    - section is free text, no enum or check constraint (columns are user-defined labels)
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import String, Text, DateTime
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.dialects.postgresql import UUID

from kanban.db.base import Base


class Card(Base):
    """Kanban card row."""
    __tablename__ = "cards"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    title: Mapped[str] = mapped_column(String(200), nullable=False)
    description: Mapped[str] = mapped_column(
        Text, nullable=False, default="",
    )
    section: Mapped[str] = mapped_column(
        String(100), nullable=False, default="",
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
