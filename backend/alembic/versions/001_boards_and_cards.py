"""Initial schema: cards, boards, board_cards.

Revision ID: 001_initial
Revises: None
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects.postgresql import UUID

revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "cards",
        sa.Column("id", UUID(as_uuid=True), primary_key=True),
        sa.Column("title", sa.String(200), nullable=False),
        sa.Column("description", sa.Text, nullable=False, server_default=""),
        sa.Column("section", sa.String(100), nullable=False, server_default=""),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )

    op.create_table(
        "boards",
        sa.Column("id", UUID(as_uuid=True), primary_key=True),
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column("alias", sa.Text, nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )
    # Not unique: boards whose names differ only in case share an alias
    op.create_index("ix_boards_alias", "boards", ["alias"])

    # card_id has no FK to cards: boards hold weak references
    op.create_table(
        "board_cards",
        sa.Column(
            "board_id", UUID(as_uuid=True),
            sa.ForeignKey("boards.id", ondelete="CASCADE"), primary_key=True,
        ),
        sa.Column("card_id", UUID(as_uuid=True), primary_key=True),
        sa.Column("added_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )


def downgrade() -> None:
    op.drop_table("board_cards")
    op.drop_index("ix_boards_alias", table_name="boards")
    op.drop_table("boards")
    op.drop_table("cards")
