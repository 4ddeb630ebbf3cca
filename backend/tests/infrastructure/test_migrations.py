"""Alembic migrations rendered offline against the test database URL.

Tests:
    - upgrade head emits the three tables
    - boards.alias is unbounded TEXT, matching the ORM model
"""

import io
from pathlib import Path

from alembic import command
from alembic.config import Config

ALEMBIC_DIR = Path(__file__).resolve().parents[2] / "alembic"


def _upgrade_sql() -> str:
    buffer = io.StringIO()
    cfg = Config(output_buffer=buffer)
    cfg.set_main_option("script_location", str(ALEMBIC_DIR))
    command.upgrade(cfg, "head", sql=True)
    return buffer.getvalue()


def test_upgrade_creates_tables():
    sql = _upgrade_sql()
    for table in ("cards", "boards", "board_cards"):
        assert f"CREATE TABLE {table}" in sql


def test_alias_column_is_text():
    sql = _upgrade_sql()
    assert "alias TEXT NOT NULL" in sql
