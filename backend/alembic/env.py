"""Alembic environment for the boards/cards schema.

The URL comes from kanban.config.Settings, so migrations and the API read
DATABASE_URL (and its postgresql:// rewrite) from one place.
"""

import asyncio
from logging.config import fileConfig

from sqlalchemy import pool
from sqlalchemy.ext.asyncio import create_async_engine

from alembic import context

from kanban.config import get_settings
from kanban.db.base import Base
import kanban.models  # noqa: F401

config = context.config
if config.config_file_name is not None:
    fileConfig(config.config_file_name)

target_metadata = Base.metadata
database_url = get_settings().database_url


def _configure(**kwargs) -> None:
    context.configure(target_metadata=target_metadata, **kwargs)
    with context.begin_transaction():
        context.run_migrations()


async def _migrate_online() -> None:
    engine = create_async_engine(database_url, poolclass=pool.NullPool)
    async with engine.connect() as connection:
        await connection.run_sync(
            lambda sync_conn: _configure(connection=sync_conn),
        )
    await engine.dispose()


if context.is_offline_mode():
    # Emits SQL for review instead of touching the database
    _configure(url=database_url, literal_binds=True, dialect_opts={"paramstyle": "named"})
else:
    asyncio.run(_migrate_online())
