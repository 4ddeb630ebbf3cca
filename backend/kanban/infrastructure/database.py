"""Database Session Manager: async connection pool, store deadlines and error mapping.

Invariants:
    - Every session auto-rolls-back on exception (no partial commits leak)
    - Connection pool uses pool_pre_ping for stale connection detection
    - store_operation() maps SQLAlchemy exceptions to StoreUnavailableError and
      deadline expiry to StoreTimeoutError; KanbanError passes through untouched
    - No retries: every failure propagates to the caller immediately

Design Decisions:
    - Singleton db_manager initialized on startup: FastAPI lifespan manages lifecycle
      and repositories receive request sessions through get_db, never the global
    - expire_on_commit=False: prevents lazy-load issues in async context
    - asyncio.timeout cancels the in-flight statement cooperatively on expiry
"""

import asyncio
import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from sqlalchemy import text
from sqlalchemy.exc import (
    IntegrityError, OperationalError, DBAPIError, SQLAlchemyError,
)
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)

from kanban.core.errors import StoreUnavailableError, StoreTimeoutError
from kanban.db.base import Base

logger = logging.getLogger(__name__)


@asynccontextmanager
async def store_operation(
    operation: str, timeout_seconds: float,
) -> AsyncGenerator[None, None]:
    """Run the enclosed store calls under a deadline with error translation."""
    try:
        async with asyncio.timeout(timeout_seconds):
            yield
    except TimeoutError:
        logger.error(
            f"Store {operation} exceeded {timeout_seconds:g}s deadline",
            extra={"operation": operation},
        )
        raise StoreTimeoutError(operation, timeout_seconds) from None
    except IntegrityError as e:
        logger.error(f"Store integrity error during {operation}: {e}")
        raise StoreUnavailableError("integrity constraint violated", operation) from e
    except OperationalError as e:
        logger.error(f"Store operational error during {operation}: {e}")
        raise StoreUnavailableError("connection or operational error", operation) from e
    except DBAPIError as e:
        logger.error(f"Store driver error during {operation}: {e}")
        raise StoreUnavailableError("database driver error", operation) from e
    except SQLAlchemyError as e:
        logger.error(f"SQLAlchemy error during {operation}: {e}")
        raise StoreUnavailableError("database operation failed", operation) from e
    except OSError as e:
        logger.error(f"Store connection error during {operation}: {e}")
        raise StoreUnavailableError("connection refused", operation) from e


class DatabaseSessionManager:
    """Manages async database sessions with pooling, rollback, and health checks."""

    def __init__(
        self, database_url: str, pool_size: int = 20, max_overflow: int = 10,
    ):
        engine_kwargs: dict = {"pool_pre_ping": True}
        if not database_url.startswith("sqlite"):
            engine_kwargs.update(
                pool_size=pool_size,
                max_overflow=max_overflow,
                pool_recycle=3600,
            )
        self.engine = create_async_engine(database_url, **engine_kwargs)
        self._session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """Provide session with auto-rollback on exception."""
        session = self._session_factory()
        try:
            yield session
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()

    async def create_all(self) -> None:
        """Create missing tables (development only; production uses alembic)."""
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def health_check(self) -> bool:
        """Check database connectivity (for readiness probes)."""
        try:
            async with self.session() as db:
                await db.execute(text("SELECT 1"))
            return True
        except (SQLAlchemyError, OSError) as e:
            logger.error(f"DB health check failed: {e}")
            return False

    async def dispose(self) -> None:
        await self.engine.dispose()


# Singleton (initialized on startup)
db_manager: DatabaseSessionManager | None = None


def init_db(database_url: str, **kwargs) -> DatabaseSessionManager:
    global db_manager
    db_manager = DatabaseSessionManager(database_url, **kwargs)
    return db_manager


async def close_db() -> None:
    global db_manager
    if db_manager is not None:
        await db_manager.dispose()
        db_manager = None


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency for database sessions."""
    if not db_manager:
        raise StoreUnavailableError("database not initialized", "connect")
    async with db_manager.session() as session:
        yield session
