"""Kanban API: FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map KanbanError -> {"error": ...} JSON responses
    - CORS configured from settings (not hardcoded)
    - Database initialized and pinged on startup, disposed on shutdown

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Startup ping failure aborts startup: a process without a store serves nothing useful
    - Run with: uvicorn kanban.main:app --port 8080
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from kanban.api.error_handlers import register_error_handlers
from kanban.api.routes import boards, cards, health
from kanban.config import get_settings
from kanban.core.errors import StoreUnavailableError
from kanban.infrastructure.database import close_db, init_db
from kanban.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    manager = init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    if settings.database_create_tables:
        await manager.create_all()
    if settings.database_ping_on_startup and not await manager.health_check():
        await close_db()
        raise StoreUnavailableError("could not reach database", "ping")
    logger.info("Kanban API started")
    yield
    logger.info("Kanban API shutting down")
    await close_db()


app = FastAPI(
    title="Kanban API", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
    allow_headers=["Origin", "Content-Type", "Accept", "Authorization"],
)

app.include_router(health.router)
app.include_router(boards.router)
app.include_router(cards.router)

register_error_handlers(app)
