"""TaskTree API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Internal CRUD routes mounted under settings.api_prefix (/api/v1/internal)
    - Global error handlers map every failure to the {success: false, ...} envelope
    - CORS configured from settings (not hardcoded)
    - Database initialized on startup, disposed on shutdown (lifespan)

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Error handlers live in api/error_handlers.py (ADR: import fan-out < 10)
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.error_handlers import register_error_handlers
from app.api.routes import category, health, task, task_category
from app.config import get_settings
from app.infrastructure import database
from app.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    database.init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    logger.info("TaskTree API started")
    yield
    if database.db_manager:
        await database.db_manager.dispose()
    logger.info("TaskTree API shutting down")


app = FastAPI(
    title="TaskTree API", version=health.SERVICE_VERSION, lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(category.router, prefix=settings.api_prefix)
app.include_router(task_category.router, prefix=settings.api_prefix)
app.include_router(task.router, prefix=settings.api_prefix)

register_error_handlers(app)
