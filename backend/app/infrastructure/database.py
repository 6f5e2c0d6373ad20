"""Database Session Manager — async engine, per-request sessions, failure mapping.

Invariants:
    - A session that raises is rolled back before the error leaves the context
    - TaskTreeError passes through unchanged (the procedure store already mapped it)
    - Any other SQLAlchemyError leaves as DatabaseError with a generic public message
    - Pool sizing applies to server databases only; SQLite URLs get the dialect default pool

Design Decisions:
    - Module-level db_manager assigned by the lifespan, never at import
    - expire_on_commit=False: rows stay readable after the procedure call commits
"""

import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator

from sqlalchemy import text
from sqlalchemy.exc import (
    DBAPIError, IntegrityError, OperationalError, SQLAlchemyError,
)
from sqlalchemy.ext.asyncio import (
    AsyncSession, async_sessionmaker, create_async_engine,
)

from app.core.errors import DatabaseError, TaskTreeError

logger = logging.getLogger(__name__)

APPLICATION_NAME = "tasktree-api"

# Most specific first: IntegrityError and OperationalError are DBAPIErrors.
_FAILURES: tuple[tuple[type[SQLAlchemyError], str, str], ...] = (
    (IntegrityError, "Integrity constraint violated", "commit"),
    (OperationalError, "Connection or operational error", "execute"),
    (DBAPIError, "Database driver error", "query"),
    (SQLAlchemyError, "Database operation failed", "unknown"),
)


def _engine_options(
    database_url: str, pool_size: int, max_overflow: int,
) -> dict[str, Any]:
    if database_url.startswith("sqlite"):
        return {}
    options: dict[str, Any] = {
        "pool_size": pool_size,
        "max_overflow": max_overflow,
        "pool_pre_ping": True,
        "pool_recycle": 3600,
    }
    if "+asyncpg" in database_url:
        options["connect_args"] = {
            "server_settings": {"application_name": APPLICATION_NAME},
        }
    return options


def _to_database_error(error: SQLAlchemyError) -> DatabaseError:
    for kind, message, operation in _FAILURES:
        if isinstance(error, kind):
            return DatabaseError(message, operation)
    return DatabaseError("Database operation failed", "unknown")


class DatabaseSessionManager:
    """Owns the engine and hands out sessions that clean up after themselves."""

    def __init__(
        self, database_url: str, pool_size: int = 20, max_overflow: int = 10,
    ):
        self.engine = create_async_engine(
            database_url,
            **_engine_options(database_url, pool_size, max_overflow),
        )
        self._session_factory = async_sessionmaker(
            self.engine, class_=AsyncSession, expire_on_commit=False,
        )

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        session = self._session_factory()
        try:
            yield session
        except TaskTreeError:
            await session.rollback()
            raise
        except SQLAlchemyError as e:
            await session.rollback()
            mapped = _to_database_error(e)
            logger.error(
                f"{mapped.message}: {e}",
                extra={"error_code": mapped.code},
            )
            raise mapped from e
        finally:
            await session.close()

    async def health_check(self) -> bool:
        """True when a trivial query round-trips."""
        try:
            async with self.session() as db:
                await db.execute(text("SELECT 1"))
        except Exception as e:
            logger.warning(f"DB health check failed: {e}")
            return False
        return True

    async def dispose(self) -> None:
        await self.engine.dispose()


db_manager: DatabaseSessionManager | None = None


def init_db(database_url: str, **kwargs) -> DatabaseSessionManager:
    global db_manager
    db_manager = DatabaseSessionManager(database_url, **kwargs)
    return db_manager


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """Request-scoped session; the procedure store commits per call."""
    if db_manager is None:
        raise RuntimeError("Database not initialized")
    async with db_manager.session() as session:
        yield session
