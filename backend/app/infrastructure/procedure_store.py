"""SQL Procedure Store — calls the external stored procedures over the async session.

Invariants:
    - Procedures are addressed as "<schema>"."<name>" with named arguments only
    - Schema, procedure and argument names must be plain identifiers (no quoting tricks)
    - Driver error number 51000 → BusinessRuleError (message passthrough); any other
      driver failure → DatabaseError (generic 500)
    - Each call commits on success and rolls back on failure
    - fetch_one raises ProcedureContractError when the procedure returns no row

Design Decisions:
    - PostgreSQL named notation ("arg" => :arg): argument order never matters
      (ADR: procedures evolve independently of this codebase)
    - Error number read from the driver error chain (number / sqlstate / pgcode):
      SQLAlchemy's asyncpg adapter and asyncpg itself expose it under different names
"""

import logging
import re
import time
from collections.abc import Iterator, Mapping
from typing import Any

from fastapi import Depends
from sqlalchemy import text
from sqlalchemy.sql.elements import TextClause
from sqlalchemy.exc import DBAPIError
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import Settings, get_settings
from app.core.domain_types import BUSINESS_RULE_ERROR_NUMBER
from app.core.errors import (
    BusinessRuleError, DatabaseError, ErrorContext, ProcedureContractError,
)
from app.core.repository_protocols import ProcedureStore
from app.infrastructure.database import get_db

logger = logging.getLogger(__name__)

_IDENTIFIER = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")
_MAX_CAUSE_DEPTH = 5


def _check_identifier(name: str, kind: str) -> str:
    if not _IDENTIFIER.match(name):
        raise ValueError(f"Invalid {kind} identifier: {name!r}")
    return name


def build_procedure_call(
    schema: str, procedure: str, params: Mapping[str, Any],
) -> TextClause:
    """Build the SELECT that invokes a procedure with named arguments."""
    _check_identifier(schema, "schema")
    _check_identifier(procedure, "procedure")
    args = ", ".join(
        f'"{_check_identifier(name, "argument")}" => :{name}'
        for name in params
    )
    return text(f'SELECT * FROM "{schema}"."{procedure}"({args})')


def _driver_error_chain(error: BaseException | None) -> Iterator[BaseException]:
    """The DBAPI error followed by the driver exceptions it wraps."""
    depth = 0
    while error is not None and depth < _MAX_CAUSE_DEPTH:
        yield error
        error = error.__cause__
        depth += 1


def extract_error_number(exc: DBAPIError) -> int | None:
    """Numeric error code the procedure raised, if the driver exposes one."""
    for source in _driver_error_chain(exc.orig):
        for attr in ("number", "sqlstate", "pgcode"):
            value = getattr(source, attr, None)
            if value is None:
                continue
            try:
                return int(value)
            except (TypeError, ValueError):
                continue
    return None


def extract_error_message(exc: DBAPIError) -> str:
    """The procedure's own message text, without driver decoration."""
    for source in _driver_error_chain(exc.orig):
        message = getattr(source, "message", None)
        if isinstance(message, str) and message:
            return message
    return str(exc.orig) if exc.orig is not None else str(exc)


class SqlProcedureStore:
    """ProcedureStore backed by an AsyncSession."""

    def __init__(self, session: AsyncSession, schema: str = "functional"):
        self._session = session
        self._schema = schema

    async def fetch_all(
        self, procedure: str, params: Mapping[str, Any],
    ) -> list[dict[str, Any]]:
        statement = build_procedure_call(self._schema, procedure, params)
        started = time.perf_counter()
        try:
            result = await self._session.execute(statement, dict(params))
            rows = [dict(row) for row in result.mappings().all()]
            await self._session.commit()
        except DBAPIError as e:
            await self._session.rollback()
            raise self._map_error(procedure, params, e) from e
        logger.debug(
            f"Procedure {procedure} returned {len(rows)} row(s)",
            extra={
                "procedure": procedure,
                "duration_ms": round((time.perf_counter() - started) * 1000, 2),
            },
        )
        return rows

    async def fetch_one(
        self, procedure: str, params: Mapping[str, Any],
    ) -> dict[str, Any]:
        rows = await self.fetch_all(procedure, params)
        if not rows:
            raise ProcedureContractError(procedure, "expected one row, got none")
        return rows[0]

    def _map_error(
        self, procedure: str, params: Mapping[str, Any], error: DBAPIError,
    ) -> Exception:
        context = ErrorContext(
            procedure=procedure, account_id=params.get("idAccount"),
        )
        if extract_error_number(error) == BUSINESS_RULE_ERROR_NUMBER:
            message = extract_error_message(error)
            logger.info(
                f"Procedure {procedure} rejected request: {message}",
                extra={"procedure": procedure, "error_code": "BUSINESS_RULE_VIOLATION"},
            )
            return BusinessRuleError(message, context)
        logger.error(
            f"Procedure {procedure} failed: {error}",
            extra={"procedure": procedure, "error_code": "INTERNAL_SERVER_ERROR"},
        )
        return DatabaseError("Procedure call failed", procedure, context)


async def get_procedure_store(
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_settings),
) -> ProcedureStore:
    """FastAPI dependency for the procedure store bound to the request session."""
    return SqlProcedureStore(db, settings.procedure_schema)
