"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - The procedure store is reached only through ProcedureStore
    - Implementations provided by shell via dependency injection (FastAPI Depends)

Design Decisions:
    - Protocol over ABC: structural subtyping, tests swap in a fake without inheritance
    - Rows are plain dicts keyed by the procedure's column names (camelCase):
      services stay thin, schemas do the reshaping
"""

from collections.abc import Mapping
from typing import Any, Protocol


class ProcedureStore(Protocol):
    """Contract for the external stored-procedure layer — implemented by shell."""

    async def fetch_all(
        self, procedure: str, params: Mapping[str, Any],
    ) -> list[dict[str, Any]]:
        """Call a procedure and return every row of its result set."""
        ...

    async def fetch_one(
        self, procedure: str, params: Mapping[str, Any],
    ) -> dict[str, Any]:
        """Call a procedure that returns exactly one row and return that row."""
        ...


class CategoryLike(Protocol):
    """Structural contract for flat category items fed to hierarchy helpers.

    Satisfied by the API response schema and the client DTO alike.
    """
    id_category: int
    id_parent: int | None
    level: int
    task_count: int
