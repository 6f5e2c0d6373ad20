"""API test fixtures — FastAPI test client with a scripted procedure store.

Invariants:
    - No database: get_procedure_store is overridden with FakeProcedureStore
    - Every procedure call is recorded as {"procedure", "params"} for assertions
    - Settings overridable per test (permission grants) via the `settings` fixture

Design Decisions:
    - Fake at the ProcedureStore boundary, not at the session: routes, security,
      services and error handlers all run for real
    - raise_app_exceptions=False: the catch-all handler's 500 is asserted, not re-raised
"""

import pytest
from httpx import ASGITransport, AsyncClient

from app.config import Settings, get_settings
from app.core.errors import ProcedureContractError
from app.infrastructure.procedure_store import get_procedure_store
from app.main import app

API = "/api/v1/internal"


class FakeProcedureStore:
    """Records calls; returns configured rows or raises configured errors.

    results maps procedure name → list of rows, an Exception instance, or a
    callable(params) returning either.
    """

    def __init__(self):
        self.calls: list[dict] = []
        self.results: dict = {}

    async def fetch_all(self, procedure, params):
        self.calls.append({"procedure": procedure, "params": dict(params)})
        result = self.results.get(procedure, [])
        if callable(result):
            result = result(params)
        if isinstance(result, Exception):
            raise result
        return result

    async def fetch_one(self, procedure, params):
        rows = await self.fetch_all(procedure, params)
        if not rows:
            raise ProcedureContractError(procedure, "expected one row, got none")
        return rows[0]


@pytest.fixture
def store():
    return FakeProcedureStore()


@pytest.fixture
def settings():
    return Settings()


@pytest.fixture
async def client(store, settings):
    app.dependency_overrides[get_procedure_store] = lambda: store
    app.dependency_overrides[get_settings] = lambda: settings

    async with AsyncClient(
        transport=ASGITransport(app=app, raise_app_exceptions=False),
        base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
