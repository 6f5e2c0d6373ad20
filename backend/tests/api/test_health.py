"""Health probes — liveness always up, readiness follows the database."""

from app.infrastructure import database


class _Manager:
    def __init__(self, healthy: bool):
        self.healthy = healthy

    async def health_check(self) -> bool:
        return self.healthy


async def test_liveness(client):
    res = await client.get("/api/v1/health/")

    assert res.status_code == 200
    data = res.json()["data"]
    assert data["status"] == "healthy"
    assert data["service"] == "tasktree-api"


async def test_liveness_ignores_permissions(client, settings):
    settings.permissions = {}
    res = await client.get("/api/v1/health/")
    assert res.status_code == 200


async def test_readiness_without_database_is_503(client, monkeypatch):
    monkeypatch.setattr(database, "db_manager", None)

    res = await client.get("/api/v1/health/ready")

    assert res.status_code == 503
    body = res.json()
    assert body["success"] is False
    assert body["error"]["code"] == "SERVICE_UNAVAILABLE"


async def test_readiness_with_database(client, monkeypatch):
    monkeypatch.setattr(database, "db_manager", _Manager(healthy=True))

    res = await client.get("/api/v1/health/ready")

    assert res.status_code == 200
    assert res.json()["data"]["checks"]["database"] == "healthy"


async def test_readiness_with_failing_database(client, monkeypatch):
    monkeypatch.setattr(database, "db_manager", _Manager(healthy=False))
    res = await client.get("/api/v1/health/ready")
    assert res.status_code == 503
