"""Health checks - liveness always 200, readiness follows the MongoDB ping."""

from animal_api.main import app


class _Connector:
    def __init__(self, healthy):
        self.healthy = healthy

    async def health_check(self):
        return self.healthy


async def test_liveness_returns_200(client):
    res = await client.get("/api/health/")
    assert res.status_code == 200
    assert res.json()["status"] == "healthy"


async def test_readiness_without_connector_returns_503(client):
    res = await client.get("/api/health/ready")
    assert res.status_code == 503
    assert res.json()["reason"] == "database_unavailable"


async def test_readiness_with_reachable_store(client, monkeypatch):
    monkeypatch.setattr(app.state, "database", _Connector(True), raising=False)

    res = await client.get("/api/health/ready")

    assert res.status_code == 200
    assert res.json() == {"status": "ready", "checks": {"database": "healthy"}}


async def test_readiness_with_unreachable_store(client, monkeypatch):
    monkeypatch.setattr(app.state, "database", _Connector(False), raising=False)

    res = await client.get("/api/health/ready")

    assert res.status_code == 503
