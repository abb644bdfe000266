"""Tests for the liveness and status routes."""


async def test_health_returns_static_info(client) -> None:
    resp = await client.get("/health")
    assert resp.status == 200
    data = await resp.json()
    assert data["status"] == "healthy"
    assert data["service"] == "Real Estate Intelligence"
    assert data["version"] == "5.0.0"
    assert data["environment"] == "test"
    assert data["uptime"] >= 0
    assert "maxRssKb" in data["memory"]
    assert data["timestamp"].endswith("Z")


async def test_health_ignores_collaborator_failures(client, services) -> None:
    services.documents.error = RuntimeError("firestore down")
    services.objects.error = RuntimeError("gcs down")

    resp = await client.get("/health")
    assert resp.status == 200


async def test_status_all_active(client) -> None:
    resp = await client.get("/api/status")
    assert resp.status == 200
    data = await resp.json()
    assert data["status"] == "operational"
    assert data["components"] == {
        "api": "healthy",
        "firestore": "active",
        "storage": "active",
        "vertexAI": "active",
        "sheets": "active",
        "drive": "active",
    }
    assert data["config"]["bucket"] == "test-bucket"
    assert data["config"]["environment"] == "test"


async def test_status_reports_probe_failures(client, services) -> None:
    services.documents.error = RuntimeError("firestore down")
    services.objects.error = RuntimeError("gcs down")

    resp = await client.get("/api/status")
    assert resp.status == 200
    data = await resp.json()
    assert data["components"]["firestore"] == "error"
    assert data["components"]["storage"] == "error"
    assert data["components"]["api"] == "healthy"
