"""Health Routes: liveness always up, readiness follows the store."""

from fastapi.testclient import TestClient


def test_liveness(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json()["status"] == "healthy"


def test_readiness_with_reachable_store(client):
    resp = client.get("/health/ready")
    assert resp.status_code == 200
    assert resp.json()["checks"]["database"] == "healthy"


def test_readiness_without_manager_is_503(app):
    # no lifespan: app.state.db_manager never set
    resp = TestClient(app).get("/health/ready")
    assert resp.status_code == 503
    assert resp.json()["reason"] == "database_unavailable"
