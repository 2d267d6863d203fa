from sqlalchemy.exc import OperationalError

import routes.health_routes
from models import db


def test_health_ok(client):
    resp = client.get("/api/health")
    body = resp.get_json()
    assert resp.status_code == 200
    assert body["status"] == "healthy"
    assert body["services"] == {"database": "up", "api": "up"}
    assert body["checks"]["database"]["status"] == "up"
    assert body["version"] == "1.0.0"


def test_health_head(client):
    resp = client.head("/api/health")
    assert resp.status_code == 200
    assert resp.data == b""


def test_health_database_down(client, monkeypatch):
    def broken_execute(*args, **kwargs):
        raise OperationalError("SELECT 1", {}, Exception("database is locked"))

    monkeypatch.setattr(db.session, "execute", broken_execute)
    resp = client.get("/api/health")
    body = resp.get_json()
    assert resp.status_code == 503
    assert body["status"] == "unhealthy"
    assert "database is locked" in body["checks"]["database"]["error"]

    assert client.head("/api/health").status_code == 503


def test_check_database_reports_latency(app):
    up, latency, error = routes.health_routes.check_database()
    assert up is True
    assert latency >= 0
    assert error is None
