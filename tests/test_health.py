from sqlalchemy.exc import OperationalError

from clubhub.database import Store


def test_health_reports_connected_store(client):
    response = client.get("/api/health")
    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "OK"
    assert body["database"] == "connected"
    assert body["timestamp"]


def test_health_flips_when_store_is_down(client, store, monkeypatch):
    def unreachable():
        raise OperationalError("SELECT 1", {}, Exception("connection refused"))

    monkeypatch.setattr(store, "ping", unreachable)
    body = client.get("/api/health").json()
    assert body["status"] == "OK"
    assert body["database"] == "disconnected"


def test_store_connects_once(tmp_path):
    lazy = Store(f"sqlite:///{tmp_path / 'lazy.db'}")
    assert lazy.is_connected() is False
    engine = lazy.connect()
    assert lazy.connect() is engine
    assert lazy.is_connected() is True
    lazy.dispose()
    assert lazy.is_connected() is False
