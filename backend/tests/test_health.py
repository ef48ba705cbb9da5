from fastapi.testclient import TestClient
from app.main import app
from app import main as app_main

client = TestClient(app)

def test_root_and_ping():
    assert client.get("/").json() == {"ok": True, "name": "FitTrack API"}
    assert client.get("/ping").json() == {"pong": True}

def test_version_from_env(monkeypatch):
    monkeypatch.setenv("API_VERSION", "1.4.2")
    assert client.get("/version").json() == {"version": "1.4.2"}

def test_healthz_ok_against_test_db():
    assert client.get("/healthz").json() == {"status": "ok"}

def test_healthz_reports_unreachable_db(monkeypatch):
    class Down:
        def __enter__(self): raise RuntimeError("connection refused")
        def __exit__(self, *a): return False
    monkeypatch.setattr(app_main, "SessionLocal", lambda: Down())
    body = client.get("/healthz").json()
    assert body["status"] == "degraded"
    assert "connection refused" in body["error"]

def test_request_id_echoed_or_generated():
    r = client.get("/ping", headers={"X-Request-ID": "abc-123"})
    assert r.headers["X-Request-ID"] == "abc-123"
    assert client.get("/ping").headers["X-Request-ID"]
