from fastapi.testclient import TestClient
from app.main import app
import uuid

client = TestClient(app)
PWD = "StrongPassw0rd!"

def token():
    e = f"{uuid.uuid4().hex[:10]}@ex.com"
    client.post("/auth/register", json={"email": e, "name": "M", "password": PWD})
    return client.post("/auth/login", json={"email": e, "password": PWD}).json()["access_token"]

def auth(t): return {"Authorization": f"Bearer {t}"}

def log(t, date, **values):
    r = client.post("/measurements", headers=auth(t), json={"date": date, **values})
    assert r.status_code == 201, r.text
    return r.json()

def test_log_and_read_measurement():
    t = token()
    m = log(t, "2026-03-01T07:00:00+00:00", weight=82.4, waist=84, body_fat_percent=18.5, notes=" morning ")
    assert m["weight"] == 82.4
    assert m["chest"] is None
    assert m["notes"] == "morning"
    r = client.get(f"/measurements/{m['id']}", headers=auth(t))
    assert r.status_code == 200
    assert r.json()["waist"] == 84

def test_measurement_needs_at_least_one_value():
    t = token()
    r = client.post("/measurements", headers=auth(t), json={"date": "2026-03-01T07:00:00+00:00", "notes": "nothing"})
    assert r.status_code == 422

def test_measurement_bounds():
    t = token()
    day = "2026-03-01T07:00:00+00:00"
    assert client.post("/measurements", headers=auth(t), json={"date": day, "weight": -1}).status_code == 422
    assert client.post("/measurements", headers=auth(t), json={"date": day, "body_fat_percent": 120}).status_code == 422
    assert client.post("/measurements", headers=auth(t), json={"weight": 80}).status_code == 422

def test_list_newest_first_with_date_range_and_limit():
    t = token()
    jan = log(t, "2026-01-10T07:00:00+00:00", weight=85)
    feb = log(t, "2026-02-10T07:00:00+00:00", weight=84)
    mar = log(t, "2026-03-10T07:00:00+00:00", weight=83)

    ids = [m["id"] for m in client.get("/measurements", headers=auth(t)).json()]
    assert ids == [mar["id"], feb["id"], jan["id"]]

    r = client.get("/measurements", headers=auth(t),
                   params={"start_date": "2026-02-01T00:00:00+00:00", "end_date": "2026-02-28T00:00:00+00:00"})
    assert [m["id"] for m in r.json()] == [feb["id"]]

    r = client.get("/measurements?limit=2", headers=auth(t))
    assert [m["id"] for m in r.json()] == [mar["id"], feb["id"]]

def test_patch_keeps_date_when_null_and_clears_values():
    t = token()
    m = log(t, "2026-04-01T07:00:00+00:00", weight=80, hips=98)
    r = client.patch(f"/measurements/{m['id']}", headers=auth(t), json={"date": None, "hips": None, "neck": 38})
    assert r.status_code == 200
    body = r.json()
    assert body["date"].startswith("2026-04-01T07:00:00")
    assert body["hips"] is None
    assert body["neck"] == 38
    assert body["weight"] == 80

def test_measurements_are_owner_scoped():
    owner, other = token(), token()
    m = log(owner, "2026-05-01T07:00:00+00:00", weight=70)
    assert client.get(f"/measurements/{m['id']}", headers=auth(other)).status_code == 404
    assert client.patch(f"/measurements/{m['id']}", headers=auth(other), json={"weight": 1}).status_code == 404
    assert client.delete(f"/measurements/{m['id']}", headers=auth(other)).status_code == 404
    assert client.get("/measurements", headers=auth(other)).json() == []
    assert client.get("/measurements").status_code == 401

def test_delete_measurement():
    t = token()
    m = log(t, "2026-06-01T07:00:00+00:00", weight=70)
    assert client.delete(f"/measurements/{m['id']}", headers=auth(t)).status_code == 204
    assert client.get(f"/measurements/{m['id']}", headers=auth(t)).status_code == 404
