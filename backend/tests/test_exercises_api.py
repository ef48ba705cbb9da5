from fastapi.testclient import TestClient
from app.main import app
from app.db import SessionLocal
from app.repositories.user_repo import UserRepository
import uuid

client = TestClient(app)
PWD = "StrongPassw0rd!"

def token(admin=False):
    e = f"{uuid.uuid4().hex[:10]}@ex.com"
    client.post("/auth/register", json={"email": e, "name": "C", "password": PWD})
    if admin:
        db = SessionLocal()
        repo = UserRepository(db)
        repo.set_role(repo.get_by_email(e).id, role="admin")
        db.close()
    return client.post("/auth/login", json={"email": e, "password": PWD}).json()["access_token"]

def test_admin_creates_and_anyone_reads():
    tag = uuid.uuid4().hex[:6]
    H = {"Authorization": f"Bearer {token(admin=True)}"}
    r = client.post("/exercises", headers=H, json={
        "name": f"Romanian Deadlift {tag}",
        "description": "hip hinge",
        "muscle_groups": [" Hamstrings ", "glutes"],
        "difficulty": "intermediate",
    })
    assert r.status_code == 201, r.text
    ex = r.json()
    assert ex["muscle_groups"] == ["hamstrings", "glutes"]

    r = client.get(f"/exercises/{ex['id']}")
    assert r.status_code == 200
    assert r.json()["name"] == f"Romanian Deadlift {tag}"

def test_duplicate_name_400():
    H = {"Authorization": f"Bearer {token(admin=True)}"}
    name = f"Pull-up {uuid.uuid4().hex[:6]}"
    assert client.post("/exercises", headers=H, json={"name": name}).status_code == 201
    r = client.post("/exercises", headers=H, json={"name": name})
    assert r.status_code == 400
    assert "already" in r.json()["detail"]

def test_non_admin_cannot_create():
    r = client.post("/exercises", headers={"Authorization": f"Bearer {token()}"}, json={"name": "Nope"})
    assert r.status_code == 403

def test_search_and_filters():
    tag = uuid.uuid4().hex[:8]
    H = {"Authorization": f"Bearer {token(admin=True)}"}
    client.post("/exercises", headers=H, json={
        "name": f"Zercher Squat {tag}", "muscle_groups": ["quads"], "secondary_muscles": ["core"],
        "difficulty": "advanced",
    })
    client.post("/exercises", headers=H, json={
        "name": f"Air Bike {tag}", "muscle_groups": ["legs"], "exercise_type": "cardio",
    })

    names = [e["name"] for e in client.get("/exercises", params={"search": tag.upper()}).json()]
    assert names == [f"Air Bike {tag}", f"Zercher Squat {tag}"]

    r = client.get("/exercises", params={"search": tag, "muscle_group": "core"})
    assert [e["name"] for e in r.json()] == [f"Zercher Squat {tag}"]

    r = client.get("/exercises", params={"search": tag, "type": "cardio"})
    assert [e["name"] for e in r.json()] == [f"Air Bike {tag}"]

    r = client.get("/exercises", params={"search": tag, "difficulty": "advanced"})
    assert [e["name"] for e in r.json()] == [f"Zercher Squat {tag}"]

def test_missing_exercise_404():
    assert client.get("/exercises/99999999").status_code == 404
