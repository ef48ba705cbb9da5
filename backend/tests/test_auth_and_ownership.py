import uuid

import pytest
from fastapi.testclient import TestClient
from jose.exceptions import ExpiredSignatureError

from app.main import app
from app.db import SessionLocal
from app.repositories.user_repo import UserRepository
from app.security import create_access_token, hash_password

client = TestClient(app)
PWD = "StrongPassw0rd!"
def uniq_email(): return f"{uuid.uuid4().hex[:10]}@ex.com"
def auth(t): return {"Authorization": f"Bearer {t}"}

def register(email, pwd=PWD):
    return client.post("/auth/register", json={"email": email, "name": "Lifter", "password": pwd})

def login(email, pwd=PWD):
    return client.post("/auth/login", json={"email": email, "password": pwd})

def athlete(admin=False):
    e = uniq_email()
    register(e)
    if admin:
        db = SessionLocal()
        repo = UserRepository(db)
        repo.set_role(repo.get_by_email(e).id, role="admin")
        db.close()
    t = login(e).json()["access_token"]
    return t, client.get("/auth/me", headers=auth(t)).json()["id"]

def log_bench_workout(t, reps=5, weight=100):
    ex = client.post("/exercises", headers=auth(athlete(admin=True)[0]),
                     json={"name": f"Bench {uuid.uuid4().hex[:8]}", "muscle_groups": ["chest"]}).json()["id"]
    body = {
        "started_at": "2026-02-02T18:00:00+00:00",
        "ended_at": "2026-02-02T18:40:00+00:00",
        "duration_minutes": 40,
        "exercises": [{"exercise_id": ex, "sets": [{"set_number": 1, "reps": reps, "weight": weight}]}],
    }
    r = client.post("/workouts", headers=auth(t), json=body)
    assert r.status_code == 201, r.text
    return r.json()

# registration and login

def test_register_login_me():
    e = uniq_email()
    r = register(e)
    assert r.status_code == 201
    assert r.json()["role"] == "user"
    r = login(e)
    assert r.status_code == 200
    assert r.json()["token_type"] == "bearer"
    me = client.get("/auth/me", headers=auth(r.json()["access_token"]))
    assert me.status_code == 200
    assert me.json()["email"] == e
    assert "password_hash" not in me.json()

@pytest.mark.parametrize("pwd", ["short1!A", "alllowercase123!", "ALLUPPERCASE123!", "NoDigitsHere!!", "NoSpecials12345"])
def test_password_policy(pwd):
    assert register(uniq_email(), pwd).status_code == 422

def test_duplicate_email_is_case_insensitive():
    e = uniq_email()
    assert register(e).status_code == 201
    assert register(e.upper()).status_code == 400
    assert login(e.upper()).status_code == 200

def test_bad_credentials_401():
    e = uniq_email()
    register(e)
    assert login(e, "WrongPassw0rd!").status_code == 401
    assert login(uniq_email()).status_code == 401

def test_user_repository_marks_duplicates():
    db = SessionLocal()
    repo = UserRepository(db)
    e = uniq_email()
    u = repo.create(email=e, name="Repo", password_hash=hash_password(PWD))
    assert repo.get(u.id).email == e
    with pytest.raises(ValueError, match="email_already_exists"):
        repo.create(email=e, name="Again", password_hash=hash_password(PWD))
    db.close()

# tokens

def test_expired_token_rejected():
    _, user_id = athlete()
    stale = create_access_token(user_id, expires_minutes=-1)
    r = client.get("/workouts", headers=auth(stale))
    assert r.status_code == 401
    assert r.json()["detail"] == "Token expired"

def test_expiry_reported_from_decoder(monkeypatch):
    t, _ = athlete()
    def expired(_): raise ExpiredSignatureError()
    import app.deps.auth as deps_auth
    monkeypatch.setattr(deps_auth, "decode_token", expired)
    r = client.get("/records", headers=auth(t))
    assert r.status_code == 401
    assert r.json()["detail"] == "Token expired"

def test_garbage_and_orphan_tokens_rejected():
    assert client.get("/workouts", headers=auth("not-a-jwt")).status_code == 401
    orphan = create_access_token(10**9)
    assert client.get("/workouts", headers=auth(orphan)).status_code == 401

@pytest.mark.parametrize("path", ["/workouts", "/records", "/records/best", "/auth/me"])
def test_anonymous_requests_rejected(path):
    r = client.get(path)
    assert r.status_code == 401
    assert r.headers["WWW-Authenticate"] == "Bearer"

# ownership

def test_workouts_are_invisible_to_other_users():
    owner, _ = athlete()
    other, _ = athlete()
    w = log_bench_workout(owner)

    assert client.get(f"/workouts/{w['id']}", headers=auth(other)).status_code == 404
    assert client.patch(f"/workouts/{w['id']}", headers=auth(other), json={"notes": "x"}).status_code == 404
    assert client.delete(f"/workouts/{w['id']}", headers=auth(other)).status_code == 404
    assert client.get("/workouts", headers=auth(other)).json()["total"] == 0

    # still intact for the owner
    assert client.get(f"/workouts/{w['id']}", headers=auth(owner)).status_code == 200

def test_records_only_list_own_lifts():
    owner, _ = athlete()
    other, _ = athlete()
    w = log_bench_workout(owner, reps=3, weight=140)
    bench = w["exercises"][0]["exercise_id"]

    mine = client.get("/records", headers=auth(owner)).json()
    assert {r["record_type"] for r in mine} == {"max_weight", "max_reps"}
    assert all(r["exercise_id"] == bench for r in mine)

    assert client.get("/records", headers=auth(other)).json() == []
    assert client.get("/records/best", headers=auth(other)).json() == []
    assert client.get(f"/records?exercise_id={bench}", headers=auth(other)).json() == []

# user administration

def test_user_read_is_self_or_admin():
    owner, owner_id = athlete()
    other, _ = athlete()
    admin, _ = athlete(admin=True)

    assert client.get(f"/users/{owner_id}", headers=auth(owner)).status_code == 200
    assert client.get(f"/users/{owner_id}", headers=auth(admin)).json()["id"] == owner_id
    r = client.get(f"/users/{owner_id}", headers=auth(other))
    assert r.status_code == 403
    assert client.get("/users/999999999", headers=auth(admin)).status_code == 404

def test_only_admins_list_users():
    plain, _ = athlete()
    r = client.get("/users", headers=auth(plain))
    assert r.status_code == 403
    assert r.json()["detail"] == "Insufficient role"

    admin, _ = athlete(admin=True)
    r = client.get("/users?limit=200", headers=auth(admin))
    assert r.status_code == 200

def test_accounts_cannot_be_created_outside_registration():
    admin, _ = athlete(admin=True)
    r = client.post("/users", headers=auth(admin), json={"email": uniq_email(), "name": "Ghost"})
    assert r.status_code == 405
