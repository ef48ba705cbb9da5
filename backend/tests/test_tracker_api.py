import asyncio
import json
import uuid

import httpx
import pytest
from fastapi.testclient import TestClient

from app.main import app
from app.db import SessionLocal
from app.repositories.user_repo import UserRepository
from app.tracker import ExerciseRef, WorkoutSession
from app.tracker.api import WorkoutApiClient

client = TestClient(app)
PWD = "StrongPassw0rd!"


def test_create_workout_sends_bearer_and_json():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["auth"] = request.headers.get("Authorization")
        seen["path"] = request.url.path
        seen["body"] = json.loads(request.content)
        return httpx.Response(201, json={"id": 7})

    async def scenario():
        async with WorkoutApiClient("http://api", token="abc", transport=httpx.MockTransport(handler)) as api:
            return await api.create_workout({"notes": "x"})

    assert asyncio.run(scenario()) == {"id": 7}
    assert seen == {"auth": "Bearer abc", "path": "/workouts", "body": {"notes": "x"}}


def test_error_status_is_raised_unchanged():
    def handler(request):
        return httpx.Response(422, json={"detail": "bad"})

    async def scenario():
        async with WorkoutApiClient("http://api", transport=httpx.MockTransport(handler)) as api:
            await api.create_workout({})

    with pytest.raises(httpx.HTTPStatusError) as info:
        asyncio.run(scenario())
    assert info.value.response.status_code == 422


def test_catalog_lookup_maps_to_ref():
    def handler(request):
        if request.url.path == "/exercises":
            assert request.url.params["type"] == "strength"
            return httpx.Response(200, json=[{"id": 3, "name": "Dip", "muscle_groups": ["triceps"], "difficulty": "beginner"}])
        return httpx.Response(200, json={"id": 3, "name": "Dip", "muscle_groups": ["triceps"], "difficulty": "beginner"})

    async def scenario():
        async with WorkoutApiClient("http://api", transport=httpx.MockTransport(handler)) as api:
            return await api.get_exercise(3), await api.list_exercises(type="strength", search=None)

    one, many = asyncio.run(scenario())
    assert one == ExerciseRef(id=3, name="Dip", muscle_groups=("triceps",), difficulty="beginner")
    assert many == [one]


def test_session_finish_against_running_app():
    email = f"{uuid.uuid4().hex[:10]}@ex.com"
    client.post("/auth/register", json={"email": email, "name": "E2E", "password": PWD})
    admin_email = f"{uuid.uuid4().hex[:10]}@ex.com"
    client.post("/auth/register", json={"email": admin_email, "name": "A", "password": PWD})
    db = SessionLocal()
    repo = UserRepository(db)
    repo.set_role(repo.get_by_email(admin_email).id, role="admin")
    db.close()
    admin_tok = client.post("/auth/login", json={"email": admin_email, "password": PWD}).json()["access_token"]
    ex_id = client.post("/exercises", headers={"Authorization": f"Bearer {admin_tok}"},
                        json={"name": f"Front Squat {uuid.uuid4().hex[:6]}", "muscle_groups": ["quads"]}).json()["id"]

    async def scenario():
        transport = httpx.ASGITransport(app=app)
        async with WorkoutApiClient("http://testserver", transport=transport) as api:
            await api.login(email, PWD)
            squat = await api.get_exercise(ex_id)

            session = WorkoutSession(api.create_workout)
            session.start()
            block = session.add_exercise(squat)
            for reps, weight in ((10, 100), (8, 110)):
                s = session.add_set(block.id)
                session.update_set(block.id, s.id, reps=reps, weight=weight)
            saved = await session.finish()
            return api.token, saved, session

    tok, saved, session = asyncio.run(scenario())
    assert not session.is_active
    assert saved["total_volume"] == 1880
    assert saved["exercises"][0]["exercise"]["name"].startswith("Front Squat")

    recs = client.get("/records", headers={"Authorization": f"Bearer {tok}"}).json()
    assert {(r["record_type"], r["value"]) for r in recs} == {("max_weight", 110), ("max_reps", 10)}
