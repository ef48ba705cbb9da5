"""HTTP client the tracker uses to reach the FitTrack API."""
from __future__ import annotations

import logging
from typing import Any, Optional

import httpx

from app.settings import get_settings
from app.tracker.session import ExerciseRef

log = logging.getLogger(__name__)


class WorkoutApiClient:
    """Thin async wrapper over the REST API.

    Errors are not retried or translated: a non-2xx reply raises
    `httpx.HTTPStatusError`, a transport problem raises the matching
    `httpx.HTTPError` subclass.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        *,
        token: Optional[str] = None,
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.base_url = (base_url or get_settings().API_BASE_URL).rstrip("/")
        self._client = httpx.AsyncClient(base_url=self.base_url, timeout=timeout, transport=transport)
        self.token = token

    async def __aenter__(self) -> "WorkoutApiClient":
        return self

    async def __aexit__(self, *exc) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    def _headers(self) -> dict[str, str]:
        return {"Authorization": f"Bearer {self.token}"} if self.token else {}

    async def _request(self, method: str, url: str, **kwargs) -> httpx.Response:
        response = await self._client.request(method, url, headers=self._headers(), **kwargs)
        if response.is_error:
            log.warning("%s %s -> %s", method, url, response.status_code)
        response.raise_for_status()
        return response

    async def login(self, email: str, password: str) -> str:
        r = await self._request("POST", "/auth/login", json={"email": email, "password": password})
        self.token = r.json()["access_token"]
        return self.token

    async def create_workout(self, payload: dict[str, Any]) -> dict[str, Any]:
        r = await self._request("POST", "/workouts", json=payload)
        return r.json()

    async def get_exercise(self, exercise_id: int) -> ExerciseRef:
        r = await self._request("GET", f"/exercises/{exercise_id}")
        return _to_ref(r.json())

    async def list_exercises(self, **filters: Any) -> list[ExerciseRef]:
        params = {k: v for k, v in filters.items() if v is not None}
        r = await self._request("GET", "/exercises", params=params)
        return [_to_ref(item) for item in r.json()]


def _to_ref(data: dict[str, Any]) -> ExerciseRef:
    return ExerciseRef(
        id=data["id"],
        name=data["name"],
        muscle_groups=tuple(data.get("muscle_groups") or ()),
        difficulty=data.get("difficulty"),
    )
