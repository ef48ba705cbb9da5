"""
In-progress workout held on the client until it is finished or cancelled.

A `WorkoutSession` is an explicitly owned object: create one per active
workout screen and pass it to whatever needs it. Nothing is persisted until
`finish()` hands the serialized workout to the persistence callable, and
the session is only cleared once that call succeeds.
"""
from __future__ import annotations

import logging
import math
import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Awaitable, Callable, Optional

from app.schemas.workout import WorkoutCreate
from app.settings import get_settings
from app.tracker.exceptions import EmptyWorkout, SaveInProgress, SessionAlreadyStarted, SessionNotStarted
from app.tracker.rest_timer import RestTimer

log = logging.getLogger(__name__)

Clock = Callable[[], datetime]
PersistFn = Callable[[dict[str, Any]], Awaitable[Any]]

SET_FIELDS = ("reps", "weight", "duration", "distance")


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _local_id() -> str:
    return uuid.uuid4().hex[:12]


@dataclass(frozen=True)
class ExerciseRef:
    """Catalog exercise as the session sees it. Only `id` is persisted."""
    id: int
    name: str
    muscle_groups: tuple[str, ...] = ()
    difficulty: str | None = None


@dataclass
class SessionSet:
    set_number: int
    id: str = field(default_factory=_local_id)
    reps: int | None = None
    weight: float | None = None
    duration: int | None = None
    distance: float | None = None
    # last-touched marker: stamped on every edit, not only real completion
    completed_at: datetime | None = None

    @property
    def volume(self) -> float:
        if self.reps is None or self.weight is None:
            return 0
        return self.reps * self.weight


@dataclass
class SessionExercise:
    exercise: ExerciseRef
    id: str = field(default_factory=_local_id)
    sets: list[SessionSet] = field(default_factory=list)
    notes: str = ""

    def find_set(self, set_id: str) -> Optional[SessionSet]:
        return next((s for s in self.sets if s.id == set_id), None)


class WorkoutSession:
    def __init__(
        self,
        persist: PersistFn,
        *,
        rest_timer: Optional[RestTimer] = None,
        clock: Clock = utcnow,
    ) -> None:
        self._persist = persist
        self._clock = clock
        self.rest_timer = rest_timer or RestTimer(get_settings().REST_TIMER_DEFAULT_SECONDS)
        self._saving = False
        self._clear()

    def _clear(self) -> None:
        self.id: str | None = None
        self.started_at: datetime | None = None
        self.exercises: list[SessionExercise] = []
        self.current_exercise_index = 0
        self.notes = ""

    @property
    def is_active(self) -> bool:
        return self.started_at is not None

    # lifecycle

    def start(self) -> None:
        if self.is_active:
            raise SessionAlreadyStarted(f"workout {self.id} is already in progress")
        self._clear()
        self.id = _local_id()
        self.started_at = self._clock()

    def cancel(self) -> None:
        self.rest_timer.stop()
        self._clear()

    async def finish(self) -> Any:
        """Save the workout and reset; on any failure nothing is discarded.

        Only one save may be in flight; a second call raises SaveInProgress.
        """
        if self._saving:
            raise SaveInProgress(f"workout {self.id} is already being saved")
        if not self.is_active:
            raise SessionNotStarted("no workout in progress")
        if not self.exercises:
            raise EmptyWorkout("add at least one exercise to finish the workout")
        if not any(ex.sets for ex in self.exercises):
            raise EmptyWorkout("complete at least one set to finish the workout")

        payload = self.build_payload(self._clock())
        self._saving = True
        try:
            saved = await self._persist(payload)
        finally:
            self._saving = False
        log.info("workout %s saved (%d exercises)", self.id, len(self.exercises))
        self.cancel()
        return saved

    # exercises

    def add_exercise(self, exercise: ExerciseRef) -> SessionExercise:
        # the same catalog exercise may appear more than once
        entry = SessionExercise(exercise=exercise)
        self.exercises.append(entry)
        return entry

    def remove_exercise(self, exercise_id: str) -> bool:
        before = len(self.exercises)
        self.exercises = [ex for ex in self.exercises if ex.id != exercise_id]
        self.current_exercise_index = min(self.current_exercise_index, max(0, len(self.exercises) - 1))
        return len(self.exercises) != before

    def find_exercise(self, exercise_id: str) -> Optional[SessionExercise]:
        return next((ex for ex in self.exercises if ex.id == exercise_id), None)

    def set_current_exercise(self, index: int) -> None:
        if not 0 <= index < len(self.exercises):
            raise IndexError(f"exercise index {index} out of range (0..{len(self.exercises) - 1})")
        self.current_exercise_index = index

    def set_notes(self, notes: str) -> None:
        self.notes = notes

    def set_exercise_notes(self, exercise_id: str, notes: str) -> bool:
        entry = self.find_exercise(exercise_id)
        if entry is None:
            return False
        entry.notes = notes
        return True

    # sets

    def add_set(self, exercise_id: str) -> Optional[SessionSet]:
        entry = self.find_exercise(exercise_id)
        if entry is None:
            return None
        new_set = SessionSet(set_number=len(entry.sets) + 1)
        entry.sets.append(new_set)
        return new_set

    def update_set(self, exercise_id: str, set_id: str, **fields: Any) -> Optional[SessionSet]:
        unknown = set(fields) - set(SET_FIELDS)
        if unknown:
            raise TypeError(f"unknown set field(s): {', '.join(sorted(unknown))}")
        entry = self.find_exercise(exercise_id)
        target = entry.find_set(set_id) if entry else None
        if target is None:
            return None
        for name, value in fields.items():
            setattr(target, name, value)
        target.completed_at = self._clock()
        return target

    def remove_set(self, exercise_id: str, set_id: str) -> bool:
        entry = self.find_exercise(exercise_id)
        if entry is None or entry.find_set(set_id) is None:
            return False
        entry.sets = [s for s in entry.sets if s.id != set_id]
        for number, s in enumerate(entry.sets, start=1):
            s.set_number = number
        return True

    # derived values

    @property
    def total_volume(self) -> float:
        return sum(s.volume for ex in self.exercises for s in ex.sets)

    def duration_minutes(self, ended_at: datetime) -> int:
        if self.started_at is None:
            raise SessionNotStarted("no workout in progress")
        return math.floor((ended_at - self.started_at).total_seconds() / 60)

    def build_payload(self, ended_at: datetime) -> dict[str, Any]:
        """JSON body for POST /workouts; local ids are left out."""
        body = WorkoutCreate(
            started_at=self.started_at,
            ended_at=ended_at,
            duration_minutes=self.duration_minutes(ended_at),
            notes=self.notes,
            total_volume=self.total_volume,
            exercises=[
                {
                    "exercise_id": ex.exercise.id,
                    "notes": ex.notes,
                    "sets": [
                        {
                            "set_number": s.set_number,
                            "reps": s.reps,
                            "weight": s.weight,
                            "duration": s.duration,
                            "distance": s.distance,
                            "completed_at": s.completed_at,
                        }
                        for s in ex.sets
                    ],
                }
                for ex in self.exercises
            ],
        )
        return body.model_dump(mode="json")
