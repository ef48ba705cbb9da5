from typing import Annotated
from datetime import datetime
from pydantic import BaseModel, Field, StringConstraints, model_validator

from app.schemas.exercise import ExerciseSummary

PosInt = Annotated[int, Field(ge=1)]
PosFloat = Annotated[float, Field(gt=0)]
# Notes: trimmed, up to 500 chars
NotesStr = Annotated[str, StringConstraints(strip_whitespace=True, max_length=500)]
Rating = Annotated[int, Field(ge=1, le=10)]

class WorkoutSetCreate(BaseModel):
    set_number: PosInt
    reps: PosInt | None = None
    weight: PosFloat | None = None
    duration: PosInt | None = None
    distance: PosFloat | None = None
    completed_at: datetime | None = None

class WorkoutExerciseCreate(BaseModel):
    exercise_id: int
    notes: NotesStr | None = None
    sets: list[WorkoutSetCreate] = Field(default_factory=list)

class WorkoutCreate(BaseModel):
    started_at: datetime
    ended_at: datetime
    duration_minutes: Annotated[int, Field(ge=0)]
    notes: NotesStr | None = None
    total_volume: Annotated[float, Field(ge=0)] | None = None
    exercises: list[WorkoutExerciseCreate] = Field(min_length=1)

    @model_validator(mode="after")
    def ends_after_start(self) -> "WorkoutCreate":
        if self.ended_at < self.started_at:
            raise ValueError("ended_at must not be before started_at")
        return self

class WorkoutUpdate(BaseModel):
    notes: NotesStr | None = None
    difficulty_rating: Rating | None = None

class WorkoutSetRead(BaseModel):
    id: int
    set_number: int
    reps: int | None = None
    weight: float | None = None
    duration: int | None = None
    distance: float | None = None
    completed_at: datetime | None = None

    model_config = {"from_attributes": True}

class WorkoutExerciseRead(BaseModel):
    id: int
    exercise_id: int
    position: int
    notes: str | None = None
    exercise: ExerciseSummary
    sets: list[WorkoutSetRead] = []

    model_config = {"from_attributes": True}

class WorkoutRead(BaseModel):
    id: int
    user_id: int
    started_at: datetime
    ended_at: datetime | None = None
    duration_minutes: int
    total_volume: float | None = None
    notes: str | None = None
    difficulty_rating: int | None = None
    exercises: list[WorkoutExerciseRead] = []

    model_config = {"from_attributes": True}

class WorkoutPage(BaseModel):
    workouts: list[WorkoutRead]
    total: int
