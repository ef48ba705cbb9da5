from __future__ import annotations
from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import selectinload

from app.models import Workout, WorkoutExercise, WorkoutSet
from app.repositories.base import BaseRepository, Page
from app.schemas.workout import WorkoutCreate

GRAPH = (
    selectinload(Workout.exercises).selectinload(WorkoutExercise.sets),
    selectinload(Workout.exercises).selectinload(WorkoutExercise.exercise),
)

class WorkoutRepository(BaseRepository[Workout]):
    model = Workout

    # READS
    def get_for_user(self, workout_id: int, user_id: int) -> Optional[Workout]:
        stmt = select(Workout).where(Workout.id == workout_id, Workout.user_id == user_id).options(*GRAPH)
        return self.db.execute(stmt).scalar_one_or_none()

    def list_by_user(self, user_id: int, *, limit: int = 50, offset: int = 0) -> Page[Workout]:
        stmt = select(Workout).where(Workout.user_id == user_id)\
                              .order_by(Workout.started_at.desc(), Workout.id.desc())
        return self.page_from_stmt(stmt, limit=limit, offset=offset, options=GRAPH)

    # WRITES
    def create(self, user_id: int, data: WorkoutCreate) -> Workout:
        """Insert workout, exercises and sets in a single commit."""
        workout = Workout(
            user_id=user_id,
            started_at=data.started_at,
            ended_at=data.ended_at,
            duration_minutes=data.duration_minutes,
            notes=data.notes or None,
            total_volume=data.total_volume,
        )
        for position, ex in enumerate(data.exercises):
            workout.exercises.append(WorkoutExercise(
                exercise_id=ex.exercise_id,
                position=position,
                notes=ex.notes or None,
                sets=[
                    WorkoutSet(
                        set_number=s.set_number,
                        reps=s.reps,
                        weight=s.weight,
                        duration=s.duration,
                        distance=s.distance,
                        completed_at=s.completed_at,
                    )
                    for s in ex.sets
                ],
            ))
        try:
            self.db.add(workout)
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            raise
        self.db.refresh(workout)
        return workout

    def update(self, workout: Workout, *, fields: dict) -> Workout:
        for name in ("notes", "difficulty_rating"):
            if name in fields:
                setattr(workout, name, fields[name])
        self.db.commit()
        self.db.refresh(workout)
        return workout

    def delete(self, workout: Workout) -> None:
        self.db.delete(workout)
        self.db.commit()
