from __future__ import annotations
from typing import Iterable

from sqlalchemy import select, func, or_
from sqlalchemy.exc import IntegrityError

from app.models import Exercise
from app.repositories.base import BaseRepository

class ExerciseRepository(BaseRepository[Exercise]):
    model = Exercise

    def search(
        self,
        *,
        search: str | None = None,
        muscle_group: str | None = None,
        difficulty: str | None = None,
        exercise_type: str | None = None,
    ) -> list[Exercise]:
        stmt = select(Exercise).order_by(Exercise.name.asc())
        if search:
            like = f"%{search.lower()}%"
            stmt = stmt.where(or_(
                func.lower(Exercise.name).like(like),
                func.lower(Exercise.description).like(like),
            ))
        if difficulty:
            stmt = stmt.where(Exercise.difficulty == difficulty)
        if exercise_type:
            stmt = stmt.where(Exercise.exercise_type == exercise_type)
        items = list(self.db.execute(stmt).scalars().all())
        if muscle_group:
            # JSON list membership differs per backend; filter the (small) catalog here
            mg = muscle_group.lower()
            items = [e for e in items if mg in e.muscle_groups or mg in e.secondary_muscles]
        return items

    def missing_ids(self, exercise_ids: Iterable[int]) -> set[int]:
        wanted = set(exercise_ids)
        if not wanted:
            return set()
        found = self.db.execute(select(Exercise.id).where(Exercise.id.in_(wanted))).scalars().all()
        return wanted - set(found)

    def create(self, **fields) -> Exercise:
        ex = Exercise(**fields)
        try:
            self.db.add(ex)
            self.db.commit()
            self.db.refresh(ex)
            return ex
        except IntegrityError:
            self.db.rollback()
            raise ValueError("exercise_already_exists")
