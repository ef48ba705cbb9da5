from __future__ import annotations
from typing import Optional

from sqlalchemy import select

from app.models import PersonalRecord, RecordType
from app.repositories.base import BaseRepository

class RecordRepository(BaseRepository[PersonalRecord]):
    model = PersonalRecord

    def current_best(self, user_id: int, exercise_id: int, record_type: RecordType) -> Optional[PersonalRecord]:
        stmt = (
            select(PersonalRecord)
            .where(
                PersonalRecord.user_id == user_id,
                PersonalRecord.exercise_id == exercise_id,
                PersonalRecord.record_type == record_type,
            )
            .order_by(PersonalRecord.value.desc(), PersonalRecord.id.asc())
            .limit(1)
        )
        return self.db.execute(stmt).scalars().first()

    def list_by_user(self, user_id: int, *, exercise_id: int | None = None) -> list[PersonalRecord]:
        stmt = select(PersonalRecord).where(PersonalRecord.user_id == user_id)
        if exercise_id is not None:
            stmt = stmt.where(PersonalRecord.exercise_id == exercise_id)
        stmt = stmt.order_by(PersonalRecord.achieved_at.desc(), PersonalRecord.id.desc())
        return list(self.db.execute(stmt).scalars().all())

    def best_by_user(self, user_id: int) -> list[PersonalRecord]:
        """Current PR per (exercise, record type)."""
        best: dict[tuple[int, RecordType], PersonalRecord] = {}
        for rec in self.list_by_user(user_id):
            key = (rec.exercise_id, rec.record_type)
            if key not in best or rec.value > best[key].value:
                best[key] = rec
        return sorted(best.values(), key=lambda r: (r.exercise_id, r.record_type.value))

    def create(
        self,
        *,
        user_id: int,
        exercise_id: int,
        record_type: RecordType,
        value: float,
        details: dict,
    ) -> PersonalRecord:
        rec = PersonalRecord(
            user_id=user_id,
            exercise_id=exercise_id,
            record_type=record_type,
            value=value,
            details=details,
        )
        self.db.add(rec)
        self.db.commit()
        self.db.refresh(rec)
        return rec
