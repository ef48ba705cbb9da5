"""
Personal record detection, run once right after a workout is committed.

For every exercise block in the workout the heaviest set and the set with
the most reps are compared against the user's current best for that
exercise. A new row is appended only when the value is strictly greater;
history is never updated or deleted here.
"""
from __future__ import annotations

import logging
from typing import Iterable, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.models import PersonalRecord, RecordType, Workout, WorkoutSet
from app.repositories.record_repo import RecordRepository

logger = logging.getLogger(__name__)


def best_set(sets: Iterable[WorkoutSet], field: str) -> Optional[WorkoutSet]:
    """Set with the highest non-null `field`; the first one wins a tie."""
    candidates = [s for s in sets if getattr(s, field) is not None]
    return max(candidates, key=lambda s: getattr(s, field), default=None)


# record type -> (field compared, complementary field kept in metadata)
_CHECKS: tuple[tuple[RecordType, str, str], ...] = (
    (RecordType.max_weight, "weight", "reps"),
    (RecordType.max_reps, "reps", "weight"),
)


def evaluate_workout(db: Session, workout: Workout) -> list[PersonalRecord]:
    """Insert new max_weight / max_reps records for `workout`, return them.

    Failures are logged and skipped: the workout itself is already saved and
    records can be rebuilt by replaying history.
    """
    repo = RecordRepository(db)
    created: list[PersonalRecord] = []
    user_id, workout_id = workout.user_id, workout.id

    for block in workout.exercises:
        exercise_id = block.exercise_id
        sets = sorted(block.sets, key=lambda s: s.set_number)
        for record_type, field, other in _CHECKS:
            top = best_set(sets, field)
            if top is None:
                continue
            value = getattr(top, field)
            try:
                current = repo.current_best(user_id, exercise_id, record_type)
                if current is not None and not value > current.value:
                    continue
                rec = repo.create(
                    user_id=user_id,
                    exercise_id=exercise_id,
                    record_type=record_type,
                    value=value,
                    details={other: getattr(top, other), "workout_id": workout_id},
                )
            except SQLAlchemyError:
                db.rollback()
                logger.exception(
                    "PR check failed user=%s exercise=%s type=%s workout=%s",
                    user_id, exercise_id, record_type.value, workout_id,
                )
                continue
            logger.info(
                "new PR user=%s exercise=%s %s=%s (workout %s)",
                user_id, exercise_id, record_type.value, value, workout_id,
            )
            created.append(rec)
    return created
