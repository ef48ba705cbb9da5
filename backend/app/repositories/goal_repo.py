from __future__ import annotations
from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import select

from app.models import Goal, GoalStatus
from app.repositories.base import BaseRepository

FIELDS = ("title", "description", "target_value", "current_value", "unit", "deadline", "status")
REQUIRED = {"title", "target_value", "status"}

class GoalRepository(BaseRepository[Goal]):
    model = Goal

    # READS
    def get_for_user(self, goal_id: int, user_id: int) -> Optional[Goal]:
        stmt = select(Goal).where(Goal.id == goal_id, Goal.user_id == user_id)
        return self.db.execute(stmt).scalar_one_or_none()

    def list_by_user(
        self,
        user_id: int,
        *,
        status: GoalStatus | None = GoalStatus.active,
        goal_type: str | None = None,
    ) -> list[Goal]:
        """Goals for one user; `status=None` returns every status."""
        stmt = select(Goal).where(Goal.user_id == user_id)
        if status is not None:
            stmt = stmt.where(Goal.status == status)
        if goal_type:
            stmt = stmt.where(Goal.goal_type == goal_type)
        # no deadline sorts last on every backend
        stmt = stmt.order_by(
            Goal.status.asc(),
            Goal.deadline.is_(None),
            Goal.deadline.asc(),
            Goal.created_at.desc(),
            Goal.id.desc(),
        )
        return list(self.db.execute(stmt).scalars().all())

    # WRITES
    def create(self, user_id: int, **fields) -> Goal:
        goal = Goal(user_id=user_id, **fields)
        self.db.add(goal)
        self.db.commit()
        self.db.refresh(goal)
        return goal

    def update(self, goal: Goal, *, fields: dict) -> Goal:
        for name in FIELDS:
            if name not in fields or (name in REQUIRED and fields[name] is None):
                continue
            setattr(goal, name, fields[name])
        # first transition to achieved is stamped, later ones keep the stamp
        if fields.get("status") == GoalStatus.achieved and goal.achieved_at is None:
            goal.achieved_at = datetime.now(timezone.utc)
        self.db.commit()
        self.db.refresh(goal)
        return goal

    def delete(self, goal: Goal) -> None:
        self.db.delete(goal)
        self.db.commit()
