from typing import Annotated
from datetime import datetime
from pydantic import BaseModel, Field, StringConstraints

from app.models.goal import GoalStatus, GoalType

Title = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=200)]
Unit = Annotated[str, StringConstraints(strip_whitespace=True, max_length=20)]
Target = Annotated[float, Field(gt=0)]

class GoalCreate(BaseModel):
    goal_type: GoalType
    title: Title
    description: str | None = None
    target_value: Target
    current_value: Annotated[float, Field(ge=0)] | None = None
    unit: Unit | None = None
    deadline: datetime | None = None
    exercise_id: int | None = None

class GoalUpdate(BaseModel):
    title: Title | None = None
    description: str | None = None
    target_value: Target | None = None
    current_value: Annotated[float, Field(ge=0)] | None = None
    unit: Unit | None = None
    deadline: datetime | None = None
    status: GoalStatus | None = None

class GoalRead(BaseModel):
    id: int
    user_id: int
    goal_type: GoalType
    title: str
    description: str | None = None
    target_value: float
    current_value: float | None = None
    unit: str | None = None
    deadline: datetime | None = None
    exercise_id: int | None = None
    status: GoalStatus
    achieved_at: datetime | None = None
    created_at: datetime | None = None

    model_config = {"from_attributes": True}
