from typing import Annotated, Literal
from pydantic import BaseModel, Field, StringConstraints, field_validator

NameStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=120)]
Difficulty = Literal["beginner", "intermediate", "advanced"]

class ExerciseCreate(BaseModel):
    name: NameStr
    description: str | None = None
    muscle_groups: list[str] = Field(default_factory=list)
    secondary_muscles: list[str] = Field(default_factory=list)
    equipment: list[str] = Field(default_factory=list)
    difficulty: Difficulty = "beginner"
    exercise_type: Annotated[str, Field(max_length=20)] = "strength"
    gif_url: str | None = None

    @field_validator("muscle_groups", "secondary_muscles", "equipment")
    @classmethod
    def clean_tags(cls, v: list[str]) -> list[str]:
        return [t.strip().lower() for t in v if t.strip()]

class ExerciseRead(BaseModel):
    id: int
    name: str
    description: str | None = None
    muscle_groups: list[str] = []
    secondary_muscles: list[str] = []
    equipment: list[str] = []
    difficulty: str
    exercise_type: str
    gif_url: str | None = None

    model_config = {"from_attributes": True}

class ExerciseSummary(BaseModel):
    """What a workout carries about its catalog exercise."""
    id: int
    name: str
    muscle_groups: list[str] = []
    difficulty: str | None = None

    model_config = {"from_attributes": True}
