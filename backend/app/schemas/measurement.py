from typing import Annotated
from datetime import datetime
from pydantic import BaseModel, Field, model_validator

from app.models.measurement import BODY_SITES
from app.schemas.workout import NotesStr, PosFloat

Percent = Annotated[float, Field(ge=0, le=100)]

class MeasurementFields(BaseModel):
    weight: PosFloat | None = None
    body_fat_percent: Percent | None = None
    chest: PosFloat | None = None
    waist: PosFloat | None = None
    hips: PosFloat | None = None
    biceps: PosFloat | None = None
    thighs: PosFloat | None = None
    calves: PosFloat | None = None
    shoulders: PosFloat | None = None
    neck: PosFloat | None = None
    notes: NotesStr | None = None

class MeasurementCreate(MeasurementFields):
    date: datetime

    @model_validator(mode="after")
    def has_a_value(self) -> "MeasurementCreate":
        values = [self.weight, self.body_fat_percent, *(getattr(self, s) for s in BODY_SITES)]
        if all(v is None for v in values):
            raise ValueError("at least one measurement is required")
        return self

class MeasurementUpdate(MeasurementFields):
    date: datetime | None = None

class MeasurementRead(MeasurementFields):
    id: int
    user_id: int
    date: datetime
    created_at: datetime | None = None

    model_config = {"from_attributes": True}
