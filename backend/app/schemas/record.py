from datetime import datetime
from pydantic import BaseModel, Field

from app.models.personal_record import RecordType

class PersonalRecordRead(BaseModel):
    id: int
    exercise_id: int
    record_type: RecordType
    value: float
    # stored on the ORM row as `details`
    metadata: dict = Field(default_factory=dict, validation_alias="details")
    achieved_at: datetime

    model_config = {"from_attributes": True}
