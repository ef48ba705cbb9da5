from enum import Enum
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy import Integer, Float, ForeignKey, DateTime, JSON, Enum as SAEnum, func
from app.db import Base

class RecordType(str, Enum):
    max_weight = "max_weight"
    max_reps = "max_reps"

class PersonalRecord(Base):
    """Append-only PR history; the current PR is the row with the highest value."""
    __tablename__ = "personal_records"
    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    user_id: Mapped[int] = mapped_column(ForeignKey("users.id", ondelete="CASCADE"), index=True)
    exercise_id: Mapped[int] = mapped_column(ForeignKey("exercises.id"), index=True)
    record_type: Mapped[RecordType] = mapped_column(SAEnum(RecordType, name="record_type"), nullable=False)
    value: Mapped[float] = mapped_column(Float, nullable=False)
    # "metadata" is reserved on declarative classes, hence the attribute name
    details: Mapped[dict] = mapped_column("metadata", JSON, nullable=False, default=dict)
    achieved_at: Mapped[DateTime] = mapped_column(DateTime(timezone=True), server_default=func.now())

    user = relationship("User", back_populates="personal_records")
    exercise = relationship("Exercise")
