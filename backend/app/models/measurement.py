from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy import Integer, Float, ForeignKey, Text, DateTime, func
from app.db import Base

# circumference columns, all in the user's length unit
BODY_SITES = ("chest", "waist", "hips", "biceps", "thighs", "calves", "shoulders", "neck")

class BodyMeasurement(Base):
    __tablename__ = "body_measurements"
    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    user_id: Mapped[int] = mapped_column(ForeignKey("users.id", ondelete="CASCADE"), index=True)
    date: Mapped[DateTime] = mapped_column(DateTime(timezone=True), nullable=False, index=True)
    weight: Mapped[float | None] = mapped_column(Float, nullable=True)
    body_fat_percent: Mapped[float | None] = mapped_column(Float, nullable=True)
    chest: Mapped[float | None] = mapped_column(Float, nullable=True)
    waist: Mapped[float | None] = mapped_column(Float, nullable=True)
    hips: Mapped[float | None] = mapped_column(Float, nullable=True)
    biceps: Mapped[float | None] = mapped_column(Float, nullable=True)
    thighs: Mapped[float | None] = mapped_column(Float, nullable=True)
    calves: Mapped[float | None] = mapped_column(Float, nullable=True)
    shoulders: Mapped[float | None] = mapped_column(Float, nullable=True)
    neck: Mapped[float | None] = mapped_column(Float, nullable=True)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_at: Mapped[DateTime] = mapped_column(DateTime(timezone=True), server_default=func.now())

    user = relationship("User", back_populates="measurements")
