from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy import Integer, String, Text, JSON

from app.db import Base

class Exercise(Base):
    """Read-only catalog entry; workouts and records point at it by id."""
    __tablename__ = "exercises"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String(120), unique=True, index=True, nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    muscle_groups: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)
    secondary_muscles: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)
    equipment: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)
    difficulty: Mapped[str] = mapped_column(String(20), nullable=False, default="beginner")
    exercise_type: Mapped[str] = mapped_column(String(20), nullable=False, default="strength")
    gif_url: Mapped[str | None] = mapped_column(String(500), nullable=True)
