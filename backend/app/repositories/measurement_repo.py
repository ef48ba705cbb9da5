from __future__ import annotations
from datetime import datetime
from typing import Optional

from sqlalchemy import select

from app.models import BodyMeasurement
from app.repositories.base import BaseRepository

class MeasurementRepository(BaseRepository[BodyMeasurement]):
    model = BodyMeasurement

    def get_for_user(self, measurement_id: int, user_id: int) -> Optional[BodyMeasurement]:
        stmt = select(BodyMeasurement).where(
            BodyMeasurement.id == measurement_id, BodyMeasurement.user_id == user_id
        )
        return self.db.execute(stmt).scalar_one_or_none()

    def list_by_user(
        self,
        user_id: int,
        *,
        start_date: datetime | None = None,
        end_date: datetime | None = None,
        limit: int = 100,
    ) -> list[BodyMeasurement]:
        stmt = select(BodyMeasurement).where(BodyMeasurement.user_id == user_id)
        if start_date is not None:
            stmt = stmt.where(BodyMeasurement.date >= start_date)
        if end_date is not None:
            stmt = stmt.where(BodyMeasurement.date <= end_date)
        stmt = stmt.order_by(BodyMeasurement.date.desc(), BodyMeasurement.id.desc()).limit(limit)
        return list(self.db.execute(stmt).scalars().all())

    def create(self, user_id: int, **fields) -> BodyMeasurement:
        row = BodyMeasurement(user_id=user_id, **fields)
        self.db.add(row)
        self.db.commit()
        self.db.refresh(row)
        return row

    def update(self, row: BodyMeasurement, *, fields: dict) -> BodyMeasurement:
        for name, value in fields.items():
            # date is required; an explicit null leaves it as is
            if name == "date" and value is None:
                continue
            setattr(row, name, value)
        self.db.commit()
        self.db.refresh(row)
        return row

    def delete(self, row: BodyMeasurement) -> None:
        self.db.delete(row)
        self.db.commit()
