from datetime import datetime

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from sqlalchemy.orm import Session

from app.db import get_db
from app.schemas.measurement import MeasurementCreate, MeasurementRead, MeasurementUpdate
from app.repositories.measurement_repo import MeasurementRepository
from app.deps.auth import get_current_user
from app.models import User  # type only

router = APIRouter(prefix="/measurements", tags=["measurements"])

@router.get("", response_model=list[MeasurementRead])
def list_my_measurements(
    db: Session = Depends(get_db),
    current: User = Depends(get_current_user),
    start_date: datetime | None = None,
    end_date: datetime | None = None,
    limit: int = Query(100, ge=1, le=500),
):
    return MeasurementRepository(db).list_by_user(
        current.id, start_date=start_date, end_date=end_date, limit=limit
    )

@router.post("", response_model=MeasurementRead, status_code=status.HTTP_201_CREATED)
def create_measurement(
    payload: MeasurementCreate,
    db: Session = Depends(get_db),
    current: User = Depends(get_current_user),
):
    return MeasurementRepository(db).create(current.id, **payload.model_dump())

def _owned_measurement(measurement_id: int, db: Session, current: User):
    row = MeasurementRepository(db).get_for_user(measurement_id, current.id)
    if not row:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Measurement not found")
    return row

@router.get("/{measurement_id}", response_model=MeasurementRead)
def get_measurement(measurement_id: int, db: Session = Depends(get_db), current: User = Depends(get_current_user)):
    return _owned_measurement(measurement_id, db, current)

@router.patch("/{measurement_id}", response_model=MeasurementRead)
def update_measurement(
    measurement_id: int,
    payload: MeasurementUpdate,
    db: Session = Depends(get_db),
    current: User = Depends(get_current_user),
):
    row = _owned_measurement(measurement_id, db, current)
    return MeasurementRepository(db).update(row, fields=payload.model_dump(exclude_unset=True))

@router.delete("/{measurement_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_measurement(measurement_id: int, db: Session = Depends(get_db), current: User = Depends(get_current_user)):
    row = _owned_measurement(measurement_id, db, current)
    MeasurementRepository(db).delete(row)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
