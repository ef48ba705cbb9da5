from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from app.db import get_db
from app.schemas.record import PersonalRecordRead
from app.repositories.record_repo import RecordRepository
from app.deps.auth import get_current_user
from app.models import User

router = APIRouter(prefix="/records", tags=["records"])

@router.get("", response_model=list[PersonalRecordRead])
def list_my_records(
    exercise_id: int | None = None,
    db: Session = Depends(get_db),
    current: User = Depends(get_current_user),
):
    return RecordRepository(db).list_by_user(current.id, exercise_id=exercise_id)

@router.get("/best", response_model=list[PersonalRecordRead])
def my_best_records(db: Session = Depends(get_db), current: User = Depends(get_current_user)):
    return RecordRepository(db).best_by_user(current.id)
