from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session
from app.db import get_db
from app.schemas.exercise import ExerciseCreate, ExerciseRead
from app.repositories.exercise_repo import ExerciseRepository
from app.deps.auth import require_role

router = APIRouter(prefix="/exercises", tags=["exercises"])

@router.get("", response_model=list[ExerciseRead])
def list_exercises(
    db: Session = Depends(get_db),
    search: str | None = Query(None, max_length=120),
    muscle_group: str | None = None,
    difficulty: str | None = None,
    exercise_type: str | None = Query(None, alias="type"),
):
    return ExerciseRepository(db).search(
        search=search,
        muscle_group=muscle_group,
        difficulty=difficulty,
        exercise_type=exercise_type,
    )

@router.get("/{exercise_id}", response_model=ExerciseRead)
def get_exercise(exercise_id: int, db: Session = Depends(get_db)):
    ex = ExerciseRepository(db).get(exercise_id)
    if not ex:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Exercise not found")
    return ex

@router.post("", response_model=ExerciseRead, status_code=status.HTTP_201_CREATED,
             dependencies=[Depends(require_role("admin"))])
def create_exercise(payload: ExerciseCreate, db: Session = Depends(get_db)):
    try:
        return ExerciseRepository(db).create(**payload.model_dump())
    except ValueError as e:
        if str(e) == "exercise_already_exists":
            raise HTTPException(status_code=400, detail="exercise already exists")
        raise
