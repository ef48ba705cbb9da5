import logging

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from sqlalchemy.orm import Session

from app.db import get_db
from app.schemas.workout import WorkoutCreate, WorkoutPage, WorkoutRead, WorkoutUpdate
from app.repositories.exercise_repo import ExerciseRepository
from app.repositories.workout_repo import WorkoutRepository
from app.services.personal_records import evaluate_workout
from app.deps.auth import get_current_user
from app.models import User  # type only

log = logging.getLogger(__name__)

router = APIRouter(prefix="/workouts", tags=["workouts"])

@router.post("", response_model=WorkoutRead, status_code=status.HTTP_201_CREATED)
def create_workout(payload: WorkoutCreate, db: Session = Depends(get_db), current: User = Depends(get_current_user)):
    missing = ExerciseRepository(db).missing_ids(ex.exercise_id for ex in payload.exercises)
    if missing:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Unknown exercise id(s): {sorted(missing)}",
        )

    repo = WorkoutRepository(db)
    workout = repo.create(current.id, payload)
    log.info("workout %s saved for user %s (%d exercises)", workout.id, current.id, len(payload.exercises))

    # Best effort: the workout is committed whatever happens in here
    evaluate_workout(db, workout)

    return WorkoutRead.model_validate(repo.get_for_user(workout.id, current.id))

@router.get("", response_model=WorkoutPage)
def list_my_workouts(
    db: Session = Depends(get_db),
    current: User = Depends(get_current_user),
    limit: int = Query(50, ge=1, le=200),
    offset: int = Query(0, ge=0),
):
    page = WorkoutRepository(db).list_by_user(current.id, limit=limit, offset=offset)
    return WorkoutPage(workouts=[WorkoutRead.model_validate(w) for w in page.items], total=page.total)

def _owned_workout(workout_id: int, db: Session, current: User):
    workout = WorkoutRepository(db).get_for_user(workout_id, current.id)
    if not workout:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Workout not found")
    return workout

@router.get("/{workout_id}", response_model=WorkoutRead)
def get_workout(workout_id: int, db: Session = Depends(get_db), current: User = Depends(get_current_user)):
    return _owned_workout(workout_id, db, current)

@router.patch("/{workout_id}", response_model=WorkoutRead)
def update_workout(
    workout_id: int,
    payload: WorkoutUpdate,
    db: Session = Depends(get_db),
    current: User = Depends(get_current_user),
):
    repo = WorkoutRepository(db)
    workout = _owned_workout(workout_id, db, current)
    repo.update(workout, fields=payload.model_dump(exclude_unset=True))
    return WorkoutRead.model_validate(repo.get_for_user(workout_id, current.id))

@router.delete("/{workout_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_workout(workout_id: int, db: Session = Depends(get_db), current: User = Depends(get_current_user)):
    workout = _owned_workout(workout_id, db, current)
    WorkoutRepository(db).delete(workout)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
