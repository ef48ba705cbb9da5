from typing import Literal

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from sqlalchemy.orm import Session

from app.db import get_db
from app.schemas.goal import GoalCreate, GoalRead, GoalUpdate
from app.repositories.exercise_repo import ExerciseRepository
from app.repositories.goal_repo import GoalRepository
from app.deps.auth import get_current_user
from app.models import GoalStatus, GoalType, User

router = APIRouter(prefix="/goals", tags=["goals"])

@router.get("", response_model=list[GoalRead])
def list_my_goals(
    db: Session = Depends(get_db),
    current: User = Depends(get_current_user),
    status_filter: Literal["active", "achieved", "abandoned", "all"] = Query("active", alias="status"),
    goal_type: GoalType | None = Query(None, alias="type"),
):
    wanted = None if status_filter == "all" else GoalStatus(status_filter)
    return GoalRepository(db).list_by_user(current.id, status=wanted, goal_type=goal_type)

@router.post("", response_model=GoalRead, status_code=status.HTTP_201_CREATED)
def create_goal(payload: GoalCreate, db: Session = Depends(get_db), current: User = Depends(get_current_user)):
    if payload.exercise_id is not None and ExerciseRepository(db).get(payload.exercise_id) is None:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Unknown exercise id")
    return GoalRepository(db).create(current.id, **payload.model_dump())

def _owned_goal(goal_id: int, db: Session, current: User):
    goal = GoalRepository(db).get_for_user(goal_id, current.id)
    if not goal:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Goal not found")
    return goal

@router.get("/{goal_id}", response_model=GoalRead)
def get_goal(goal_id: int, db: Session = Depends(get_db), current: User = Depends(get_current_user)):
    return _owned_goal(goal_id, db, current)

@router.patch("/{goal_id}", response_model=GoalRead)
def update_goal(
    goal_id: int,
    payload: GoalUpdate,
    db: Session = Depends(get_db),
    current: User = Depends(get_current_user),
):
    goal = _owned_goal(goal_id, db, current)
    return GoalRepository(db).update(goal, fields=payload.model_dump(exclude_unset=True))

@router.delete("/{goal_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_goal(goal_id: int, db: Session = Depends(get_db), current: User = Depends(get_current_user)):
    goal = _owned_goal(goal_id, db, current)
    GoalRepository(db).delete(goal)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
