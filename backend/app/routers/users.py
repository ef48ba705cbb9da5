from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from app.db import get_db
from app.repositories.user_repo import UserRepository
from app.schemas.user import UserRead
from app.deps.auth import require_role, require_self_or_role

# accounts are created through /auth/register only
router = APIRouter(prefix="/users", tags=["users"])

@router.get("", response_model=list[UserRead], dependencies=[Depends(require_role("admin"))])
def list_users(
    db: Session = Depends(get_db),
    limit: int = Query(50, ge=1, le=200),
    offset: int = Query(0, ge=0),
):
    return UserRepository(db).list(limit=limit, offset=offset).items

@router.get("/{user_id}", response_model=UserRead, dependencies=[Depends(require_self_or_role("admin"))])
def get_user(user_id: int, db: Session = Depends(get_db)):
    user = UserRepository(db).get(user_id)
    if not user:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    return user
