import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from app.db import get_db
from app.models import User
from app.schemas.user import UserRegister, UserLogin, UserRead, TokenRead
from app.security import hash_password, verify_password, create_access_token
from app.deps.auth import get_current_user
from app.repositories.user_repo import UserRepository

log = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["auth"])

@router.post("/register", response_model=UserRead, status_code=status.HTTP_201_CREATED)
def register(payload: UserRegister, db: Session = Depends(get_db)):
    repo = UserRepository(db)
    # emails are unique case-insensitively; the DB index only sees exact matches
    if repo.get_by_email(payload.email):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="email already registered")
    try:
        return repo.create(email=payload.email, name=payload.name, password_hash=hash_password(payload.password))
    except ValueError as e:
        if str(e) == "email_already_exists":
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="email already registered")
        raise

@router.post("/login", response_model=TokenRead)
def login(payload: UserLogin, db: Session = Depends(get_db)):
    user = UserRepository(db).get_by_email(payload.email)
    if user is None or not verify_password(payload.password, user.password_hash):
        log.info("failed login for %s", payload.email)
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="invalid credentials")
    return TokenRead(access_token=create_access_token(user.id))

@router.get("/me", response_model=UserRead)
def me(current_user: User = Depends(get_current_user)):
    return current_user
