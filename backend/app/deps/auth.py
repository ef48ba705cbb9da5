from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.orm import Session
from jose.exceptions import ExpiredSignatureError, JWTError

from app.db import get_db
from app.models import User
from app.security import decode_token

# Bearer scheme for Swagger's Authorize button; /auth/login issues the token
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/auth/login")

def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )

def get_current_user(
    db: Session = Depends(get_db),
    token: str = Depends(oauth2_scheme),
) -> User:
    try:
        claims = decode_token(token)
    except ExpiredSignatureError:
        raise _unauthorized("Token expired")
    except JWTError:
        raise _unauthorized("Not authenticated")

    try:
        user = db.get(User, int(claims["sub"]))
    except (KeyError, ValueError):
        user = None
    if user is None:
        raise _unauthorized("Not authenticated")
    return user

def require_role(*allowed_roles: str):
    """Usage: dependencies=[Depends(require_role("admin"))]"""
    def dependency(current_user: User = Depends(get_current_user)) -> User:
        if current_user.role not in allowed_roles:
            raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Insufficient role")
        return current_user
    return dependency

def require_self_or_role(*allowed_roles: str):
    """Guard for `/{user_id}` routes: the user themselves, or one of `allowed_roles`."""
    def dependency(user_id: int, current_user: User = Depends(get_current_user)) -> User:
        if current_user.id != user_id and current_user.role not in allowed_roles:
            raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Not allowed")
        return current_user
    return dependency
