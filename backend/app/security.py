"""Password hashing and bearer tokens for the API."""
from datetime import datetime, timedelta, timezone
from typing import Any, Optional

from passlib.context import CryptContext
from jose import jwt

from app.settings import get_settings

pwd_ctx = CryptContext(schemes=["bcrypt"], deprecated="auto")

def hash_password(plain: str) -> str:
    return pwd_ctx.hash(plain)

def verify_password(plain: str, hashed: str) -> bool:
    return pwd_ctx.verify(plain, hashed)

def create_access_token(user_id: int, *, expires_minutes: Optional[int] = None) -> str:
    """Signed token whose `sub` is the user id; a negative lifetime yields an expired token."""
    s = get_settings()
    if expires_minutes is None:
        expires_minutes = s.ACCESS_TOKEN_EXPIRE_MINUTES
    issued = datetime.now(timezone.utc)
    claims = {
        "sub": str(user_id),
        "iat": issued,
        "exp": issued + timedelta(minutes=expires_minutes),
    }
    return jwt.encode(claims, s.SECRET_KEY, algorithm=s.ALGORITHM)

def decode_token(token: str) -> dict[str, Any]:
    """Claims of a valid token. Raises jose's ExpiredSignatureError / JWTError otherwise."""
    s = get_settings()
    return jwt.decode(
        token,
        s.SECRET_KEY,
        algorithms=[s.ALGORITHM],
        options={"require_exp": True, "require_sub": True},
    )
