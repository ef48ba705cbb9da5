from typing import Annotated, Literal
from pydantic import BaseModel, EmailStr, Field, StringConstraints, field_validator
from datetime import datetime

from app.models.user import UserRole

NameStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=120)]

class UserBase(BaseModel):
    email: EmailStr = Field(max_length=255)
    name: NameStr

class UserRegister(UserBase):
    # checked by hand: pydantic's regex engine has no look-arounds
    password: Annotated[str, Field(min_length=12, max_length=128)]

    @field_validator("password")
    @classmethod
    def password_policy(cls, v: str) -> str:
        checks = (
            (str.islower, "a lowercase letter"),
            (str.isupper, "an uppercase letter"),
            (str.isdigit, "a digit"),
            (lambda c: not c.isalnum(), "a special character"),
        )
        for test, label in checks:
            if not any(test(c) for c in v):
                raise ValueError(f"password must include {label}")
        return v

class UserLogin(BaseModel):
    email: EmailStr
    password: Annotated[str, Field(min_length=1, max_length=256)]

class TokenRead(BaseModel):
    access_token: str
    token_type: Literal["bearer"] = "bearer"

class UserRead(UserBase):
    id: int
    role: UserRole
    created_at: datetime
    model_config = {"from_attributes": True}
