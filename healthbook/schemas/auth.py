from typing import Optional
from pydantic import BaseModel, EmailStr, Field

from ..core.security import UserRole

class UserRegister(BaseModel):
    email: EmailStr
    password: str = Field(..., min_length=6, max_length=72)
    role: UserRole

class UserLogin(BaseModel):
    email: EmailStr
    password: str = Field(..., min_length=1)
    # Optional; checked against the stored role when ENFORCE_LOGIN_ROLE is on
    role: Optional[UserRole] = None

class TokenResponse(BaseModel):
    token: str
    email: str
    role: UserRole

class UserResponse(BaseModel):
    id: int
    email: str
    role: UserRole

    class Config:
        from_attributes = True

class MessageResponse(BaseModel):
    message: str
