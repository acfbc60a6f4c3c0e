from datetime import datetime, timedelta, timezone
from typing import Optional
from jose import JWTError, jwt
from passlib.context import CryptContext
from fastapi.security import HTTPBearer
from pydantic import BaseModel, Field, ValidationError as PydanticValidationError
from enum import Enum
from functools import lru_cache
import logging

from .config import Settings
from .exceptions import InvalidToken

logger = logging.getLogger(__name__)

# Bearer scheme; missing/malformed headers are handled by the access gate
security = HTTPBearer(auto_error=False)

class UserRole(str, Enum):
    PATIENT = "patient"
    DOCTOR = "doctor"

class TokenClaims(BaseModel):
    """Identity carried by a bearer token."""
    # Stringified user id
    sub: str = Field(..., pattern=r"^\d+$")
    email: str
    role: UserRole
    exp: Optional[int] = None

    @property
    def user_id(self) -> int:
        return int(self.sub)

    @property
    def is_doctor(self) -> bool:
        return self.role == UserRole.DOCTOR

    @property
    def is_patient(self) -> bool:
        return self.role == UserRole.PATIENT

# Password hashing
@lru_cache(maxsize=None)
def build_password_context(rounds: int) -> CryptContext:
    """bcrypt context at the given work factor; cached per rounds value."""
    return CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=rounds)

# JWT
class TokenIssuer:
    """Signs and verifies bearer tokens with the configured secret."""

    def __init__(self, config: Settings):
        self.secret_key = config.SECRET_KEY
        self.algorithm = config.ALGORITHM
        self.expire_minutes = config.ACCESS_TOKEN_EXPIRE_MINUTES

    def sign(self, claims: TokenClaims) -> str:
        to_encode = claims.model_dump(mode="json", exclude={"exp"})

        if self.expire_minutes is not None:
            expire = datetime.now(timezone.utc) + timedelta(minutes=self.expire_minutes)
            to_encode["exp"] = expire

        return jwt.encode(to_encode, self.secret_key, algorithm=self.algorithm)

    def verify(self, token: str) -> TokenClaims:
        try:
            payload = jwt.decode(token, self.secret_key, algorithms=[self.algorithm])
            return TokenClaims(**payload)
        except (JWTError, PydanticValidationError) as e:
            logger.warning(f"Rejected bearer token: {e.__class__.__name__}")
            raise InvalidToken()

def issue_token(issuer: TokenIssuer, user_id: int, email: str, role: UserRole) -> str:
    """Sign a token for a stored user record."""
    return issuer.sign(TokenClaims(sub=str(user_id), email=email, role=role))
