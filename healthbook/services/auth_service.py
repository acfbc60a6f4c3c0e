from sqlalchemy.orm import Session
from typing import List, Optional
import logging

from ..core.config import Settings
from ..core.exceptions import (
    AlreadyExists, UserNotFound, InvalidCredentials, RoleMismatch
)
from ..core.security import (
    build_password_context, issue_token,
    TokenClaims, TokenIssuer, UserRole
)
from ..crud.user import UserStore
from ..models.user import User
from ..schemas.auth import TokenResponse

logger = logging.getLogger(__name__)

class AuthService:
    def __init__(self, db: Session, config: Settings):
        self.users = UserStore(db)
        self.config = config
        self.issuer = TokenIssuer(config)
        self.pwd_context = build_password_context(config.BCRYPT_ROUNDS)

    def register(self, email: str, password: str, role: UserRole) -> User:
        """Register a new user. No session is established."""
        # Friendly pre-check; the store's unique index still guards races
        if self.users.find_by_email(email):
            raise AlreadyExists()

        user = self.users.create(email, self.pwd_context.hash(password), role)
        logger.info(f"Registered {user.role.value} account {user.email}")
        return user

    def login(self, email: str, password: str, role: Optional[UserRole] = None) -> TokenResponse:
        """Authenticate user and return a bearer token."""
        user = self.users.find_by_email(email)
        if not user:
            logger.warning(f"Login attempt for unknown account {email}")
            raise UserNotFound()

        if not self.pwd_context.verify(password, user.password_hash):
            logger.warning(f"Invalid password for {email}")
            raise InvalidCredentials()

        # The token always carries the stored role
        if role is not None and role != user.role and self.config.ENFORCE_LOGIN_ROLE:
            logger.warning(f"Login for {email} requested role {role.value}, account is {user.role.value}")
            raise RoleMismatch()

        token = issue_token(self.issuer, user.id, user.email, user.role)
        logger.info(f"Issued token for {user.email}")

        return TokenResponse(token=token, email=user.email, role=user.role)

    def get_profile(self, identity: TokenClaims) -> User:
        user = self.users.get(identity.user_id)
        if not user:
            raise UserNotFound()
        return user

    def list_doctors(self) -> List[User]:
        return self.users.list_by_role(UserRole.DOCTOR)
