from typing import List, Optional
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from ..core.exceptions import DuplicateEmail
from ..core.security import UserRole
from ..models.user import User

class UserStore:
    """Credential store. The unique index on users.email is the source of truth."""

    def __init__(self, db: Session):
        self.db = db

    def get(self, user_id: int) -> Optional[User]:
        return self.db.query(User).filter(User.id == user_id).first()

    def find_by_email(self, email: str) -> Optional[User]:
        return self.db.query(User).filter(User.email == email).first()

    def list_by_role(self, role: UserRole) -> List[User]:
        return self.db.query(User).filter(User.role == role).order_by(User.email).all()

    def create(self, email: str, password_hash: str, role: UserRole) -> User:
        user = User(email=email, password_hash=password_hash, role=role)
        self.db.add(user)
        try:
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            raise DuplicateEmail()
        self.db.refresh(user)
        return user
