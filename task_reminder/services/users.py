import logging
from typing import Optional
from sqlalchemy.orm import Session

from ..core.exceptions import ConflictError, InvalidCredentialsError, ValidationError
from ..models.user import User
from ..utils.security import get_password_hash, verify_password

logger = logging.getLogger(__name__)


class UserStore:
    """Credential store: registration, login and user lookup"""

    def __init__(self, db: Session):
        self.db = db

    def register(self, name: Optional[str], email: Optional[str], password: Optional[str]) -> None:
        if not name or not email or not password:
            raise ValidationError("All fields required")

        existing = self.db.query(User).filter(User.email == email).first()
        if existing:
            raise ConflictError("Email already exists")

        user = User(name=name, email=email, hashed_password=get_password_hash(password))
        self.db.add(user)
        self.db.commit()
        logger.info(f"Registered user {user.id}")

    def login(self, email: Optional[str], password: Optional[str]) -> str:
        """Return the user id for valid credentials"""
        user = None
        if email and password:
            user = self.db.query(User).filter(User.email == email).first()
        if not user or not verify_password(password, user.hashed_password):
            logger.info("Login rejected")
            raise InvalidCredentialsError("Invalid credentials")
        return user.id

    def get(self, user_id: str) -> Optional[User]:
        return self.db.query(User).filter(User.id == user_id).first()
