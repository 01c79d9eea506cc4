import uuid
from sqlalchemy import Column, String, DateTime
from sqlalchemy.sql import func
from ..core.database import Base


def new_id() -> str:
    return uuid.uuid4().hex


class User(Base):
    __tablename__ = "users"
    id = Column(String(32), primary_key=True, default=new_id)
    name = Column(String, nullable=False)
    # Uniqueness is checked at registration only
    email = Column(String, index=True, nullable=False)
    hashed_password = Column(String, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    def __repr__(self):
        return f"<User(id={self.id}, email='{self.email}')>"
