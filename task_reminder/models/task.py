from sqlalchemy import Boolean, Column, String, DateTime
from sqlalchemy.sql import func
from ..core.database import Base
from .user import new_id


class Task(Base):
    """Task model for database"""
    __tablename__ = "tasks"

    id = Column(String(32), primary_key=True, default=new_id)

    # Owner reference, not a foreign key
    user_id = Column(String(32), nullable=False, index=True)

    title = Column(String, nullable=False)
    # Kept exactly as submitted
    deadline = Column(String, nullable=False)
    completed = Column(Boolean, default=False, nullable=False)

    created_at = Column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False
    )
    updated_at = Column(
        DateTime(timezone=True),
        onupdate=func.now(),
        nullable=True
    )

    def __repr__(self):
        return f"<Task(id={self.id}, title='{self.title}', completed={self.completed})>"
