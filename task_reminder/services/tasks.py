import logging
from typing import Any, Dict, List, Optional
from sqlalchemy import and_
from sqlalchemy.orm import Session

from ..core.exceptions import NotFoundError, ValidationError
from ..models.task import Task
from ..utils.dates import is_past, parse_deadline

logger = logging.getLogger(__name__)

# Fields a caller may change through update()
PATCHABLE_FIELDS = ("title", "deadline", "completed")


def validate_task_fields(title: Optional[str], deadline: Optional[str]) -> None:
    """Title and deadline are required and the deadline may not be in the past"""
    if not title or not deadline:
        raise ValidationError("Title and deadline required")
    if is_past(parse_deadline(deadline)):
        raise ValidationError("Deadline cannot be in the past")


class TaskStore:
    """Task persistence. Every lookup is scoped to the owning user."""

    def __init__(self, db: Session):
        self.db = db

    def _get_owned(self, task_id: str, owner_id: str) -> Optional[Task]:
        return self.db.query(Task).filter(
            and_(Task.id == task_id, Task.user_id == owner_id)
        ).first()

    def create(self, owner_id: str, title: Optional[str], deadline: Optional[str]) -> Task:
        validate_task_fields(title, deadline)

        task = Task(user_id=owner_id, title=title, deadline=deadline, completed=False)
        self.db.add(task)
        self.db.commit()
        self.db.refresh(task)
        logger.info(f"Created task {task.id} for user {owner_id}")
        return task

    def list_by_owner(self, owner_id: str) -> List[Task]:
        return self.db.query(Task).filter(Task.user_id == owner_id).all()

    def update(self, task_id: str, owner_id: str, patch: Dict[str, Any]) -> Task:
        """
        Merge ``patch`` into the owner's task.

        Title and deadline must be present even when only ``completed``
        changes. Keys outside PATCHABLE_FIELDS are dropped.
        """
        validate_task_fields(patch.get("title"), patch.get("deadline"))

        task = self._get_owned(task_id, owner_id)
        if not task:
            raise NotFoundError("Task not found")

        for field, value in patch.items():
            if field in PATCHABLE_FIELDS and value is not None:
                setattr(task, field, value)

        self.db.commit()
        self.db.refresh(task)
        logger.info(f"Updated task {task.id}")
        return task

    def delete(self, task_id: str, owner_id: str) -> None:
        task = self._get_owned(task_id, owner_id)
        if not task:
            raise NotFoundError("Task not found")

        self.db.delete(task)
        self.db.commit()
        logger.info(f"Deleted task {task_id}")
