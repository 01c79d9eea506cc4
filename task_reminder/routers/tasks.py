import logging
from typing import List
from fastapi import APIRouter, BackgroundTasks, Depends
from fastapi.responses import PlainTextResponse
from sqlalchemy.orm import Session

from ..core.auth import CurrentUser, get_current_user
from ..core.database import get_db
from ..core.exceptions import AuthError
from ..core.notifications import Notifier, get_notifier
from ..schemas.task import TaskCreate, TaskUpdate, TaskResponse
from ..services.tasks import TaskStore, validate_task_fields
from ..services.users import UserStore

logger = logging.getLogger(__name__)

router = APIRouter(tags=["tasks"])


def get_task_store(db: Session = Depends(get_db)) -> TaskStore:
    return TaskStore(db)


@router.post("/tasks", response_model=TaskResponse)
def create_task(
    task_data: TaskCreate,
    background_tasks: BackgroundTasks,
    current_user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
    notifier: Notifier = Depends(get_notifier),
):
    """Create a task for the authenticated user and email a reminder"""
    validate_task_fields(task_data.title, task_data.deadline)

    user = UserStore(db).get(current_user.user_id)
    if not user:
        logger.warning(f"Token refers to unknown user {current_user.user_id}")
        raise AuthError("Invalid token")

    task = TaskStore(db).create(current_user.user_id, task_data.title, task_data.deadline)

    # Unsupervised: runs after the response is sent, errors are only logged
    background_tasks.add_task(notifier.send_reminder, user.email, task.title, task.deadline)
    return task


@router.get("/tasks", response_model=List[TaskResponse])
def get_tasks(
    current_user: CurrentUser = Depends(get_current_user),
    tasks: TaskStore = Depends(get_task_store),
):
    """Get all tasks of the authenticated user"""
    return tasks.list_by_owner(current_user.user_id)


@router.put("/tasks/{task_id}", response_model=TaskResponse)
def update_task(
    task_id: str,
    task_update: TaskUpdate,
    current_user: CurrentUser = Depends(get_current_user),
    tasks: TaskStore = Depends(get_task_store),
):
    """Update a task"""
    patch = task_update.model_dump(exclude_unset=True)
    return tasks.update(task_id, current_user.user_id, patch)


@router.delete("/tasks/{task_id}", response_class=PlainTextResponse)
def delete_task(
    task_id: str,
    current_user: CurrentUser = Depends(get_current_user),
    tasks: TaskStore = Depends(get_task_store),
):
    """Delete a task"""
    tasks.delete(task_id, current_user.user_id)
    return "Deleted successfully"
