"""
Pydantic schemas for tasks.
"""
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field


class TaskCreate(BaseModel):
    """Schema for creating a task"""
    title: Optional[str] = Field(None, description="Task title")
    deadline: Optional[str] = Field(None, description="Due date, e.g. 2099-01-01")


class TaskUpdate(BaseModel):
    """
    Schema for updating a task.

    Only these fields can be patched; anything else in the body
    (``user_id``, ``id``...) is ignored.
    """
    title: Optional[str] = Field(None, description="Task title")
    deadline: Optional[str] = Field(None, description="Due date, e.g. 2099-01-01")
    completed: Optional[bool] = Field(None, description="Completion flag")


class TaskResponse(BaseModel):
    """Schema for task response"""
    model_config = ConfigDict(from_attributes=True)

    id: str = Field(..., description="Task ID")
    user_id: str = Field(..., description="User ID who owns the task")
    title: str = Field(..., description="Task title")
    deadline: str = Field(..., description="Due date as submitted")
    completed: bool = Field(..., description="Completion flag")
