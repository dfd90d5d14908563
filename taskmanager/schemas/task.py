from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel
from datetime import datetime
from typing import Optional

from ..models.task import TaskStatus


class TaskBase(BaseModel):
    """Fields a client may write when creating a task."""
    title: str
    description: Optional[str] = None
    status: TaskStatus = TaskStatus.PENDING

class TaskCreate(TaskBase):
    """Schema for creating new tasks."""
    pass

class TaskUpdate(BaseModel):
    """Schema for updating existing tasks. Only fields sent are applied."""
    title: Optional[str] = None
    description: Optional[str] = None
    status: Optional[TaskStatus] = None

class Task(TaskBase):
    """Complete task schema with all fields, serialized with camelCase keys."""
    model_config = ConfigDict(
        from_attributes=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    id: str
    created_at: datetime
    updated_at: datetime

class TaskDeleted(BaseModel):
    message: str = "Task deleted"

class FieldError(BaseModel):
    """One entry of a structured validation result."""
    field: str
    message: str
