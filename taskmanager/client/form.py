from dataclasses import dataclass
from typing import Any, Dict, Optional

from ..models.task import TaskStatus
from ..schemas.task import Task


class FormValidationError(Exception):
    """The form cannot be submitted; the message is meant for the user."""


@dataclass
class TaskForm:
    """Edit buffer behind the add/edit form."""

    title: str = ""
    description: str = ""
    status: TaskStatus = TaskStatus.PENDING

    def populate(self, task: Optional[Task]) -> None:
        """Copy a selected task's fields into the buffer. None leaves it as is."""
        if task is None:
            return
        self.title = task.title
        self.description = task.description or ""
        self.status = task.status

    def reset(self) -> None:
        self.title = ""
        self.description = ""
        self.status = TaskStatus.PENDING

    def validate(self) -> None:
        if not self.title.strip():
            raise FormValidationError("Title is required!")
        if not self.description.strip():
            raise FormValidationError("Description is required!")

    def payload(self) -> Dict[str, Any]:
        """Trimmed request body for create or update."""
        return {
            "title": self.title.strip(),
            "description": self.description.strip(),
            "status": TaskStatus(self.status).value,
        }
