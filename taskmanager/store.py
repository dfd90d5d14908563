import logging
from typing import Any, Dict, List, Optional

from sqlmodel import Session, select

from .models import Task
from .models.task import utcnow
from .schemas.task import FieldError, TaskCreate, TaskUpdate

logger = logging.getLogger(__name__)

# Fields that may be omitted from an update but never sent as null
_NON_NULLABLE = ("title", "status")


class TaskValidationError(Exception):
    """Raised when task fields fail validation at the store boundary."""

    def __init__(self, errors: List[FieldError]):
        self.errors = errors
        super().__init__("; ".join(f"{e.field}: {e.message}" for e in errors))


def validate_task_fields(fields: Dict[str, Any], partial: bool = False) -> List[FieldError]:
    """Check task fields and return every problem found.

    With partial=True (updates) absent fields are fine, but fields that are
    present must still be valid.
    """
    errors: List[FieldError] = []

    if "title" not in fields:
        if not partial:
            errors.append(FieldError(field="title", message="Field required"))
    elif fields["title"] is not None and not fields["title"].strip():
        errors.append(FieldError(field="title", message="must not be blank"))

    for name in _NON_NULLABLE:
        if name in fields and fields[name] is None:
            errors.append(FieldError(field=name, message="must not be null"))

    return errors


def _raise_for_errors(errors: List[FieldError]) -> None:
    if errors:
        logger.info("Rejected task fields: %s", errors)
        raise TaskValidationError(errors)


def create_task(session: Session, data: TaskCreate) -> Task:
    """Insert a new task; id and timestamps are assigned here."""
    fields = data.model_dump()
    _raise_for_errors(validate_task_fields(fields))

    task = Task(**fields)
    session.add(task)
    session.commit()
    session.refresh(task)
    logger.info("Created task %s", task.id)
    return task


def list_tasks(session: Session) -> List[Task]:
    """Return every task in store order."""
    tasks = session.exec(select(Task)).all()
    logger.debug("Listed %d tasks", len(tasks))
    return list(tasks)


def get_task(session: Session, task_id: str) -> Optional[Task]:
    return session.get(Task, task_id)


def update_task(session: Session, task_id: str, data: TaskUpdate) -> Optional[Task]:
    """Apply the fields present in data to the task with task_id.

    Returns None when no task has that id.
    """
    fields = data.model_dump(exclude_unset=True)
    _raise_for_errors(validate_task_fields(fields, partial=True))

    task = session.get(Task, task_id)
    if task is None:
        logger.info("Update skipped, task %s not found", task_id)
        return None

    for field, value in fields.items():
        setattr(task, field, value)
    task.updated_at = utcnow()

    session.add(task)
    session.commit()
    session.refresh(task)
    logger.info("Updated task %s (%s)", task.id, ", ".join(sorted(fields)) or "no fields")
    return task


def delete_task(session: Session, task_id: str) -> bool:
    """Delete the task with task_id. Returns False if there was nothing to delete."""
    task = session.get(Task, task_id)
    if task is None:
        logger.info("Delete skipped, task %s not found", task_id)
        return False

    session.delete(task)
    session.commit()
    logger.info("Deleted task %s", task_id)
    return True
