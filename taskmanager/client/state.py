"""Client-side view state and the pure derivation of the visible task list.

The whole client view is one immutable ``ClientState``. Every transition
builds a new state and recomputes ``visible_tasks`` with ``derive_visible``,
so the visible list is always a function of ``all_tasks``, ``status_filter``
and ``search_text`` alone.
"""

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import List, Optional, Sequence

from ..models.task import TaskStatus
from ..schemas.task import Task


class StatusFilter(str, Enum):
    ALL = "all"
    PENDING = "pending"
    IN_PROGRESS = "in-progress"
    COMPLETED = "completed"

    @property
    def task_status(self) -> Optional[TaskStatus]:
        """The task status this filter keeps, or None for ``all``."""
        return _FILTER_TO_STATUS.get(self)


_FILTER_TO_STATUS = {
    StatusFilter.PENDING: TaskStatus.PENDING,
    StatusFilter.IN_PROGRESS: TaskStatus.IN_PROGRESS,
    StatusFilter.COMPLETED: TaskStatus.COMPLETED,
}


@dataclass(frozen=True)
class ClientState:
    all_tasks: List[Task] = field(default_factory=list)
    visible_tasks: List[Task] = field(default_factory=list)
    editing_task: Optional[Task] = None
    is_loading: bool = False
    error_message: str = ""
    status_filter: StatusFilter = StatusFilter.ALL
    search_text: str = ""


def _matches_search(task: Task, needle: str) -> bool:
    return needle in task.title.lower() or needle in (task.description or "").lower()


def derive_visible(state: ClientState) -> List[Task]:
    """Filter ``state.all_tasks`` by status, then by search text.

    Never reorders or copies tasks; the result holds the same objects.
    """
    result = list(state.all_tasks)

    wanted = state.status_filter.task_status
    if wanted is not None:
        result = [task for task in result if task.status == wanted]

    if state.search_text.strip():
        needle = state.search_text.lower()
        result = [task for task in result if _matches_search(task, needle)]

    return result


def transition(state: ClientState, **changes) -> ClientState:
    """Apply changes and re-derive the visible list."""
    updated = replace(state, **changes)
    return replace(updated, visible_tasks=derive_visible(updated))


def count_by_status(tasks: Sequence[Task], status: TaskStatus) -> int:
    return sum(1 for task in tasks if task.status == status)
