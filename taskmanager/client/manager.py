import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional, Union

from ..models.task import TaskStatus
from ..schemas.task import Task
from .api import TaskApiClient, TaskApiError, TaskNotFoundError
from .form import TaskForm
from .state import ClientState, StatusFilter, count_by_status, transition

logger = logging.getLogger(__name__)


@dataclass
class MutationResult:
    """Outcome of a create/update/delete.

    ``needs_refresh`` tells the caller to reload the collection; mutations
    never refetch on their own.
    """

    ok: bool
    task: Optional[Task] = None
    error: str = ""
    needs_refresh: bool = False


class TaskManager:
    """Owns the client state, the edit form and the API client.

    Every change goes through ``_set`` so ``visible_tasks`` is re-derived
    after each transition.
    """

    def __init__(self, api: TaskApiClient, form: Optional[TaskForm] = None):
        self.api = api
        self.form = form or TaskForm()
        self.state = ClientState()

    def _set(self, **changes: Any) -> ClientState:
        self.state = transition(self.state, **changes)
        return self.state

    def load(self) -> bool:
        """Initial fetch when the view opens."""
        return self.refresh()

    def refresh(self) -> bool:
        """Replace ``all_tasks`` with a fresh copy from the API."""
        self._set(is_loading=True, error_message="")
        try:
            tasks = self.api.list_tasks()
        except TaskApiError as exc:
            self._set(error_message=exc.message)
            return False
        else:
            self._set(all_tasks=tasks)
            return True
        finally:
            self._set(is_loading=False)

    def _mutate(
        self,
        call: Callable[[], Optional[Task]],
        on_success: Optional[Dict[str, Any]] = None,
    ) -> MutationResult:
        """Run one API mutation under the loading/error protocol.

        on_success holds extra state changes applied only when the call succeeds.
        """
        self._set(is_loading=True, error_message="")
        try:
            task = call()
        except TaskNotFoundError as exc:
            # The selection points at a task that no longer exists; drop it
            # and let the caller reload so the stale copy disappears.
            logger.info("Task vanished while being edited: %s", exc.message)
            self._set(editing_task=None, error_message=exc.message)
            return MutationResult(ok=False, error=exc.message, needs_refresh=True)
        except TaskApiError as exc:
            self._set(error_message=exc.message)
            return MutationResult(ok=False, error=exc.message)
        else:
            if on_success:
                self._set(**on_success)
            return MutationResult(ok=True, task=task, needs_refresh=True)
        finally:
            self._set(is_loading=False)

    def report_error(self, message: str) -> None:
        """Show message on the error line until the next action clears it."""
        self._set(error_message=message)

    def create_task(self, payload: Dict[str, Any]) -> MutationResult:
        return self._mutate(lambda: self.api.create_task(payload))

    def update_task(self, task_id: str, payload: Dict[str, Any]) -> MutationResult:
        return self._mutate(
            lambda: self.api.update_task(task_id, payload),
            on_success={"editing_task": None},
        )

    def delete_task(self, task_id: str) -> MutationResult:
        return self._mutate(lambda: self.api.delete_task(task_id))

    def select_for_edit(self, task: Task) -> None:
        self._set(editing_task=task)
        self.form.populate(task)

    def cancel_edit(self) -> None:
        self._set(editing_task=None)
        self.form.reset()

    def submit_form(self) -> MutationResult:
        """Validate the form and send it as a create or an update.

        Raises FormValidationError before any request when a field is blank.
        """
        self.form.validate()
        payload = self.form.payload()

        editing = self.state.editing_task
        if editing is not None:
            result = self.update_task(editing.id, payload)
        else:
            result = self.create_task(payload)

        self.form.reset()
        return result

    def set_status_filter(self, value: Union[StatusFilter, str]) -> None:
        self._set(status_filter=StatusFilter(value))

    def set_search_text(self, text: str) -> None:
        self._set(search_text=text)

    def count(self, status: Optional[TaskStatus] = None) -> int:
        """Tasks in the last snapshot, optionally only those with status."""
        if status is None:
            return len(self.state.all_tasks)
        return count_by_status(self.state.all_tasks, status)
