import logging
from typing import Any, Dict, List, Optional

import httpx

from ..config import TASKS_API_TIMEOUT, get_api_url
from ..schemas.task import Task

logger = logging.getLogger(__name__)


class TaskApiError(Exception):
    """A call to the task API failed, either in transport or with a non-2xx status."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class TaskNotFoundError(TaskApiError):
    """The API has no task with the requested id."""


def _describe(response: httpx.Response) -> str:
    try:
        detail = response.json().get("detail")
    except (ValueError, AttributeError):
        return ""
    if isinstance(detail, list):
        return "; ".join(f"{item.get('field')}: {item.get('message')}" for item in detail if isinstance(item, dict))
    return str(detail) if detail else ""


class TaskApiClient:
    """Thin synchronous client for the /api/tasks endpoints.

    Pass ``http`` to reuse an existing ``httpx.Client`` (tests hand in a
    FastAPI ``TestClient``); otherwise one is built for ``base_url``, which
    falls back to ``TASKS_API_URL``.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        http: Optional[httpx.Client] = None,
        timeout: Optional[float] = TASKS_API_TIMEOUT,
    ):
        if http is None:
            http = httpx.Client(base_url=base_url or get_api_url(), timeout=timeout)
        self.http = http

    @property
    def base_url(self) -> str:
        return str(self.http.base_url)

    def close(self) -> None:
        self.http.close()

    def __enter__(self) -> "TaskApiClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def _request(self, method: str, path: str, action: str, **kwargs: Any) -> httpx.Response:
        try:
            response = self.http.request(method, path, **kwargs)
        except httpx.HTTPError as exc:
            logger.warning("%s: %s %s could not be sent: %s", action, method, path, exc)
            raise TaskApiError(f"{action}: {exc}") from exc

        if response.is_success:
            return response

        detail = _describe(response)
        logger.warning("%s: %s %s returned %s %s", action, method, path, response.status_code, detail)
        message = f"{action}: {detail}" if detail else action
        raise TaskApiError(message, status_code=response.status_code)

    def list_tasks(self) -> List[Task]:
        response = self._request("GET", "/api/tasks", "Failed to fetch tasks")
        return [Task.model_validate(item) for item in response.json()]

    def create_task(self, payload: Dict[str, Any]) -> Task:
        response = self._request("POST", "/api/tasks", "Failed to add task", json=payload)
        return Task.model_validate(response.json())

    def update_task(self, task_id: str, payload: Dict[str, Any]) -> Task:
        try:
            response = self._request("PUT", f"/api/tasks/{task_id}", "Failed to update task", json=payload)
        except TaskApiError as exc:
            if exc.status_code == 404:
                raise TaskNotFoundError("Task not found", status_code=404) from exc
            raise
        return Task.model_validate(response.json())

    def delete_task(self, task_id: str) -> None:
        self._request("DELETE", f"/api/tasks/{task_id}", "Failed to delete task")
