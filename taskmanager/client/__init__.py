from .api import TaskApiClient, TaskApiError, TaskNotFoundError
from .form import FormValidationError, TaskForm
from .manager import MutationResult, TaskManager
from .state import ClientState, StatusFilter, derive_visible

__all__ = [
    "ClientState",
    "FormValidationError",
    "MutationResult",
    "StatusFilter",
    "TaskApiClient",
    "TaskApiError",
    "TaskForm",
    "TaskManager",
    "TaskNotFoundError",
    "derive_visible",
]
