"""Interactive console front-end for the task API.

Renders the same view the web page does (header, error line, filter bar
with counts, task list) and maps short commands onto ``TaskManager``.
"""

import argparse
import logging
from typing import Callable, List, Optional

from ..config import LOG_LEVEL
from ..logging_setup import setup_logging
from ..models.task import TaskStatus
from .api import TaskApiClient
from .form import FormValidationError
from .manager import MutationResult, TaskManager
from .state import StatusFilter

logger = logging.getLogger(__name__)

Prompt = Callable[[str], str]
Output = Callable[[str], None]

HELP_TEXT = """Commands:
  add                 create a task
  edit <n>            edit task number n
  cancel              stop editing
  delete <n>          delete task number n
  filter <value>      all | pending | in-progress | completed
  search [text]       search title and description (no text clears)
  refresh             reload tasks from the server
  help                show this help
  quit                leave"""

FILTER_LABELS = [
    (StatusFilter.ALL, "All", None),
    (StatusFilter.PENDING, "Pending", TaskStatus.PENDING),
    (StatusFilter.IN_PROGRESS, "In Progress", TaskStatus.IN_PROGRESS),
    (StatusFilter.COMPLETED, "Completed", TaskStatus.COMPLETED),
]


def parse_status(text: str, default: TaskStatus) -> TaskStatus:
    """Accept a status by value, by filter name or by its 1-based position."""
    text = text.strip().lower()
    if not text:
        return default
    statuses = list(TaskStatus)
    if text.isdigit() and 1 <= int(text) <= len(statuses):
        return statuses[int(text) - 1]
    for status in statuses:
        if text in (status.value.lower(), status.value.lower().replace(" ", "-")):
            return status
    raise ValueError(f"Unknown status: {text}")


def render(manager: TaskManager) -> str:
    state = manager.state
    lines = ["Task Manager"]

    if state.is_loading:
        lines.append("Loading...")
    if state.error_message:
        lines.append(f"Error: {state.error_message}")

    buttons = []
    for value, label, status in FILTER_LABELS:
        button = f"{label} ({manager.count(status)})"
        buttons.append(f"[{button}]" if state.status_filter == value else button)
    lines.append("Filter: " + "  ".join(buttons))

    if state.search_text:
        lines.append(f'Search: "{state.search_text}"')
    if state.editing_task is not None:
        lines.append(f"Editing: {state.editing_task.title}")
    lines.append("")

    if not state.visible_tasks:
        lines.append("No tasks found. Add your first task!")
    for number, task in enumerate(state.visible_tasks, start=1):
        lines.append(f"{number}. {task.title} [{task.status.value}]")
        if task.description:
            lines.append(f"   {task.description}")

    return "\n".join(lines)


def _visible_task(manager: TaskManager, arg: str):
    try:
        index = int(arg) - 1
    except ValueError:
        raise ValueError(f"Not a task number: {arg!r}") from None
    tasks = manager.state.visible_tasks
    if not 0 <= index < len(tasks):
        raise ValueError(f"No task number {arg}")
    return tasks[index]


def _fill_form(manager: TaskManager, prompt: Prompt) -> None:
    form = manager.form
    title = prompt(f"Title [{form.title}]: " if form.title else "Title: ")
    description = prompt(f"Description [{form.description}]: " if form.description else "Description: ")
    status = prompt(f"Status (1 Pending, 2 In Progress, 3 Completed) [{form.status.value}]: ")

    # blank answers keep what the buffer already holds
    if title.strip():
        form.title = title
    if description.strip():
        form.description = description
    form.status = parse_status(status, form.status)


def _finish(manager: TaskManager, result: MutationResult, out: Output) -> None:
    if result.needs_refresh:
        manager.refresh()
    if not result.ok:
        # refresh clears the error line; put the mutation's error back unless
        # the refresh failed with one of its own
        if not manager.state.error_message:
            manager.report_error(result.error)
        out(f"Error: {result.error}")


def handle_command(manager: TaskManager, line: str, prompt: Prompt = input, out: Output = print) -> bool:
    """Run one command line. Returns False when the user asked to quit."""
    command, _, arg = line.strip().partition(" ")
    command = command.lower()
    arg = arg.strip()

    try:
        if command in ("quit", "exit"):
            return False
        elif command == "help":
            out(HELP_TEXT)
        elif command == "refresh":
            manager.refresh()
        elif command == "add":
            if manager.state.editing_task is not None:
                manager.cancel_edit()
            _fill_form(manager, prompt)
            _finish(manager, manager.submit_form(), out)
        elif command == "edit":
            manager.select_for_edit(_visible_task(manager, arg))
            _fill_form(manager, prompt)
            _finish(manager, manager.submit_form(), out)
        elif command == "cancel":
            manager.cancel_edit()
        elif command == "delete":
            task = _visible_task(manager, arg)
            _finish(manager, manager.delete_task(task.id), out)
        elif command == "filter":
            manager.set_status_filter(arg.lower() or StatusFilter.ALL)
        elif command == "search":
            manager.set_search_text(arg)
        elif command:
            out(f"Unknown command: {command}. Type 'help' for commands.")
    except FormValidationError as exc:
        out(str(exc))
    except ValueError as exc:
        out(str(exc))

    return True


def run_console(manager: TaskManager, prompt: Prompt = input, out: Output = print) -> None:
    manager.load()
    out("Type 'help' for commands.")
    while True:
        out("")
        out(render(manager))
        try:
            line = prompt("> ")
        except (EOFError, KeyboardInterrupt):
            out("")
            break
        if not handle_command(manager, line, prompt, out):
            break


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="taskmanager-console",
        description="Manage tasks from the terminal",
    )
    parser.add_argument("--api-url", help="Base URL of the task API (default: $TASKS_API_URL)")
    parser.add_argument("--log-level", default=LOG_LEVEL, help="Logging level (default: %(default)s)")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = create_parser().parse_args(argv)
    setup_logging(level=args.log_level)

    with TaskApiClient(base_url=args.api_url) as api:
        logger.info("Using task API at %s", api.base_url)
        run_console(TaskManager(api))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
