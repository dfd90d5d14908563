import pytest

from taskmanager.client.state import (
    ClientState,
    StatusFilter,
    count_by_status,
    derive_visible,
    transition,
)
from taskmanager.models import TaskStatus


@pytest.fixture
def tasks(make_task):
    return [
        make_task("Buy milk", "2% from the corner shop", TaskStatus.PENDING),
        make_task("Write report", "Quarterly numbers", TaskStatus.COMPLETED),
        make_task("Call plumber", "Kitchen sink, mention the milk stain", TaskStatus.IN_PROGRESS),
        make_task("Book flights", "", TaskStatus.PENDING),
        make_task("Renew passport", None, TaskStatus.COMPLETED),
    ]


@pytest.mark.parametrize("status_filter", list(StatusFilter))
@pytest.mark.parametrize("search_text", ["", "  ", "milk", "MILK", "report", "zzz", "o"])
def test_visible_is_a_filtered_subset(tasks, status_filter, search_text):
    state = ClientState(all_tasks=tasks, status_filter=status_filter, search_text=search_text)
    visible = derive_visible(state)

    assert all(any(task is original for original in tasks) for task in visible)
    wanted = status_filter.task_status
    if wanted is not None:
        assert all(task.status == wanted for task in visible)
    if search_text.strip():
        needle = search_text.lower()
        assert all(
            needle in task.title.lower() or needle in (task.description or "").lower()
            for task in visible
        )


@pytest.mark.parametrize("status_filter", list(StatusFilter))
@pytest.mark.parametrize("search_text", ["", "milk", "numbers"])
def test_filtering_is_idempotent(tasks, status_filter, search_text):
    once = derive_visible(ClientState(all_tasks=tasks, status_filter=status_filter, search_text=search_text))
    twice = derive_visible(ClientState(all_tasks=once, status_filter=status_filter, search_text=search_text))
    assert twice == once


def test_completed_filter_keeps_only_completed(make_task):
    pending = make_task("a", "x", TaskStatus.PENDING)
    completed = make_task("b", "y", TaskStatus.COMPLETED)
    in_progress = make_task("c", "z", TaskStatus.IN_PROGRESS)

    state = ClientState(all_tasks=[pending, completed, in_progress], status_filter=StatusFilter.COMPLETED)

    assert derive_visible(state) == [completed]


def test_search_is_case_insensitive(make_task):
    task = make_task("Buy milk", "")
    assert derive_visible(ClientState(all_tasks=[task], search_text="MILK")) == [task]


def test_search_matches_description(tasks):
    visible = derive_visible(ClientState(all_tasks=tasks, search_text="stain"))
    assert [task.title for task in visible] == ["Call plumber"]


def test_blank_search_keeps_everything_in_order(tasks):
    assert derive_visible(ClientState(all_tasks=tasks, search_text="   ")) == tasks


def test_transition_rederives_visible(tasks):
    state = transition(ClientState(), all_tasks=tasks)
    assert state.visible_tasks == tasks

    state = transition(state, status_filter=StatusFilter.IN_PROGRESS)
    assert [task.title for task in state.visible_tasks] == ["Call plumber"]

    state = transition(state, status_filter=StatusFilter.ALL, search_text="milk")
    assert [task.title for task in state.visible_tasks] == ["Buy milk", "Call plumber"]


def test_status_filter_maps_to_task_status():
    assert StatusFilter.ALL.task_status is None
    assert StatusFilter("in-progress").task_status == TaskStatus.IN_PROGRESS
    assert StatusFilter.PENDING.task_status == TaskStatus.PENDING
    assert StatusFilter.COMPLETED.task_status == TaskStatus.COMPLETED


def test_count_by_status(tasks):
    assert count_by_status(tasks, TaskStatus.PENDING) == 2
    assert count_by_status(tasks, TaskStatus.COMPLETED) == 2
    assert count_by_status(tasks, TaskStatus.IN_PROGRESS) == 1
