import pytest

from taskmanager.client.form import FormValidationError, TaskForm
from taskmanager.models import TaskStatus


def test_blank_title_blocks_submission():
    form = TaskForm(title="   ", description="something")
    with pytest.raises(FormValidationError, match="Title is required!"):
        form.validate()


def test_blank_description_blocks_submission():
    form = TaskForm(title="Buy milk", description=" \n")
    with pytest.raises(FormValidationError, match="Description is required!"):
        form.validate()


def test_payload_is_trimmed():
    form = TaskForm(title="  Buy milk ", description=" 2% ", status=TaskStatus.IN_PROGRESS)
    form.validate()
    assert form.payload() == {"title": "Buy milk", "description": "2%", "status": "In Progress"}


def test_populate_copies_selected_task(make_task):
    form = TaskForm()
    form.populate(make_task("Call plumber", None, TaskStatus.COMPLETED))

    assert (form.title, form.description, form.status) == ("Call plumber", "", TaskStatus.COMPLETED)


def test_populate_with_nothing_selected_keeps_buffer():
    form = TaskForm(title="Draft", description="half typed")
    form.populate(None)
    assert (form.title, form.description) == ("Draft", "half typed")


def test_reset_restores_defaults():
    form = TaskForm(title="x", description="y", status=TaskStatus.COMPLETED)
    form.reset()
    assert form == TaskForm()
