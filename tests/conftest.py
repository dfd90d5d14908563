from datetime import datetime, timezone
from uuid import uuid4

import pytest
from fastapi.testclient import TestClient
from sqlmodel import Session

from taskmanager.client.api import TaskApiClient
from taskmanager.client.manager import TaskManager
from taskmanager.database import build_engine, create_tables, get_db
from taskmanager.main import app
from taskmanager.models import TaskStatus
from taskmanager.schemas.task import Task


@pytest.fixture
def engine():
    """In-memory SQLite shared by every session of one test."""
    engine = build_engine("sqlite://")
    create_tables(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture
def client(engine):
    """TestClient wired to the test engine.

    Not used as a context manager, so the startup hook (which targets the
    configured database) never runs.
    """
    def override_get_db():
        with Session(engine) as db:
            yield db

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def api(client):
    return TaskApiClient(http=client)


@pytest.fixture
def manager(api):
    return TaskManager(api)


@pytest.fixture
def make_task():
    """Build client-side Task objects without going through the API."""
    def _make(title, description="", status=TaskStatus.PENDING):
        now = datetime.now(timezone.utc)
        return Task(
            id=str(uuid4()),
            title=title,
            description=description,
            status=status,
            created_at=now,
            updated_at=now,
        )
    return _make
