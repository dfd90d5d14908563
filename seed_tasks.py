from taskmanager.database import create_tables, get_session
from taskmanager.models import TaskStatus
from taskmanager.schemas.task import TaskCreate
from taskmanager.store import create_task, list_tasks

SAMPLE_TASKS = [
    TaskCreate(title="Buy milk", description="2%"),
    TaskCreate(title="Write report", description="Quarterly numbers", status=TaskStatus.IN_PROGRESS),
    TaskCreate(title="Book flights", description="Conference in May", status=TaskStatus.COMPLETED),
]

create_tables()

with get_session() as db:
    # Only seed an empty collection
    if list_tasks(db):
        print("Tasks already exist, nothing to seed")
    else:
        for sample in SAMPLE_TASKS:
            create_task(db, sample)
        print(f"Seeded {len(SAMPLE_TASKS)} sample tasks")
