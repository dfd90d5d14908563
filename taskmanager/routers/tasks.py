from typing import List

from fastapi import APIRouter, Depends, HTTPException, status
from sqlmodel import Session

from .. import store
from ..database import get_db
from ..schemas.task import Task as TaskSchema, TaskCreate, TaskDeleted, TaskUpdate

router = APIRouter()


@router.get("/tasks", response_model=List[TaskSchema])
def get_tasks(db: Session = Depends(get_db)):
    """List every task, unpaginated."""
    return store.list_tasks(db)


@router.post("/tasks", response_model=TaskSchema, status_code=status.HTTP_201_CREATED)
def create_task(task: TaskCreate, db: Session = Depends(get_db)):
    """Create a new task. Status defaults to Pending."""
    return store.create_task(db, task)


@router.get("/tasks/{task_id}", response_model=TaskSchema)
def get_task(task_id: str, db: Session = Depends(get_db)):
    """Get a specific task by ID."""
    task = store.get_task(db, task_id)
    if not task:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Task not found")
    return task


@router.put("/tasks/{task_id}", response_model=TaskSchema)
def update_task(task_id: str, task_update: TaskUpdate, db: Session = Depends(get_db)):
    """Update the fields sent in the body; unknown ids are a 404."""
    task = store.update_task(db, task_id, task_update)
    if not task:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Task not found")
    return task


@router.delete("/tasks/{task_id}", response_model=TaskDeleted)
def delete_task(task_id: str, db: Session = Depends(get_db)):
    """Delete a task. Confirms even when nothing matched."""
    store.delete_task(db, task_id)
    return TaskDeleted()
