"""
API endpoints for tasks assigned to users.

Tasks are addressed by the assignee's e‑mail; there is no check that a
user with that address exists.
"""

from typing import List

from fastapi import APIRouter, Depends, status
from pymongo.database import Database

from event_hub_api.app.core.db import get_db
from event_hub_api.app.schemas.task import TaskAssignResponse, TaskCreate, TaskRead
from event_hub_api.app.services.task_service import TaskService


router = APIRouter()


@router.post("/assign_task", response_model=TaskAssignResponse, status_code=status.HTTP_201_CREATED)
def assign_task(payload: TaskCreate, db: Database = Depends(get_db)) -> TaskAssignResponse:
    task = TaskService.assign_task(db, payload)
    return TaskAssignResponse(message="Task assigned successfully", task=task)


@router.get("/my_tasks/{email}", response_model=List[TaskRead])
def my_tasks(email: str, db: Database = Depends(get_db)) -> List[TaskRead]:
    """Return the tasks assigned to ``email``, newest first."""
    return TaskService.list_tasks_for_email(db, email)
