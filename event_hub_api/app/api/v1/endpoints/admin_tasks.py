"""
Administrator task endpoints.

Full CRUD over ``/admin/tasks``.  Unknown or malformed identifiers
answer 404 on update and delete.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status
from pymongo.database import Database

from event_hub_api.app.core.db import get_db
from event_hub_api.app.core.errors import NotFoundError
from event_hub_api.app.schemas.admin_task import (
    AdminTaskCreate,
    AdminTaskRead,
    AdminTaskResponse,
    AdminTaskUpdate,
)
from event_hub_api.app.schemas.common import MessageResponse
from event_hub_api.app.services.admin_task_service import AdminTaskService


router = APIRouter()


@router.post("/admin/tasks", response_model=AdminTaskResponse, status_code=status.HTTP_201_CREATED)
def create_admin_task(payload: AdminTaskCreate, db: Database = Depends(get_db)) -> AdminTaskResponse:
    task = AdminTaskService.create_task(db, payload)
    return AdminTaskResponse(message="Admin task created successfully", task=task)


@router.get("/admin/tasks", response_model=List[AdminTaskRead])
def list_admin_tasks(db: Database = Depends(get_db)) -> List[AdminTaskRead]:
    """Return all admin tasks, newest first."""
    return AdminTaskService.list_tasks(db)


@router.put("/admin/tasks/{task_id}", response_model=AdminTaskResponse)
def update_admin_task(task_id: str, payload: AdminTaskUpdate, db: Database = Depends(get_db)) -> AdminTaskResponse:
    """Update only the fields present in the request body."""
    try:
        task = AdminTaskService.update_task(db, task_id, payload)
    except NotFoundError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message) from e
    return AdminTaskResponse(message="Admin task updated successfully", task=task)


@router.delete("/admin/tasks/{task_id}", response_model=MessageResponse)
def delete_admin_task(task_id: str, db: Database = Depends(get_db)) -> MessageResponse:
    try:
        AdminTaskService.delete_task(db, task_id)
    except NotFoundError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message) from e
    return MessageResponse(message="Admin task deleted successfully")
