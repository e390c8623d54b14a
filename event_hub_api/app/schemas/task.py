"""
Pydantic models for tasks assigned to users.

A user task is keyed by a free-text e‑mail address; it is not linked
to a user record and may be assigned before the user signs up.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from .common import MessageResponse, NonBlankStr


class TaskCreate(BaseModel):
    email: NonBlankStr = Field(..., examples=["ada@example.com"])
    task_name: NonBlankStr = Field(..., alias="taskName", examples=["Prepare the venue"])

    model_config = {
        "populate_by_name": True,
    }


class TaskRead(BaseModel):
    id: str
    email: str
    task_name: str = Field(..., alias="taskName")
    created_at: Optional[datetime] = Field(None, alias="createdAt")

    model_config = {
        "populate_by_name": True,
    }


class TaskAssignResponse(MessageResponse):
    task: TaskRead
