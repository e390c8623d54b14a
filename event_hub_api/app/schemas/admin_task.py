"""
Pydantic models for administrator tasks.

Admin tasks live in their own collection and are unrelated to the
per-user tasks in ``schemas.task``.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from .common import MessageResponse, NonBlankStr, optional_datetime


class AdminTaskCreate(BaseModel):
    task_name: NonBlankStr = Field(..., alias="taskName", examples=["Book the hall"])
    description: Optional[str] = Field(None, examples=["Call the venue before Friday"])
    deadline: Optional[datetime] = Field(None, examples=["2025-09-01T18:00:00Z"])

    model_config = {
        "populate_by_name": True,
    }

    @field_validator("deadline", mode="before")
    @classmethod
    def parse_deadline(cls, value):
        return optional_datetime(value)


class AdminTaskUpdate(BaseModel):
    """Partial update; fields left out of the request are not touched."""

    task_name: Optional[NonBlankStr] = Field(None, alias="taskName")
    description: Optional[str] = None
    deadline: Optional[datetime] = None

    model_config = {
        "populate_by_name": True,
    }

    @field_validator("deadline", mode="before")
    @classmethod
    def parse_deadline(cls, value):
        return optional_datetime(value)


class AdminTaskRead(BaseModel):
    id: str
    task_name: str = Field(..., alias="taskName")
    description: Optional[str] = None
    deadline: Optional[datetime] = None
    created_at: Optional[datetime] = Field(None, alias="createdAt")

    model_config = {
        "populate_by_name": True,
    }


class AdminTaskResponse(MessageResponse):
    task: AdminTaskRead
