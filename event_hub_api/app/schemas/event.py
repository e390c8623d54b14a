"""
Pydantic models for event data.

Events are created from multipart form fields (the request may carry
an image), so ``EventCreate`` is built by the endpoint after its own
presence checks rather than parsed from a JSON body.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from .common import MessageResponse


class EventCreate(BaseModel):
    name: str
    date: datetime
    location: str
    description: str


class EventRead(BaseModel):
    """Schema for reading an event from the API."""

    id: str
    name: str
    date: datetime
    location: str
    description: str
    image_url: Optional[str] = Field(None, alias="imageUrl")
    created_at: Optional[datetime] = Field(None, alias="createdAt")

    model_config = {
        "populate_by_name": True,
    }


class EventCreateResponse(MessageResponse):
    event: EventRead
