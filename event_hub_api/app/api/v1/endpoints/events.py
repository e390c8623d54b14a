"""
Event endpoints for API v1.

Events are created by administrators through a multipart form so an
image can travel with the fields; listing is public.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, File, Form, HTTPException, UploadFile, status
from pymongo.database import Database

from event_hub_api.app.core.db import get_db
from event_hub_api.app.core.errors import ConflictError
from event_hub_api.app.core.timeutils import parse_datetime
from event_hub_api.app.schemas.event import EventCreate, EventCreateResponse, EventRead
from event_hub_api.app.services.event_service import EventService


router = APIRouter()


@router.post("/admin/add_event", response_model=EventCreateResponse, status_code=status.HTTP_201_CREATED)
def add_event(
    name: Optional[str] = Form(None),
    date: Optional[str] = Form(None),
    location: Optional[str] = Form(None),
    description: Optional[str] = Form(None),
    image: Optional[UploadFile] = File(None),
    db: Database = Depends(get_db),
) -> EventCreateResponse:
    """Create an event from ``multipart/form-data``.

    - **name**, **date**, **location**, **description** are required.
    - **date** is an ISO‑8601 date or datetime.
    - **image** is an optional file stored under ``/uploads``.

    Answers 400 for missing fields or a bad date and 409 when an event
    with the same name, date and location already exists.
    """
    fields = (name, date, location, description)
    if any(value is None or not value.strip() for value in fields):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Please provide all required fields")
    try:
        parsed_date = parse_datetime(date)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid date format") from e

    data = EventCreate(name=name, date=parsed_date, location=location, description=description)
    has_image = image is not None and bool(image.filename)
    try:
        event = EventService.create_event(
            db,
            data,
            image=image.file if has_image else None,
            image_name=image.filename if has_image else None,
        )
    except ConflictError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message) from e
    return EventCreateResponse(message="Event added successfully", event=event)


@router.get("/events", response_model=List[EventRead])
def list_events(db: Database = Depends(get_db)) -> List[EventRead]:
    """Return every event ordered by date, earliest first."""
    return EventService.list_events(db)
