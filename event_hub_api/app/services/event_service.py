"""
Business logic for events.

Events are identified informally by their (name, date, location)
triple.  The optional image is written to disk only once the event is
known to be new, and removed again if the insert loses a race against
a concurrent identical request.
"""

import logging
from typing import BinaryIO, List, Optional

from pymongo import ASCENDING
from pymongo.database import Database
from pymongo.errors import DuplicateKeyError

from event_hub_api.app.core.db import EVENTS, serialize_document
from event_hub_api.app.core.errors import ConflictError
from event_hub_api.app.core.timeutils import utcnow
from event_hub_api.app.core.uploads import delete_upload, save_upload
from event_hub_api.app.schemas.event import EventCreate, EventRead


logger = logging.getLogger(__name__)


class EventService:
    """Service for creating and listing events."""

    @classmethod
    def create_event(
        cls,
        db: Database,
        data: EventCreate,
        image: Optional[BinaryIO] = None,
        image_name: Optional[str] = None,
    ) -> EventRead:
        """Store a new event, with its image when one was uploaded.

        Raises ``ConflictError`` if an event with the same name, date
        and location already exists.
        """
        events = db[EVENTS]
        key = {"name": data.name, "date": data.date, "location": data.location}
        if events.find_one(key, {"_id": 1}):
            logger.warning("Event '%s' on %s at %s already exists", data.name, data.date, data.location)
            raise ConflictError("Event already exists")

        image_url = save_upload(image, image_name or "") if image is not None else None
        doc = {
            **key,
            "description": data.description,
            "imageUrl": image_url,
            "createdAt": utcnow(),
        }
        try:
            result = events.insert_one(doc)
        except DuplicateKeyError as exc:
            delete_upload(image_url)
            raise ConflictError("Event already exists") from exc
        logger.info("Created event '%s' (%s)", data.name, result.inserted_id)
        doc["_id"] = result.inserted_id
        return EventRead.model_validate(serialize_document(doc))

    @classmethod
    def list_events(cls, db: Database) -> List[EventRead]:
        """Return all events, earliest date first."""
        cursor = db[EVENTS].find().sort("date", ASCENDING)
        return [EventRead.model_validate(serialize_document(doc)) for doc in cursor]
