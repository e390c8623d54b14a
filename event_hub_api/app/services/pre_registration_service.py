"""
Business logic for event pre-registrations.

One pre-registration is accepted per (email, event) pair.  The event
is referenced by name only and is not required to exist.
"""

import logging

from pymongo.database import Database
from pymongo.errors import DuplicateKeyError

from event_hub_api.app.core.db import PRE_REGISTRATIONS, serialize_document
from event_hub_api.app.core.errors import ConflictError
from event_hub_api.app.core.timeutils import utcnow
from event_hub_api.app.schemas.pre_registration import PreRegistrationCreate, PreRegistrationRead


logger = logging.getLogger(__name__)


class PreRegistrationService:
    @classmethod
    def create(cls, db: Database, data: PreRegistrationCreate) -> PreRegistrationRead:
        collection = db[PRE_REGISTRATIONS]
        if collection.find_one({"email": data.email, "event": data.event}, {"_id": 1}):
            logger.warning("%s already pre-registered for '%s'", data.email, data.event)
            raise ConflictError("Already pre-registered for this event")
        doc = {**data.model_dump(), "createdAt": utcnow()}
        try:
            result = collection.insert_one(doc)
        except DuplicateKeyError as exc:
            raise ConflictError("Already pre-registered for this event") from exc
        logger.info("Pre-registered %s for '%s'", data.email, data.event)
        doc["_id"] = result.inserted_id
        return PreRegistrationRead.model_validate(serialize_document(doc))
