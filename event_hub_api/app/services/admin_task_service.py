"""
Service for administrator tasks.

Admin tasks support the full create/read/update/delete cycle and are
kept in the ``adminCreatedTasks`` collection.  Identifiers that are not
valid ObjectIds are treated the same as unknown ones.
"""

import logging
from typing import List

from pymongo import DESCENDING, ReturnDocument
from pymongo.database import Database

from event_hub_api.app.core.db import ADMIN_TASKS, parse_object_id, serialize_document
from event_hub_api.app.core.errors import NotFoundError
from event_hub_api.app.core.timeutils import utcnow
from event_hub_api.app.schemas.admin_task import AdminTaskCreate, AdminTaskRead, AdminTaskUpdate


logger = logging.getLogger(__name__)


class AdminTaskService:
    """Service for CRUD on administrator tasks."""

    @classmethod
    def create_task(cls, db: Database, data: AdminTaskCreate) -> AdminTaskRead:
        doc = {
            "taskName": data.task_name,
            "description": data.description,
            "deadline": data.deadline,
            "createdAt": utcnow(),
        }
        result = db[ADMIN_TASKS].insert_one(doc)
        logger.info("Created admin task '%s' (%s)", data.task_name, result.inserted_id)
        doc["_id"] = result.inserted_id
        return AdminTaskRead.model_validate(serialize_document(doc))

    @classmethod
    def list_tasks(cls, db: Database) -> List[AdminTaskRead]:
        cursor = db[ADMIN_TASKS].find().sort("createdAt", DESCENDING)
        return [AdminTaskRead.model_validate(serialize_document(doc)) for doc in cursor]

    @classmethod
    def update_task(cls, db: Database, task_id: str, data: AdminTaskUpdate) -> AdminTaskRead:
        """Update the fields present in ``data``.

        ``taskName`` cannot be cleared; an explicit ``null`` for it is
        ignored.  A request without fields returns the task unchanged.
        """
        oid = parse_object_id(task_id)
        if oid is None:
            raise NotFoundError("Task not found")
        updates = data.model_dump(exclude_unset=True, by_alias=True)
        if updates.get("taskName") is None:
            updates.pop("taskName", None)

        collection = db[ADMIN_TASKS]
        if updates:
            doc = collection.find_one_and_update(
                {"_id": oid},
                {"$set": updates},
                return_document=ReturnDocument.AFTER,
            )
        else:
            doc = collection.find_one({"_id": oid})
        if not doc:
            raise NotFoundError("Task not found")
        logger.info("Updated admin task %s", task_id)
        return AdminTaskRead.model_validate(serialize_document(doc))

    @classmethod
    def delete_task(cls, db: Database, task_id: str) -> None:
        oid = parse_object_id(task_id)
        result = db[ADMIN_TASKS].delete_one({"_id": oid}) if oid else None
        if result is None or not result.deleted_count:
            raise NotFoundError("Task not found")
        logger.info("Deleted admin task %s", task_id)
