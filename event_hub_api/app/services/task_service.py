"""
Service for tasks assigned to users by e‑mail.

Assignments are stored unconditionally; the same task may be assigned
to the same address more than once.
"""

import logging
from typing import List

from pymongo import DESCENDING
from pymongo.database import Database

from event_hub_api.app.core.db import TASKS, serialize_document
from event_hub_api.app.core.timeutils import utcnow
from event_hub_api.app.schemas.task import TaskCreate, TaskRead


logger = logging.getLogger(__name__)


class TaskService:
    """Service for assigning and listing user tasks."""

    @classmethod
    def assign_task(cls, db: Database, data: TaskCreate) -> TaskRead:
        doc = {"email": data.email, "taskName": data.task_name, "createdAt": utcnow()}
        result = db[TASKS].insert_one(doc)
        logger.info("Assigned task '%s' to %s", data.task_name, data.email)
        doc["_id"] = result.inserted_id
        return TaskRead.model_validate(serialize_document(doc))

    @classmethod
    def list_tasks_for_email(cls, db: Database, email: str) -> List[TaskRead]:
        """Return the tasks assigned to ``email``, newest first."""
        cursor = db[TASKS].find({"email": email}).sort("createdAt", DESCENDING)
        return [TaskRead.model_validate(serialize_document(doc)) for doc in cursor]
