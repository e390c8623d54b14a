"""
Health check for deployments and local debugging.
"""

import logging

from fastapi import APIRouter, Depends
from pymongo.database import Database
from pymongo.errors import PyMongoError

from event_hub_api.app.core.db import get_db


router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("/health")
def health(db: Database = Depends(get_db)) -> dict:
    """Report whether the API can reach MongoDB.

    Always answers 200; the ``database`` field carries the outcome.
    """
    response = {"message": "Event Hub API running", "database": "connected", "collections": []}
    try:
        response["collections"] = sorted(db.list_collection_names())
    except PyMongoError as e:
        logger.warning("Health check could not reach MongoDB: %s", e)
        response["database"] = f"error: {str(e)[:80]}"
    return response
