from fastapi import APIRouter, Depends, HTTPException, status
from pymongo.database import Database

from event_hub_api.app.core.db import get_db
from event_hub_api.app.core.errors import ConflictError
from event_hub_api.app.schemas.common import MessageResponse
from event_hub_api.app.schemas.pre_registration import PreRegistrationCreate
from event_hub_api.app.services.pre_registration_service import PreRegistrationService


router = APIRouter()


@router.post("/pre_register", response_model=MessageResponse, status_code=status.HTTP_201_CREATED)
def pre_register(payload: PreRegistrationCreate, db: Database = Depends(get_db)) -> MessageResponse:
    """Register interest in an event.

    A second registration with the same e‑mail for the same event
    answers 409.
    """
    try:
        PreRegistrationService.create(db, payload)
    except ConflictError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message) from e
    return MessageResponse(message="Pre-registration successful")
