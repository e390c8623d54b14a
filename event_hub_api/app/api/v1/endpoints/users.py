"""
User profile endpoints.

Profiles are addressed by their MongoDB id.  The password hash is
never part of a response.
"""

from fastapi import APIRouter, Depends, HTTPException
from pymongo.database import Database

from event_hub_api.app.core.db import get_db
from event_hub_api.app.core.errors import ConflictError, NotFoundError
from event_hub_api.app.schemas.user import UserRead, UserUpdate, UserUpdateResponse
from event_hub_api.app.services.user_service import UserService


router = APIRouter()


@router.get("/user/{user_id}", response_model=UserRead)
def get_user(user_id: str, db: Database = Depends(get_db)) -> UserRead:
    try:
        return UserService.get_user(db, user_id)
    except NotFoundError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message) from e


@router.put("/user/{user_id}", response_model=UserUpdateResponse)
def update_user(user_id: str, payload: UserUpdate, db: Database = Depends(get_db)) -> UserUpdateResponse:
    """Update name, e‑mail and/or password.

    Sending the placeholder ``********`` (or nothing) as password keeps
    the current one.
    """
    try:
        user = UserService.update_user(db, user_id, payload)
    except (NotFoundError, ConflictError) as e:
        raise HTTPException(status_code=e.status_code, detail=e.message) from e
    return UserUpdateResponse(message="Profile updated successfully", user=user)
