"""
Signup and login endpoints.

Login only verifies credentials and returns the public user record; no
session or token is issued, clients keep track of the signed-in user
themselves.
"""

from fastapi import APIRouter, Depends, HTTPException, status
from pymongo.database import Database

from event_hub_api.app.core.db import get_db
from event_hub_api.app.core.errors import BadRequestError, ConflictError
from event_hub_api.app.schemas.common import MessageResponse
from event_hub_api.app.schemas.user import LoginResponse, UserCreate, UserLogin
from event_hub_api.app.services.user_service import UserService


router = APIRouter()


@router.post("/signup", response_model=MessageResponse, status_code=status.HTTP_201_CREATED)
def signup(payload: UserCreate, db: Database = Depends(get_db)) -> MessageResponse:
    """Register a new user.

    Responds with 409 if the e‑mail address is already registered.
    """
    try:
        UserService.create_user(db, payload)
    except ConflictError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message) from e
    return MessageResponse(message="User registered successfully")


@router.post("/login", response_model=LoginResponse)
def login(payload: UserLogin, db: Database = Depends(get_db)) -> LoginResponse:
    """Check e‑mail and password and return the user.

    Unknown e‑mails and wrong passwords both answer 400.
    """
    try:
        user = UserService.authenticate(db, payload.email, payload.password)
    except BadRequestError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message) from e
    return LoginResponse(message="Login successful", user=user)
