"""
Pydantic models for user data.

The stored user document holds a bcrypt hash in ``password``; none of
the read models declare that field, so it can never leak into a
response.
"""

from typing import Optional

from pydantic import BaseModel, Field

from .common import MessageResponse, NonBlankStr


class UserCreate(BaseModel):
    """Payload of ``POST /signup``."""

    name: NonBlankStr = Field(..., examples=["Ada Lovelace"])
    email: NonBlankStr = Field(..., examples=["ada@example.com"])
    password: str = Field(..., min_length=1, examples=["strongpassword"])


class UserLogin(BaseModel):
    email: NonBlankStr
    password: str = Field(..., min_length=1)


class UserUpdate(BaseModel):
    """Payload of ``PUT /user/{id}``.

    All fields are optional; only provided values are written.  Name
    and e‑mail cannot be blanked.  A ``password`` equal to the configured placeholder is ignored.
    """

    name: Optional[NonBlankStr] = None
    email: Optional[NonBlankStr] = None
    password: Optional[str] = None


class UserRead(BaseModel):
    id: str
    name: str
    email: str


class LoginResponse(MessageResponse):
    user: UserRead


class UserUpdateResponse(MessageResponse):
    user: UserRead
