from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from .common import NonBlankStr, required_datetime


class PreRegistrationCreate(BaseModel):
    """Interest registration for an event.

    ``event`` is the event name as free text; it is not checked against
    the stored events.
    """

    fullname: NonBlankStr = Field(..., examples=["Ada Lovelace"])
    dob: datetime = Field(..., examples=["1990-12-10"])
    email: NonBlankStr = Field(..., examples=["ada@example.com"])
    phone: NonBlankStr = Field(..., examples=["+44 20 7946 0000"])
    event: NonBlankStr = Field(..., examples=["Spring Hackathon"])

    @field_validator("dob", mode="before")
    @classmethod
    def parse_dob(cls, value):
        return required_datetime(value)


class PreRegistrationRead(BaseModel):
    id: str
    fullname: str
    dob: datetime
    email: str
    phone: str
    event: str
    created_at: Optional[datetime] = Field(None, alias="createdAt")

    model_config = {
        "populate_by_name": True,
    }
