"""
Shared schema pieces: the message envelope every response carries, the
non-blank string type used by required text fields and reusable
validators for datetime fields.
"""

from datetime import datetime
from typing import Annotated, Any, Optional

from pydantic import BaseModel, StringConstraints

from event_hub_api.app.core.timeutils import parse_datetime


# Surrounding whitespace is stripped; what remains must not be empty.
NonBlankStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]


class MessageResponse(BaseModel):
    message: str


def optional_datetime(value: Any) -> Optional[datetime]:
    """Validator body for optional datetime fields.

    ``None`` and empty strings mean "not provided"; anything else must
    parse as an ISO‑8601 date or datetime.
    """
    if value is None or (isinstance(value, str) and not value.strip()):
        return None
    return parse_datetime(value)


def required_datetime(value: Any) -> datetime:
    if value is None:
        raise ValueError("a date is required")
    return parse_datetime(value)
