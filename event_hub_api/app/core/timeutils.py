"""
Datetime helpers.

MongoDB stores datetimes in UTC and pymongo hands them back as naive
values.  Everything written by the services follows the same
convention so stored values compare and sort consistently.
"""

from datetime import date, datetime, time, timezone
from typing import Union


def utcnow() -> datetime:
    """Current time as a naive UTC datetime."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def to_naive_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)


def parse_datetime(value: Union[str, date, datetime]) -> datetime:
    """Parse an ISO‑8601 date or datetime into a naive UTC datetime.

    Accepts ``2025-09-01``, ``2025-09-01T10:00:00``, an explicit offset
    such as ``+03:00`` and the ``Z`` suffix.  Date-only values mean
    midnight.  Raises ``ValueError`` for anything else.
    """
    if isinstance(value, datetime):
        return to_naive_utc(value)
    if isinstance(value, date):
        return datetime.combine(value, time.min)
    text = str(value).strip()
    if not text:
        raise ValueError("empty date")
    if text[-1] in "zZ":
        text = text[:-1] + "+00:00"
    return to_naive_utc(datetime.fromisoformat(text))
