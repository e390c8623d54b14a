"""
Exceptions raised by the service layer.

Services never build HTTP responses themselves.  They raise one of the
classes below and the endpoint translates it into an
``HTTPException`` carrying ``status_code`` and the message.
"""

from fastapi import status


class ServiceError(Exception):
    """Base class for expected failures of a service operation."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class BadRequestError(ServiceError):
    """Missing or malformed input, or failed credentials check."""

    status_code = status.HTTP_400_BAD_REQUEST


class NotFoundError(ServiceError):
    status_code = status.HTTP_404_NOT_FOUND


class ConflictError(ServiceError):
    """The record would duplicate an existing one."""

    status_code = status.HTTP_409_CONFLICT
