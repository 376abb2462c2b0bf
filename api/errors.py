"""Translation of domain and repository errors into HTTP responses."""

import logging

from fastapi import HTTPException, status

from errors import (
    CheckConstraintViolatedError,
    DuplicatedKeyError,
    EntityValidationError,
    ForeignKeyViolatedError,
    InvalidDataError,
    NotFoundError,
    ServiceNotInitializedError,
    UnsupportedRelationError,
)

logger = logging.getLogger(__name__)

# Unprocessable content
HTTP_422_UNPROCESSABLE = 422

# First match wins
_STATUS_BY_ERROR = (
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (EntityValidationError, HTTP_422_UNPROCESSABLE),
    (DuplicatedKeyError, status.HTTP_409_CONFLICT),
    (ForeignKeyViolatedError, status.HTTP_409_CONFLICT),
    (InvalidDataError, status.HTTP_400_BAD_REQUEST),
    (CheckConstraintViolatedError, status.HTTP_400_BAD_REQUEST),
    (UnsupportedRelationError, status.HTTP_500_INTERNAL_SERVER_ERROR),
    (ServiceNotInitializedError, status.HTTP_503_SERVICE_UNAVAILABLE),
)


def to_http_exception(error: Exception, action: str) -> HTTPException:
    """
    Build the HTTPException reported to the shell for a failed call.

    Args:
        error: Exception raised by the service layer
        action: What was attempted, e.g. "create client"

    Returns:
        HTTPException with the mapped status code
    """
    for error_type, status_code in _STATUS_BY_ERROR:
        if isinstance(error, error_type):
            return HTTPException(status_code=status_code, detail=str(error))

    logger.exception("Unexpected error: action=%s", action)
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=f"Failed to {action}: {str(error)}",
    )
