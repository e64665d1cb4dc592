"""Translation of domain errors into HTTP responses."""

import logfire
import pydantic
from fastapi import HTTPException, status

from stackit.domain.error import (
    DomainError,
    MismatchError,
    NotAuthorizedError,
    NotFoundError,
    SelfVoteForbiddenError,
    ValidationError,
    VersionConflictError,
)

# Seconds a client should wait before retrying after a version conflict
RETRY_AFTER_SECONDS = 1


def to_http_exception(error: Exception, action: str) -> HTTPException:
    """Map an error raised by a use case to an HTTP exception.

    Args:
        error: The raised error
        action: What the route was doing, for logs and 500 details

    Returns:
        HTTPException to raise from the route
    """
    if isinstance(error, HTTPException):
        return error

    if isinstance(error, NotFoundError):
        logfire.warn("{action}: not found", action=action, error=str(error))
        return HTTPException(status.HTTP_404_NOT_FOUND, detail=str(error))

    if isinstance(error, NotAuthorizedError):
        logfire.warn("{action}: forbidden", action=action, error=str(error))
        return HTTPException(status.HTTP_403_FORBIDDEN, detail=str(error))

    if isinstance(error, (SelfVoteForbiddenError, MismatchError, ValidationError)):
        logfire.warn("{action}: rejected", action=action, error=str(error))
        return HTTPException(status.HTTP_400_BAD_REQUEST, detail=str(error))

    if isinstance(error, VersionConflictError):
        logfire.warn(
            "{action}: concurrent modification", action=action, error=str(error)
        )
        return HTTPException(
            status.HTTP_409_CONFLICT,
            detail=str(error),
            headers={"Retry-After": str(RETRY_AFTER_SECONDS)},
        )

    if isinstance(error, DomainError):
        logfire.warn("{action}: domain error", action=action, error=str(error))
        return HTTPException(status.HTTP_400_BAD_REQUEST, detail=str(error))

    if isinstance(error, (pydantic.ValidationError, ValueError)):
        logfire.warn("{action}: invalid input", action=action, error=str(error))
        return HTTPException(status.HTTP_400_BAD_REQUEST, detail=str(error))

    logfire.exception("Unexpected error: {action}", action=action, error=str(error))
    return HTTPException(
        status.HTTP_500_INTERNAL_SERVER_ERROR, detail=f"Failed to {action}"
    )
