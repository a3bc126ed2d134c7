"""Mapping of domain errors onto HTTP responses."""

import logfire
from fastapi import HTTPException, status

from discuss.domain.error import (
    AggregationError,
    DomainError,
    NotAuthorizedError,
    NotFoundError,
    ValidationError,
)


def to_http_exception(error: DomainError, action: str) -> HTTPException:
    """Translate a domain error raised while performing ``action``.

    Args:
        error: Error raised by a use case
        action: Short description used in log lines and generic messages

    Returns:
        HTTP exception carrying the status code for the error
    """
    if isinstance(error, ValidationError):
        logfire.warn(f"{action} rejected", error=str(error))
        return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(error))

    if isinstance(error, NotFoundError):
        return HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"{error.resource} not found",
        )

    if isinstance(error, NotAuthorizedError):
        logfire.warn(f"Unauthorized attempt to {action}", error=str(error))
        return HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=f"Not authorized to modify this {error.resource.lower()}",
        )

    if isinstance(error, AggregationError):
        logfire.error(f"Vote aggregation failed during {action}", error=str(error))
    else:
        logfire.error(f"Unexpected domain error during {action}", error=str(error))
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=f"Failed to {action}",
    )
