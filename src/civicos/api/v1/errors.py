"""Translation of service-layer errors into HTTP responses."""

from fastapi import HTTPException, status

from civicos.services.exceptions import (
    CivicServiceError,
    DuplicateInteractionError,
    NotFoundError,
    PermissionDeniedError,
)

_STATUS_BY_ERROR: dict[type[CivicServiceError], int] = {
    NotFoundError: status.HTTP_404_NOT_FOUND,
    DuplicateInteractionError: status.HTTP_409_CONFLICT,
    PermissionDeniedError: status.HTTP_403_FORBIDDEN,
}


def to_http_exception(err: CivicServiceError) -> HTTPException:
    """Map a service error onto the matching status code (400 for anything else)."""
    for error_type, status_code in _STATUS_BY_ERROR.items():
        if isinstance(err, error_type):
            return HTTPException(status_code=status_code, detail=str(err))
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(err))
