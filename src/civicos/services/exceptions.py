"""Errors raised by the service layer and translated by the API routers."""


class CivicServiceError(Exception):
    """Base class for expected, client-facing service failures."""


class NotFoundError(CivicServiceError):
    """Raised when a referenced entity does not exist."""


class DuplicateInteractionError(CivicServiceError):
    """Raised when a user repeats a once-only interaction (vote, signature, follow, friend request)."""


class PermissionDeniedError(CivicServiceError):
    """Raised when a user acts on content they do not own."""
