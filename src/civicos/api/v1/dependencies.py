"""Shared API dependencies for authentication and common functionality."""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from civicos.core.security import InvalidTokenError, TokenVerifier
from civicos.core.settings import settings
from civicos.db.session import get_db
from civicos.models import User

# auto_error is off so a missing header yields 401 (not 403) and optional auth works
bearer_scheme = HTTPBearer(auto_error=False)

# Type alias for database session dependency
SessionDep = Annotated[Session, Depends(get_db)]
CredentialsDep = Annotated[HTTPAuthorizationCredentials | None, Depends(bearer_scheme)]


@lru_cache
def get_token_verifier() -> TokenVerifier:
    """Return the verifier configured from application settings."""
    return TokenVerifier.from_settings(settings)


TokenVerifierDep = Annotated[TokenVerifier, Depends(get_token_verifier)]


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def get_current_user(
    credentials: CredentialsDep,
    db: SessionDep,
    verifier: TokenVerifierDep,
) -> User:
    """Get the current authenticated user from the bearer token.

    Args:
        credentials: HTTP Bearer token credentials, if any were sent
        db: Database session
        verifier: Token verifier holding the signing secret

    Returns:
        User object for the authenticated user

    Raises:
        HTTPException: If the token is missing or invalid, or the user is unknown
    """
    if credentials is None:
        raise _unauthorized("Not authenticated")
    try:
        user_id = verifier.verify(credentials.credentials)
    except InvalidTokenError as err:
        raise _unauthorized("Could not validate credentials") from err

    user = db.get(User, user_id)
    if user is None:
        raise _unauthorized("User not found")
    return user


def get_optional_user(
    credentials: CredentialsDep,
    db: SessionDep,
    verifier: TokenVerifierDep,
) -> User | None:
    """Like :func:`get_current_user`, but anonymous requests resolve to ``None``.

    A token that is present but invalid is still rejected.
    """
    if credentials is None:
        return None
    return get_current_user(credentials, db, verifier)


# Type aliases for current user dependencies
CurrentUserDep = Annotated[User, Depends(get_current_user)]
OptionalUserDep = Annotated[User | None, Depends(get_optional_user)]
