# src/civicos/api/v1/endpoints/auth.py
"""Authentication endpoints for the CivicOS API."""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException, status
from sqlalchemy import func
from sqlalchemy.exc import IntegrityError

from civicos.api.v1.dependencies import CurrentUserDep, SessionDep, TokenVerifierDep
from civicos.core.security import hash_password, verify_password
from civicos.models import User
from civicos.schemas.user import AuthResponse, LoginRequest, RegisterRequest, UserResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["authentication"])


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
async def register(
    payload: RegisterRequest,
    db: SessionDep,
    verifier: TokenVerifierDep,
) -> AuthResponse:
    """Create an account and return a bearer token for it."""
    user = User(
        username=payload.username,
        email=payload.email.lower(),
        password_hash=hash_password(payload.password),
        first_name=payload.first_name,
        last_name=payload.last_name,
        city=payload.city,
        province=payload.province,
    )
    db.add(user)
    try:
        db.commit()
    except IntegrityError as err:
        db.rollback()
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Username or email already registered",
        ) from err
    db.refresh(user)
    logger.info("Registered user %s", user.id)

    return AuthResponse(token=verifier.issue(user.id), user=UserResponse.model_validate(user))


@router.post("/login", response_model=AuthResponse)
async def login(
    payload: LoginRequest,
    db: SessionDep,
    verifier: TokenVerifierDep,
) -> AuthResponse:
    """Exchange email and password for a bearer token."""
    user = db.query(User).filter(func.lower(User.email) == payload.email.lower()).first()
    if user is None or not verify_password(payload.password, user.password_hash):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid email or password",
        )
    return AuthResponse(token=verifier.issue(user.id), user=UserResponse.model_validate(user))


@router.get("/user", response_model=UserResponse)
async def read_current_user(current_user: CurrentUserDep) -> UserResponse:
    return UserResponse.model_validate(current_user)
