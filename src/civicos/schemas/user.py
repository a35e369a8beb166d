"""Account and authentication schemas."""

from datetime import datetime

from pydantic import Field

from civicos.schemas.common import CamelModel


class RegisterRequest(CamelModel):
    """Schema for creating an account."""

    username: str = Field(..., min_length=3, max_length=50)
    email: str = Field(..., min_length=3, max_length=255, pattern=r"^[^@\s]+@[^@\s]+$")
    password: str = Field(..., min_length=8, max_length=128)
    first_name: str | None = Field(None, max_length=100)
    last_name: str | None = Field(None, max_length=100)
    city: str | None = Field(None, max_length=100)
    province: str | None = Field(None, max_length=100)


class LoginRequest(CamelModel):
    """Schema for email/password login."""

    email: str
    password: str


class UserResponse(CamelModel):
    """Public profile of the signed-in user."""

    id: int
    username: str
    email: str | None
    first_name: str | None
    last_name: str | None
    city: str | None
    province: str | None
    civic_points: int
    trust_score: float
    created_at: datetime


class AuthResponse(CamelModel):
    """Bearer token plus the user it was issued for."""

    token: str
    token_type: str = "bearer"
    user: UserResponse
