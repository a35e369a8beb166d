"""Petition-related Pydantic schemas."""

from datetime import datetime

from pydantic import Field

from civicos.schemas.common import CamelModel, Pagination
from civicos.services.urgency import UrgencyTier


class PetitionCreate(CamelModel):
    """Schema for starting a petition."""

    title: str = Field(..., min_length=1, max_length=500)
    description: str | None = Field(None, max_length=10000)
    category: str | None = Field(None, max_length=100)
    jurisdiction: str | None = Field(None, max_length=100)
    target_signatures: int = Field(..., ge=1)
    deadline: datetime | None = None
    related_bill_id: int | None = None


class PetitionResponse(CamelModel):
    """Petition with its progress indicators."""

    id: int
    title: str
    description: str | None
    category: str | None
    jurisdiction: str | None
    target_signatures: int
    current_signatures: int
    status: str
    deadline: datetime | None
    creator_id: int | None
    related_bill_id: int | None
    created_at: datetime
    urgency: UrgencyTier = UrgencyTier.LOW
    days_left: int | None = None
    has_signed: bool = False


class PetitionListResponse(CamelModel):
    petitions: list[PetitionResponse]
    pagination: Pagination


class PetitionCreatedResponse(CamelModel):
    message: str
    petition: PetitionResponse


class SignatureResponse(CamelModel):
    """A stored petition signature."""

    id: int
    petition_id: int
    user_id: int
    verification_id: str
    signed_at: datetime


class PetitionDetailResponse(CamelModel):
    petition: PetitionResponse
    signatures: list[SignatureResponse]
    has_signed: bool


class SignPetitionRequest(CamelModel):
    """Body of a signing request; the id is checked explicitly for a 400."""

    verification_id: str | None = Field(None, max_length=128)


class SignPetitionResponse(CamelModel):
    message: str
    signature: SignatureResponse
    current_signatures: int
    urgency: UrgencyTier
