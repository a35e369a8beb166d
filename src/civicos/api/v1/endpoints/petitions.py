# src/civicos/api/v1/endpoints/petitions.py
"""Petition endpoints for the CivicOS API."""

from __future__ import annotations

import math

from fastapi import APIRouter, HTTPException, Query, status
from sqlalchemy import func, or_

from civicos.api.v1.dependencies import CurrentUserDep, OptionalUserDep, SessionDep
from civicos.api.v1.errors import to_http_exception
from civicos.models import Petition, PetitionSignature
from civicos.schemas.common import Pagination
from civicos.schemas.petition import (
    PetitionCreate,
    PetitionCreatedResponse,
    PetitionDetailResponse,
    PetitionListResponse,
    PetitionResponse,
    SignatureResponse,
    SignPetitionRequest,
    SignPetitionResponse,
)
from civicos.services.exceptions import CivicServiceError
from civicos.services.petitions import create_petition, has_signed, sign_petition, signed_petition_ids
from civicos.services.urgency import classify, days_left

router = APIRouter(prefix="/petitions", tags=["petitions"])

RECENT_SIGNATURES_LIMIT = 10


def _to_response(petition: Petition, *, signed: bool = False) -> PetitionResponse:
    """Attach urgency, remaining days and the caller's signing state."""
    return PetitionResponse.model_validate(petition).model_copy(
        update={
            "urgency": classify(petition.current_signatures, petition.target_signatures),
            "days_left": days_left(petition.deadline),
            "has_signed": signed,
        }
    )


@router.get("", response_model=PetitionListResponse)
async def list_petitions(
    db: SessionDep,
    current_user: CurrentUserDep,
    search: str | None = None,
    status_filter: str | None = Query(None, alias="status"),
    page: int = Query(1, ge=1),
    limit: int = Query(12, ge=1, le=100),
) -> PetitionListResponse:
    """Paged petition listing, newest first."""
    query = db.query(Petition)
    if search:
        pattern = f"%{search}%"
        query = query.filter(or_(Petition.title.ilike(pattern), Petition.description.ilike(pattern)))
    if status_filter:
        query = query.filter(func.lower(Petition.status) == status_filter.lower())

    total = query.order_by(None).count()
    petitions = (
        query.order_by(Petition.created_at.desc(), Petition.id.desc())
        .offset((page - 1) * limit)
        .limit(limit)
        .all()
    )
    signed = signed_petition_ids(db, current_user.id, [petition.id for petition in petitions])

    return PetitionListResponse(
        petitions=[_to_response(petition, signed=petition.id in signed) for petition in petitions],
        pagination=Pagination(
            page=page,
            limit=limit,
            total=total,
            total_pages=math.ceil(total / limit) if total else 0,
        ),
    )


@router.post("", response_model=PetitionCreatedResponse, status_code=status.HTTP_201_CREATED)
async def create(
    payload: PetitionCreate,
    db: SessionDep,
    current_user: CurrentUserDep,
) -> PetitionCreatedResponse:
    petition = create_petition(
        db,
        creator_id=current_user.id,
        title=payload.title,
        description=payload.description,
        category=payload.category,
        jurisdiction=payload.jurisdiction,
        target_signatures=payload.target_signatures,
        deadline=payload.deadline,
        related_bill_id=payload.related_bill_id,
    )
    return PetitionCreatedResponse(
        message="Petition created successfully",
        petition=_to_response(petition),
    )


@router.get("/{petition_id}", response_model=PetitionDetailResponse)
async def get_petition(
    petition_id: int,
    db: SessionDep,
    current_user: OptionalUserDep,
) -> PetitionDetailResponse:
    petition = db.get(Petition, petition_id)
    if petition is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Petition not found")

    signatures = (
        db.query(PetitionSignature)
        .filter(PetitionSignature.petition_id == petition_id)
        .order_by(PetitionSignature.signed_at.desc(), PetitionSignature.id.desc())
        .limit(RECENT_SIGNATURES_LIMIT)
        .all()
    )
    signed = current_user is not None and has_signed(db, petition_id, current_user.id)

    return PetitionDetailResponse(
        petition=_to_response(petition, signed=signed),
        signatures=[SignatureResponse.model_validate(signature) for signature in signatures],
        has_signed=signed,
    )


@router.post("/{petition_id}/sign", response_model=SignPetitionResponse)
async def sign(
    petition_id: int,
    payload: SignPetitionRequest,
    db: SessionDep,
    current_user: CurrentUserDep,
) -> SignPetitionResponse:
    """Sign a petition once; a second attempt by the same user is a 409."""
    if not payload.verification_id:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Verification ID is required",
        )

    try:
        signature = sign_petition(db, petition_id, current_user.id, payload.verification_id)
    except CivicServiceError as err:
        raise to_http_exception(err) from err

    petition = db.get(Petition, petition_id)
    return SignPetitionResponse(
        message="Petition signed successfully",
        signature=SignatureResponse.model_validate(signature),
        current_signatures=petition.current_signatures,
        urgency=classify(petition.current_signatures, petition.target_signatures),
    )
