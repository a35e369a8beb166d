# src/civicos/api/v1/endpoints/politicians.py
"""Politician directory endpoints for the CivicOS API."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, Response, status
from sqlalchemy import func, or_
from sqlalchemy.orm import Session

from civicos.api.v1.dependencies import CurrentUserDep, OptionalUserDep, SessionDep
from civicos.api.v1.errors import to_http_exception
from civicos.models import (
    BillRollcall,
    Politician,
    PoliticianPosition,
    PoliticianStatement,
    RollcallRecord,
    TrackedPolitician,
)
from civicos.schemas.politician import (
    PoliticianDetailResponse,
    PoliticianResponse,
    PoliticianVotesResponse,
    RollcallVoteResponse,
    TrackResponse,
)
from civicos.services.counters import count_matching
from civicos.services.exceptions import CivicServiceError
from civicos.services.politicians import track_politician, untrack_politician
from civicos.services.trust import refresh_trust_score

router = APIRouter(prefix="/politicians", tags=["politicians"])


def _get_politician_or_404(db: Session, politician_id: int) -> Politician:
    politician = db.get(Politician, politician_id)
    if politician is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Politician not found")
    return politician


@router.get("", response_model=list[PoliticianResponse])
async def list_politicians(
    db: SessionDep,
    level: str | None = None,
    jurisdiction: str | None = None,
    party: str | None = None,
    search: str | None = None,
) -> list[Politician]:
    """List politicians ordered by name with optional filters."""
    query = db.query(Politician)
    if level:
        query = query.filter(Politician.level == level)
    if jurisdiction:
        query = query.filter(Politician.jurisdiction == jurisdiction)
    if party:
        query = query.filter(Politician.party == party)
    if search:
        pattern = f"%{search}%"
        query = query.filter(
            or_(
                Politician.name.ilike(pattern),
                Politician.riding.ilike(pattern),
                Politician.position.ilike(pattern),
            )
        )
    return query.order_by(Politician.name).all()


@router.get("/{politician_id}", response_model=PoliticianDetailResponse)
async def get_politician(
    politician_id: int,
    db: SessionDep,
    current_user: OptionalUserDep,
) -> PoliticianDetailResponse:
    """Return a politician after refreshing their cached trust score."""
    politician = _get_politician_or_404(db, politician_id)
    refresh_trust_score(db, politician)

    is_tracked = False
    if current_user is not None:
        is_tracked = count_matching(
            db,
            TrackedPolitician.politician_id,
            politician.id,
            TrackedPolitician.user_id == current_user.id,
        ) > 0

    return PoliticianDetailResponse.model_validate(politician).model_copy(
        update={
            "statements_count": count_matching(db, PoliticianStatement.politician_id, politician.id),
            "positions_count": count_matching(db, PoliticianPosition.politician_id, politician.id),
            "is_tracked": is_tracked,
        }
    )


@router.get("/{politician_id}/votes", response_model=PoliticianVotesResponse)
async def get_politician_votes(politician_id: int, db: SessionDep) -> PoliticianVotesResponse:
    """Return the politician's roll-call voting record and a decision summary."""
    politician = _get_politician_or_404(db, politician_id)
    if not politician.parliament_member_id:
        return PoliticianVotesResponse(politician_id=politician.id, votes=[], summary={})

    member_id = politician.parliament_member_id
    rows = (
        db.query(RollcallRecord, BillRollcall)
        .join(BillRollcall, BillRollcall.id == RollcallRecord.rollcall_id)
        .filter(RollcallRecord.member_id == member_id)
        .order_by(BillRollcall.held_at.desc(), BillRollcall.id.desc())
        .all()
    )
    summary = dict(
        db.query(func.lower(RollcallRecord.decision), func.count())
        .filter(RollcallRecord.member_id == member_id)
        .group_by(func.lower(RollcallRecord.decision))
        .all()
    )
    votes = [
        RollcallVoteResponse(
            rollcall_id=rollcall.id,
            bill_number=rollcall.bill_number,
            vote_number=rollcall.vote_number,
            result=rollcall.result,
            held_at=rollcall.held_at,
            decision=record.decision,
        )
        for record, rollcall in rows
    ]
    return PoliticianVotesResponse(politician_id=politician.id, votes=votes, summary=summary)


@router.post(
    "/{politician_id}/track",
    response_model=TrackResponse,
    status_code=status.HTTP_201_CREATED,
)
async def track(politician_id: int, db: SessionDep, current_user: CurrentUserDep) -> TrackResponse:
    try:
        tracked = track_politician(db, current_user.id, politician_id)
    except CivicServiceError as err:
        raise to_http_exception(err) from err
    return TrackResponse(politician_id=politician_id, tracked=True, created_at=tracked.created_at)


@router.delete("/{politician_id}/track", status_code=status.HTTP_204_NO_CONTENT)
async def untrack(politician_id: int, db: SessionDep, current_user: CurrentUserDep) -> Response:
    try:
        untrack_politician(db, current_user.id, politician_id)
    except CivicServiceError as err:
        raise to_http_exception(err) from err
    return Response(status_code=status.HTTP_204_NO_CONTENT)
