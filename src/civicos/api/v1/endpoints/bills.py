# src/civicos/api/v1/endpoints/bills.py
"""Bill endpoints for the CivicOS API."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, Query, status
from sqlalchemy import func, or_
from sqlalchemy.orm import Session

from civicos.api.v1.dependencies import OptionalUserDep, SessionDep
from civicos.models import Bill, Vote
from civicos.models.vote import VOTE_LABELS
from civicos.schemas.bill import (
    BillDetailResponse,
    BillResponse,
    BillStatsResponse,
    PublicSupport,
)
from civicos.schemas.vote import VoteTallyResponse
from civicos.services.tally import tally_item, tally_items

router = APIRouter(prefix="/bills", tags=["bills"])

SEARCH_LIMIT = 20


def _with_vote_stats(db: Session, bills: list[Bill]) -> list[BillResponse]:
    tallies = tally_items(db, [bill.id for bill in bills])
    return [
        BillResponse.model_validate(bill).model_copy(
            update={"vote_stats": VoteTallyResponse(**tallies[bill.id].as_dict())}
        )
        for bill in bills
    ]


@router.get("", response_model=list[BillResponse])
async def list_bills(
    db: SessionDep,
    status_filter: str | None = Query(None, alias="status"),
    category: str | None = None,
    limit: int = Query(50, ge=1, le=200),
    offset: int = Query(0, ge=0),
) -> list[BillResponse]:
    """List bills, newest first, each with its citizen vote tally."""
    query = db.query(Bill)
    if status_filter:
        query = query.filter(func.lower(Bill.status) == status_filter.lower())
    if category:
        query = query.filter(Bill.category == category)

    bills = query.order_by(Bill.created_at.desc(), Bill.id.desc()).offset(offset).limit(limit).all()
    return _with_vote_stats(db, bills)


@router.get("/search", response_model=list[BillResponse])
async def search_bills(
    db: SessionDep,
    q: str | None = None,
    status_filter: str | None = Query(None, alias="status"),
) -> list[BillResponse]:
    """Case-insensitive search over title, description, number and sponsor."""
    if not q or not q.strip():
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Search query is required",
        )

    pattern = f"%{q.strip()}%"
    query = db.query(Bill).filter(
        or_(
            Bill.title.ilike(pattern),
            Bill.description.ilike(pattern),
            Bill.bill_number.ilike(pattern),
            Bill.sponsor_name.ilike(pattern),
        )
    )
    if status_filter:
        query = query.filter(func.lower(Bill.status) == status_filter.lower())

    bills = query.order_by(Bill.created_at.desc(), Bill.id.desc()).limit(SEARCH_LIMIT).all()
    return _with_vote_stats(db, bills)


@router.get("/stats", response_model=BillStatsResponse)
async def bill_stats(db: SessionDep) -> BillStatsResponse:
    by_status = dict(db.query(Bill.status, func.count()).group_by(Bill.status).all())
    by_category = {
        category or "Uncategorized": count
        for category, count in db.query(Bill.category, func.count()).group_by(Bill.category).all()
    }
    return BillStatsResponse(
        total=sum(by_status.values()),
        by_status=by_status,
        by_category=by_category,
    )


@router.get("/{bill_id}", response_model=BillDetailResponse)
async def get_bill(bill_id: int, db: SessionDep, current_user: OptionalUserDep) -> BillDetailResponse:
    """Return one bill with its tally, support split and the caller's vote."""
    bill = db.get(Bill, bill_id)
    if bill is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Bill not found")

    tally = tally_item(db, bill.id)
    user_vote = None
    if current_user is not None:
        value = (
            db.query(Vote.vote_value)
            .filter(Vote.user_id == current_user.id, Vote.item_id == bill.id, Vote.item_type == "bill")
            .scalar()
        )
        if value is not None:
            user_vote = VOTE_LABELS[value]

    return BillDetailResponse.model_validate(bill).model_copy(
        update={
            "vote_stats": VoteTallyResponse(**tally.as_dict()),
            "public_support": PublicSupport(**tally.support_percentages()),
            "user_vote": user_vote,
        }
    )
