# src/civicos/api/v1/endpoints/legal.py
"""Read-only legal reference endpoints for the CivicOS API."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, Query, status
from sqlalchemy import func, or_

from civicos.api.v1.dependencies import SessionDep
from civicos.models import LegalAct, LegalCase
from civicos.schemas.legal import (
    LegalActDetailResponse,
    LegalActResponse,
    LegalCaseResponse,
    LegalSearchResponse,
    LegalSearchResult,
    LegalStatsResponse,
)

router = APIRouter(prefix="/legal", tags=["legal"])

# Per record type.
SEARCH_LIMIT = 50


@router.get("/acts", response_model=list[LegalActResponse])
async def list_acts(
    db: SessionDep,
    search: str | None = None,
    jurisdiction: str | None = None,
    category: str | None = None,
    limit: int = Query(50, ge=1, le=200),
    offset: int = Query(0, ge=0),
) -> list[LegalAct]:
    """List acts alphabetically, optionally filtered."""
    query = db.query(LegalAct)
    if search and search.strip():
        pattern = f"%{search.strip()}%"
        query = query.filter(or_(LegalAct.title.ilike(pattern), LegalAct.summary.ilike(pattern)))
    if jurisdiction:
        query = query.filter(func.lower(LegalAct.jurisdiction) == jurisdiction.lower())
    if category and category != "all":
        query = query.filter(func.lower(LegalAct.category) == category.lower())
    return query.order_by(LegalAct.title.asc(), LegalAct.id.asc()).offset(offset).limit(limit).all()


@router.get("/acts/{act_id}", response_model=LegalActDetailResponse)
async def get_act(act_id: int, db: SessionDep) -> LegalAct:
    act = db.get(LegalAct, act_id)
    if act is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Legal act not found")
    return act


@router.get("/cases", response_model=list[LegalCaseResponse])
async def list_cases(
    db: SessionDep,
    search: str | None = None,
    jurisdiction: str | None = None,
    limit: int = Query(50, ge=1, le=200),
    offset: int = Query(0, ge=0),
) -> list[LegalCase]:
    """List court cases, most recently decided first."""
    query = db.query(LegalCase)
    if search and search.strip():
        pattern = f"%{search.strip()}%"
        query = query.filter(or_(LegalCase.title.ilike(pattern), LegalCase.description.ilike(pattern)))
    if jurisdiction:
        query = query.filter(func.lower(LegalCase.jurisdiction) == jurisdiction.lower())
    return (
        query.order_by(LegalCase.decided_on.desc(), LegalCase.id.desc())
        .offset(offset)
        .limit(limit)
        .all()
    )


@router.get("/cases/{case_id}", response_model=LegalCaseResponse)
async def get_case(case_id: int, db: SessionDep) -> LegalCase:
    case = db.get(LegalCase, case_id)
    if case is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Legal case not found")
    return case


@router.get("/search", response_model=LegalSearchResponse)
async def search_legal(db: SessionDep, q: str | None = None) -> LegalSearchResponse:
    """Search acts and cases together. A blank query returns no results."""
    term = (q or "").strip()
    if not term:
        return LegalSearchResponse(query=term, total_results=0, results=[])

    pattern = f"%{term}%"
    acts = (
        db.query(LegalAct)
        .filter(or_(LegalAct.title.ilike(pattern), LegalAct.summary.ilike(pattern)))
        .order_by(LegalAct.title.asc())
        .limit(SEARCH_LIMIT)
        .all()
    )
    cases = (
        db.query(LegalCase)
        .filter(or_(LegalCase.title.ilike(pattern), LegalCase.description.ilike(pattern)))
        .order_by(LegalCase.title.asc())
        .limit(SEARCH_LIMIT)
        .all()
    )
    results = [
        LegalSearchResult(id=act.id, title=act.title, description=act.summary, type="legal_act")
        for act in acts
    ] + [
        LegalSearchResult(id=case.id, title=case.title, description=case.description, type="legal_case")
        for case in cases
    ]
    return LegalSearchResponse(query=term, total_results=len(results), results=results)


@router.get("/stats", response_model=LegalStatsResponse)
async def legal_stats(db: SessionDep) -> LegalStatsResponse:
    by_jurisdiction = {
        jurisdiction or "Unspecified": count
        for jurisdiction, count in db.query(LegalAct.jurisdiction, func.count())
        .group_by(LegalAct.jurisdiction)
        .all()
    }
    return LegalStatsResponse(
        acts=sum(by_jurisdiction.values()),
        cases=db.query(func.count(LegalCase.id)).scalar() or 0,
        acts_by_jurisdiction=by_jurisdiction,
    )
