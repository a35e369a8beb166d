"""Bill-related Pydantic schemas."""

from datetime import date, datetime
from typing import Literal

from pydantic import BaseModel

from civicos.schemas.common import CamelModel
from civicos.schemas.vote import VoteTallyResponse


class BillResponse(CamelModel):
    """Bill with its aggregated citizen vote counts."""

    id: int
    bill_number: str | None
    title: str
    description: str | None
    summary: str | None
    status: str
    category: str | None
    jurisdiction: str | None
    sponsor_name: str | None
    introduced_date: date | None
    voting_deadline: datetime | None
    created_at: datetime
    vote_stats: VoteTallyResponse = VoteTallyResponse()


class PublicSupport(BaseModel):
    """Rounded percentage split of citizen votes."""

    yes: int = 0
    no: int = 0
    neutral: int = 0


class BillDetailResponse(BillResponse):
    """Single bill with support percentages and the caller's own vote."""

    public_support: PublicSupport = PublicSupport()
    user_vote: Literal["yes", "no", "abstain"] | None = None


class BillStatsResponse(CamelModel):
    """Bill counts broken down by status and category."""

    total: int
    by_status: dict[str, int]
    by_category: dict[str, int]
