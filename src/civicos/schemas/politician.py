"""Politician-related Pydantic schemas."""

from datetime import datetime

from civicos.schemas.common import CamelModel


class PoliticianResponse(CamelModel):
    """Directory entry for a politician."""

    id: int
    name: str
    party: str | None
    position: str | None
    riding: str | None
    level: str | None
    jurisdiction: str | None
    is_incumbent: bool
    trust_score: float
    trust_score_computed_at: datetime | None = None


class PoliticianDetailResponse(PoliticianResponse):
    biography: str | None
    parliament_member_id: str | None
    statements_count: int = 0
    positions_count: int = 0
    is_tracked: bool = False


class RollcallVoteResponse(CamelModel):
    """How the politician voted in one roll call."""

    rollcall_id: int
    bill_number: str
    vote_number: int | None
    result: str | None
    held_at: datetime | None
    decision: str


class PoliticianVotesResponse(CamelModel):
    politician_id: int
    votes: list[RollcallVoteResponse]
    summary: dict[str, int]


class TrackResponse(CamelModel):
    politician_id: int
    tracked: bool
    created_at: datetime | None = None
