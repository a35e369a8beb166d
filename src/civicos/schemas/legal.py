"""Legal reference library schemas."""

from datetime import date, datetime
from typing import Literal

from civicos.schemas.common import CamelModel


class LegalActResponse(CamelModel):
    id: int
    title: str
    act_number: str | None
    jurisdiction: str | None
    category: str | None
    summary: str | None
    source_url: str | None
    updated_at: datetime


class LegalActDetailResponse(LegalActResponse):
    """Act including its full text."""

    content: str | None


class LegalCaseResponse(CamelModel):
    id: int
    case_number: str
    title: str
    description: str | None
    jurisdiction: str | None
    status: str | None
    decided_on: date | None
    source_url: str | None


class LegalSearchResult(CamelModel):
    id: int
    title: str
    description: str | None
    type: Literal["legal_act", "legal_case"]


class LegalSearchResponse(CamelModel):
    query: str
    total_results: int
    results: list[LegalSearchResult]


class LegalStatsResponse(CamelModel):
    acts: int
    cases: int
    acts_by_jurisdiction: dict[str, int]
