"""Dashboard Pydantic schemas."""

from datetime import datetime
from typing import Any

from civicos.schemas.common import CamelModel


class ActivityItem(CamelModel):
    """Condensed activity row for the dashboard card."""

    id: int
    type: str
    title: str
    timestamp: datetime
    icon: str


class DashboardStatsResponse(CamelModel):
    total_votes: int
    active_bills: int
    politicians_tracked: int
    petitions_signed: int
    civic_points: int
    trust_score: float
    recent_activity: list[ActivityItem]


class ActivityResponse(CamelModel):
    """Full activity log entry."""

    id: int
    activity_type: str
    entity_type: str | None
    entity_id: int | None
    details: dict[str, Any] | None
    points_earned: int
    created_at: datetime
