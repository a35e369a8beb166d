# src/civicos/api/v1/endpoints/dashboard.py
"""Dashboard endpoints for the CivicOS API."""

from fastapi import APIRouter, Query

from civicos.api.v1.dependencies import CurrentUserDep, SessionDep
from civicos.schemas.dashboard import ActivityItem, ActivityResponse, DashboardStatsResponse
from civicos.services.dashboard import (
    activity_icon,
    activity_title,
    compose_dashboard_stats,
    recent_activity,
)

router = APIRouter(prefix="/dashboard", tags=["dashboard"])


@router.get("/stats", response_model=DashboardStatsResponse)
async def dashboard_stats(db: SessionDep, current_user: CurrentUserDep) -> DashboardStatsResponse:
    """Return the caller's engagement figures and latest activity."""
    stats = compose_dashboard_stats(db, current_user)
    return DashboardStatsResponse(
        total_votes=stats.total_votes,
        active_bills=stats.active_bills,
        politicians_tracked=stats.politicians_tracked,
        petitions_signed=stats.petitions_signed,
        civic_points=stats.civic_points,
        trust_score=stats.trust_score,
        recent_activity=[
            ActivityItem(
                id=activity.id,
                type=activity.activity_type,
                title=activity_title(activity),
                timestamp=activity.created_at,
                icon=activity_icon(activity.activity_type),
            )
            for activity in stats.recent_activity
        ],
    )


@router.get("/activity", response_model=list[ActivityResponse])
async def activity_log(
    db: SessionDep,
    current_user: CurrentUserDep,
    limit: int = Query(20, ge=1, le=100),
) -> list[ActivityResponse]:
    return [
        ActivityResponse.model_validate(activity)
        for activity in recent_activity(db, current_user.id, limit)
    ]
