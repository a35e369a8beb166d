"""Per-user dashboard statistics."""
from __future__ import annotations

from dataclasses import dataclass, field

from sqlalchemy import func
from sqlalchemy.orm import Session

from civicos.core.settings import settings
from civicos.models import Bill, PetitionSignature, TrackedPolitician, User, UserActivity, Vote
from civicos.models.bill import BILL_STATUS_ACTIVE
from civicos.services.counters import count_matching

_ACTIVITY_ICONS = {
    "vote_cast": "vote",
    "petition_signed": "petition",
    "petition_created": "petition",
    "politician_tracked": "politician",
    "friend_added": "friend",
}


@dataclass
class DashboardStats:
    """Snapshot of a user's engagement figures."""

    total_votes: int = 0
    active_bills: int = 0
    politicians_tracked: int = 0
    petitions_signed: int = 0
    civic_points: int = 0
    trust_score: float = 100.0
    recent_activity: list[UserActivity] = field(default_factory=list)


def activity_icon(activity_type: str) -> str:
    return _ACTIVITY_ICONS.get(activity_type, "comment")


def activity_title(activity: UserActivity) -> str:
    """Human readable label for an activity row."""
    if activity.details and activity.details.get("title"):
        return str(activity.details["title"])
    return activity.activity_type.replace("_", " ").capitalize()


def recent_activity(db: Session, user_id: int, limit: int) -> list[UserActivity]:
    """Return the user's latest activity rows, newest first."""
    if limit <= 0:
        return []
    return (
        db.query(UserActivity)
        .filter(UserActivity.user_id == user_id)
        .order_by(UserActivity.created_at.desc(), UserActivity.id.desc())
        .limit(limit)
        .all()
    )


def compose_dashboard_stats(
    db: Session,
    user: User,
    recent_limit: int | None = None,
) -> DashboardStats:
    """Assemble the dashboard numbers for ``user``.

    Each figure comes from its own query, so the result is a best-effort read
    rather than a consistent snapshot.
    """
    limit = settings.dashboard_recent_activity_limit if recent_limit is None else recent_limit

    active_bills = db.query(func.count(Bill.id)).filter(
        func.lower(Bill.status) == BILL_STATUS_ACTIVE.lower()
    ).scalar() or 0

    return DashboardStats(
        total_votes=count_matching(db, Vote.user_id, user.id),
        active_bills=active_bills,
        politicians_tracked=count_matching(db, TrackedPolitician.user_id, user.id),
        petitions_signed=count_matching(db, PetitionSignature.user_id, user.id),
        civic_points=user.civic_points or 0,
        trust_score=user.trust_score if user.trust_score is not None else 100.0,
        recent_activity=recent_activity(db, user.id, limit),
    )
