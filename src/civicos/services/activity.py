"""Activity log writes and civic point awards."""
from __future__ import annotations

from typing import Any

from sqlalchemy import update
from sqlalchemy.orm import Session

from civicos.models import User, UserActivity


def record_activity(
    db: Session,
    user_id: int,
    activity_type: str,
    *,
    entity_type: str | None = None,
    entity_id: int | None = None,
    details: dict[str, Any] | None = None,
    points: int = 0,
) -> UserActivity:
    """Append an activity row and credit ``points`` to the user.

    The caller owns the transaction; nothing is committed here.
    """
    activity = UserActivity(
        user_id=user_id,
        activity_type=activity_type,
        entity_type=entity_type,
        entity_id=entity_id,
        details=details,
        points_earned=points,
    )
    db.add(activity)

    if points:
        db.execute(
            update(User)
            .where(User.id == user_id)
            .values(civic_points=User.civic_points + points)
            .execution_options(synchronize_session="fetch")
        )
    return activity
