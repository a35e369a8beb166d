"""Following politicians from the dashboard."""
from __future__ import annotations

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from civicos.models import Politician, TrackedPolitician
from civicos.services.activity import record_activity
from civicos.services.exceptions import DuplicateInteractionError, NotFoundError

logger = logging.getLogger(__name__)


def track_politician(db: Session, user_id: int, politician_id: int) -> TrackedPolitician:
    """Start tracking a politician.

    Raises:
        NotFoundError: If the politician does not exist.
        DuplicateInteractionError: If the user already tracks them.
    """
    politician = db.get(Politician, politician_id)
    if politician is None:
        raise NotFoundError("Politician not found")

    tracked = TrackedPolitician(user_id=user_id, politician_id=politician_id)
    try:
        with db.begin_nested():
            db.add(tracked)
    except IntegrityError as err:
        raise DuplicateInteractionError("You already track this politician") from err

    record_activity(
        db,
        user_id,
        "politician_tracked",
        entity_type="politician",
        entity_id=politician_id,
        details={"title": f"Started tracking {politician.name}"},
    )
    db.commit()
    db.refresh(tracked)
    logger.info("User %s tracks politician %s", user_id, politician_id)
    return tracked


def untrack_politician(db: Session, user_id: int, politician_id: int) -> None:
    """Stop tracking a politician; raises NotFoundError if not tracked."""
    deleted = (
        db.query(TrackedPolitician)
        .filter(
            TrackedPolitician.user_id == user_id,
            TrackedPolitician.politician_id == politician_id,
        )
        .delete(synchronize_session=False)
    )
    if not deleted:
        raise NotFoundError("Politician is not tracked")
    db.commit()
