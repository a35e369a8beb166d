"""Petition creation and signing."""
from __future__ import annotations

import logging
from datetime import datetime, timedelta

from sqlalchemy import update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from civicos.core.settings import settings
from civicos.db.time import utcnow
from civicos.models import Petition, PetitionSignature
from civicos.services.activity import record_activity
from civicos.services.exceptions import DuplicateInteractionError, NotFoundError

logger = logging.getLogger(__name__)


def create_petition(
    db: Session,
    *,
    creator_id: int,
    title: str,
    target_signatures: int,
    description: str | None = None,
    category: str | None = None,
    jurisdiction: str | None = None,
    deadline: datetime | None = None,
    related_bill_id: int | None = None,
) -> Petition:
    """Create a petition; a missing deadline defaults to the configured duration."""
    petition = Petition(
        title=title,
        description=description,
        category=category,
        jurisdiction=jurisdiction,
        target_signatures=target_signatures,
        current_signatures=0,
        deadline=deadline or utcnow() + timedelta(days=settings.petition_default_duration_days),
        creator_id=creator_id,
        related_bill_id=related_bill_id,
    )
    db.add(petition)
    db.flush()

    record_activity(
        db,
        creator_id,
        "petition_created",
        entity_type="petition",
        entity_id=petition.id,
        details={"title": f"Created petition: {title}"},
    )
    db.commit()
    db.refresh(petition)
    logger.info("User %s created petition %s", creator_id, petition.id)
    return petition


def sign_petition(
    db: Session,
    petition_id: int,
    user_id: int,
    verification_id: str,
) -> PetitionSignature:
    """Add a user's signature and bump the petition's counter by one.

    Raises:
        NotFoundError: If the petition does not exist.
        DuplicateInteractionError: If the user already signed; the counter is untouched.
    """
    petition = db.get(Petition, petition_id)
    if petition is None:
        raise NotFoundError("Petition not found")

    signature = PetitionSignature(
        petition_id=petition_id,
        user_id=user_id,
        verification_id=verification_id,
    )
    try:
        with db.begin_nested():
            db.add(signature)
    except IntegrityError as err:
        logger.warning("Rejected duplicate signature by user %s on petition %s", user_id, petition_id)
        raise DuplicateInteractionError("You have already signed this petition") from err

    # Incremented in SQL so concurrent signers never lose an update.
    db.execute(
        update(Petition)
        .where(Petition.id == petition_id)
        .values(current_signatures=Petition.current_signatures + 1)
        .execution_options(synchronize_session=False)
    )
    record_activity(
        db,
        user_id,
        "petition_signed",
        entity_type="petition",
        entity_id=petition_id,
        details={"title": f"Signed petition: {petition.title}"},
        points=settings.civic_points_per_signature,
    )
    db.commit()
    db.refresh(signature)
    db.refresh(petition)
    logger.info("User %s signed petition %s", user_id, petition_id)
    return signature


def has_signed(db: Session, petition_id: int, user_id: int) -> bool:
    return (
        db.query(PetitionSignature.id)
        .filter(
            PetitionSignature.petition_id == petition_id,
            PetitionSignature.user_id == user_id,
        )
        .first()
        is not None
    )


def signed_petition_ids(db: Session, user_id: int, petition_ids: list[int]) -> set[int]:
    """Return the subset of ``petition_ids`` the user has signed, in one query."""
    if not petition_ids:
        return set()
    rows = (
        db.query(PetitionSignature.petition_id)
        .filter(
            PetitionSignature.user_id == user_id,
            PetitionSignature.petition_id.in_(petition_ids),
        )
        .all()
    )
    return {petition_id for (petition_id,) in rows}
