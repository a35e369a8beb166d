"""Casting votes on bills and other items."""
from __future__ import annotations

import hashlib
import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from civicos.core.settings import settings
from civicos.db.time import utcnow
from civicos.models import Bill, Vote
from civicos.models.vote import VOTE_LABELS
from civicos.services.activity import record_activity
from civicos.services.exceptions import DuplicateInteractionError, NotFoundError

logger = logging.getLogger(__name__)

ITEM_TYPE_BILL = "bill"


def generate_verification_id(user_id: int, item_id: int) -> str:
    """Return a receipt id of the form ``vote_<user>_<item>_<epoch ms>``."""
    millis = int(utcnow().timestamp() * 1000)
    return f"vote_{user_id}_{item_id}_{millis}"


def compute_integrity_hash(
    user_id: int,
    item_type: str,
    item_id: int,
    vote_value: int,
    verification_id: str,
) -> str:
    payload = f"{user_id}:{item_type}:{item_id}:{vote_value}:{verification_id}"
    return hashlib.sha256(payload.encode("utf-8")).hexdigest()


def cast_vote(
    db: Session,
    *,
    user_id: int,
    item_id: int,
    item_type: str,
    vote_value: int,
    verification_id: str | None = None,
    reasoning: str | None = None,
) -> Vote:
    """Record a user's vote on an item.

    Args:
        db: Database session
        user_id: Voter
        item_id: Identifier of the item voted on
        item_type: Kind of item, ``"bill"`` for bills
        vote_value: 1 (yes), 0 (abstain) or -1 (no)
        verification_id: Client receipt id; generated when omitted
        reasoning: Optional free-text justification

    Returns:
        The persisted vote.

    Raises:
        ValueError: If ``vote_value`` is not one of 1, 0, -1.
        NotFoundError: If a bill vote names an unknown bill.
        DuplicateInteractionError: If the user already voted on this item.
    """
    if vote_value not in VOTE_LABELS:
        raise ValueError(f"Invalid vote value: {vote_value}")
    if item_type == ITEM_TYPE_BILL and db.get(Bill, item_id) is None:
        raise NotFoundError("Bill not found")

    receipt = verification_id or generate_verification_id(user_id, item_id)
    vote = Vote(
        user_id=user_id,
        item_id=item_id,
        item_type=item_type,
        vote_value=vote_value,
        reasoning=reasoning,
        verification_id=receipt,
        integrity_hash=compute_integrity_hash(user_id, item_type, item_id, vote_value, receipt),
    )

    # The unique constraint decides between concurrent voters; no read-then-write check.
    try:
        with db.begin_nested():
            db.add(vote)
    except IntegrityError as err:
        logger.warning("Rejected duplicate vote by user %s on %s %s", user_id, item_type, item_id)
        raise DuplicateInteractionError("You have already voted on this item") from err

    record_activity(
        db,
        user_id,
        "vote_cast",
        entity_type=item_type,
        entity_id=item_id,
        details={"vote": VOTE_LABELS[vote_value], "verificationId": receipt},
        points=settings.civic_points_per_vote,
    )
    db.commit()
    db.refresh(vote)
    logger.info("User %s voted %s on %s %s", user_id, VOTE_LABELS[vote_value], item_type, item_id)
    return vote


def user_votes(db: Session, user_id: int, item_type: str = ITEM_TYPE_BILL) -> dict[int, str]:
    """Map item id to the user's vote label for every item of ``item_type``."""
    rows = (
        db.query(Vote.item_id, Vote.vote_value)
        .filter(Vote.user_id == user_id, Vote.item_type == item_type)
        .all()
    )
    return {item_id: VOTE_LABELS[value] for item_id, value in rows}
