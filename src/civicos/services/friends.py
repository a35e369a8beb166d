"""Friend requests and friendships between citizens."""
from __future__ import annotations

import logging

from sqlalchemy import or_
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from civicos.models import User, UserFriend
from civicos.models.friend import FRIEND_STATUS_ACCEPTED, FRIEND_STATUS_PENDING, pair_key
from civicos.services.activity import record_activity
from civicos.services.exceptions import (
    CivicServiceError,
    DuplicateInteractionError,
    NotFoundError,
)

logger = logging.getLogger(__name__)


def _between(db: Session, user_id: int, other_id: int) -> UserFriend | None:
    return db.query(UserFriend).filter(UserFriend.pair_key == pair_key(user_id, other_id)).first()


def send_friend_request(db: Session, user_id: int, friend_id: int) -> UserFriend:
    """Send a friend request from ``user_id`` to ``friend_id``.

    Raises:
        CivicServiceError: If a user targets themselves.
        NotFoundError: If the recipient does not exist.
        DuplicateInteractionError: If a request or friendship already links the pair,
            in either direction.
    """
    if user_id == friend_id:
        raise CivicServiceError("Cannot send a friend request to yourself")
    if db.get(User, friend_id) is None:
        raise NotFoundError("User not found")

    request = UserFriend(
        user_id=user_id,
        friend_id=friend_id,
        pair_key=pair_key(user_id, friend_id),
        status=FRIEND_STATUS_PENDING,
    )
    try:
        with db.begin_nested():
            db.add(request)
    except IntegrityError as err:
        existing = _between(db, user_id, friend_id)
        if existing is not None and existing.status == FRIEND_STATUS_ACCEPTED:
            raise DuplicateInteractionError("Users are already friends") from err
        raise DuplicateInteractionError("Friend request already exists") from err

    db.commit()
    db.refresh(request)
    logger.info("User %s sent a friend request to user %s", user_id, friend_id)
    return request


def _pending_for_recipient(db: Session, request_id: int, user_id: int) -> UserFriend:
    request = db.get(UserFriend, request_id)
    if request is None or request.friend_id != user_id or request.status != FRIEND_STATUS_PENDING:
        raise NotFoundError("Friend request not found or already processed")
    return request


def accept_friend_request(db: Session, request_id: int, user_id: int) -> UserFriend:
    """Accept a pending request addressed to ``user_id``."""
    request = _pending_for_recipient(db, request_id, user_id)
    request.status = FRIEND_STATUS_ACCEPTED
    record_activity(
        db,
        user_id,
        "friend_added",
        entity_type="user",
        entity_id=request.user_id,
    )
    db.commit()
    db.refresh(request)
    return request


def reject_friend_request(db: Session, request_id: int, user_id: int) -> None:
    """Discard a pending request addressed to ``user_id``; the sender may ask again later."""
    request = _pending_for_recipient(db, request_id, user_id)
    db.delete(request)
    db.commit()


def remove_friend(db: Session, user_id: int, friend_id: int) -> None:
    """End an accepted friendship; raises NotFoundError if there is none."""
    deleted = (
        db.query(UserFriend)
        .filter(
            UserFriend.pair_key == pair_key(user_id, friend_id),
            UserFriend.status == FRIEND_STATUS_ACCEPTED,
        )
        .delete(synchronize_session=False)
    )
    if not deleted:
        raise NotFoundError("Friendship not found")
    db.commit()


def friend_ids(db: Session, user_id: int) -> set[int]:
    """Ids of every user with an accepted friendship with ``user_id``."""
    rows = (
        db.query(UserFriend.user_id, UserFriend.friend_id)
        .filter(
            or_(UserFriend.user_id == user_id, UserFriend.friend_id == user_id),
            UserFriend.status == FRIEND_STATUS_ACCEPTED,
        )
        .all()
    )
    return {friend if requester == user_id else requester for requester, friend in rows}


def list_friendships(db: Session, user_id: int) -> list[tuple[UserFriend, User]]:
    """Accepted friendships of ``user_id`` paired with the other user, newest first."""
    friendships = (
        db.query(UserFriend)
        .filter(
            or_(UserFriend.user_id == user_id, UserFriend.friend_id == user_id),
            UserFriend.status == FRIEND_STATUS_ACCEPTED,
        )
        .order_by(UserFriend.updated_at.desc(), UserFriend.id.desc())
        .all()
    )
    other_ids = {f.friend_id if f.user_id == user_id else f.user_id for f in friendships}
    users = {u.id: u for u in db.query(User).filter(User.id.in_(other_ids)).all()} if other_ids else {}
    return [
        (f, users[f.friend_id if f.user_id == user_id else f.user_id])
        for f in friendships
    ]


def pending_requests(db: Session, user_id: int) -> tuple[list[UserFriend], list[UserFriend]]:
    """Return ``(incoming, outgoing)`` pending requests for ``user_id``."""
    pending = (
        db.query(UserFriend)
        .filter(
            or_(UserFriend.user_id == user_id, UserFriend.friend_id == user_id),
            UserFriend.status == FRIEND_STATUS_PENDING,
        )
        .order_by(UserFriend.created_at.desc(), UserFriend.id.desc())
        .all()
    )
    incoming = [request for request in pending if request.friend_id == user_id]
    outgoing = [request for request in pending if request.user_id == user_id]
    return incoming, outgoing
