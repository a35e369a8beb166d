# src/civicos/models/friend.py
"""SQLAlchemy model for friend requests and friendships."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import CheckConstraint, DateTime, ForeignKey, Integer, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from civicos.db.session import Base
from civicos.db.time import utcnow

FRIEND_STATUS_PENDING = "pending"
FRIEND_STATUS_ACCEPTED = "accepted"


def pair_key(user_id: int, friend_id: int) -> str:
    """Order-independent key for two users, e.g. ``"3:7"`` for (7, 3)."""
    low, high = sorted((user_id, friend_id))
    return f"{low}:{high}"


class UserFriend(Base):
    """A friend request from ``user_id`` to ``friend_id``.

    The row stays in place once accepted. ``pair_key`` is unique so a request
    in one direction also blocks one in the other.
    """

    __tablename__ = "user_friends"
    __table_args__ = (
        UniqueConstraint("user_id", "friend_id", name="uq_user_friends_user_friend"),
        UniqueConstraint("pair_key", name="uq_user_friends_pair"),
        CheckConstraint("user_id <> friend_id", name="ck_user_friends_not_self"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    friend_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    pair_key: Mapped[str] = mapped_column(String(64), nullable=False)
    # pending, accepted
    status: Mapped[str] = mapped_column(String(16), nullable=False, default=FRIEND_STATUS_PENDING)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utcnow,
        onupdate=utcnow,
    )
