# src/civicos/models/vote.py
"""Models capturing citizen votes on bills and other items."""

from datetime import datetime

from sqlalchemy import (
    CheckConstraint,
    DateTime,
    ForeignKey,
    Index,
    Integer,
    SmallInteger,
    String,
    Text,
    UniqueConstraint,
)
from sqlalchemy.orm import Mapped, mapped_column

from civicos.db.session import Base
from civicos.db.time import utcnow

VOTE_YES = 1
VOTE_ABSTAIN = 0
VOTE_NO = -1

VOTE_LABELS = {VOTE_YES: "yes", VOTE_NO: "no", VOTE_ABSTAIN: "abstain"}


class Vote(Base):
    """Per-user vote on an item.

    At most one vote exists per (user, item, item type); the unique constraint
    is what enforces it, so concurrent submissions cannot both land.
    """

    __tablename__ = "votes"
    __table_args__ = (
        UniqueConstraint("user_id", "item_id", "item_type", name="uq_votes_user_item"),
        CheckConstraint("vote_value IN (1, 0, -1)", name="ck_votes_vote_value"),
        Index("ix_votes_item", "item_type", "item_id"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    )
    item_id: Mapped[int] = mapped_column(Integer, nullable=False)
    item_type: Mapped[str] = mapped_column(String(32), nullable=False, default="bill")

    # 1 = yes, -1 = no, 0 = abstain.
    vote_value: Mapped[int] = mapped_column(SmallInteger, nullable=False)
    reasoning: Mapped[str | None] = mapped_column(Text, nullable=True)

    verification_id: Mapped[str] = mapped_column(String(128), nullable=False)
    # SHA-256 over the vote's identifying fields.
    integrity_hash: Mapped[str] = mapped_column(String(64), nullable=False)

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow)

    @property
    def label(self) -> str:
        """Return "yes", "no" or "abstain"."""
        return VOTE_LABELS[self.vote_value]
