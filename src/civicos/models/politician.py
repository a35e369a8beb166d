# src/civicos/models/politician.py
"""SQLAlchemy models for politicians and the records their trust score draws on."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import (
    Boolean,
    DateTime,
    Float,
    ForeignKey,
    Integer,
    String,
    Text,
    UniqueConstraint,
)
from sqlalchemy.orm import Mapped, mapped_column

from civicos.db.session import Base
from civicos.db.time import utcnow


class Politician(Base):
    """Elected official listed in the directory."""

    __tablename__ = "politicians"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    party: Mapped[str | None] = mapped_column(String(100), nullable=True)
    position: Mapped[str | None] = mapped_column(String(200), nullable=True)
    riding: Mapped[str | None] = mapped_column(String(200), nullable=True)
    level: Mapped[str | None] = mapped_column(String(50), nullable=True)
    jurisdiction: Mapped[str | None] = mapped_column(String(100), nullable=True)
    # Links the politician to roll-call records published by parliament.
    parliament_member_id: Mapped[str | None] = mapped_column(
        String(64),
        unique=True,
        nullable=True,
    )
    is_incumbent: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    biography: Mapped[str | None] = mapped_column(Text, nullable=True)

    # Derived value cached on the row; refreshed when the detail page is read.
    trust_score: Mapped[float] = mapped_column(Float, nullable=False, default=50.0)
    trust_score_computed_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
    )

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utcnow,
        onupdate=utcnow,
    )


class PoliticianStatement(Base):
    """Public statement attributed to a politician."""

    __tablename__ = "politician_statements"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    politician_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("politicians.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    statement: Mapped[str] = mapped_column(Text, nullable=False)
    context: Mapped[str | None] = mapped_column(Text, nullable=True)
    source: Mapped[str | None] = mapped_column(String(500), nullable=True)
    stated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow)


class PoliticianPosition(Base):
    """Policy position held by a politician."""

    __tablename__ = "politician_positions"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    politician_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("politicians.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    position: Mapped[str] = mapped_column(String(500), nullable=False)
    stated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow)


class CampaignFinance(Base):
    """Reported campaign spending."""

    __tablename__ = "campaign_finance"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    politician_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("politicians.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    amount: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
    source: Mapped[str | None] = mapped_column(String(200), nullable=True)
    reporting_period: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)


class PoliticianTruthTracking(Base):
    """Aggregate fact-check result for a politician."""

    __tablename__ = "politician_truth_tracking"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    politician_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("politicians.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    # 0..5 scale; higher means more statements rated false.
    truth_score: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
    fact_check_result: Mapped[str | None] = mapped_column(String(100), nullable=True)
    checked_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow)


class BillRollcall(Base):
    """A recorded division on a bill."""

    __tablename__ = "bill_rollcalls"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    bill_number: Mapped[str] = mapped_column(String(32), nullable=False, index=True)
    parliament: Mapped[int | None] = mapped_column(Integer, nullable=True)
    session: Mapped[str | None] = mapped_column(String(16), nullable=True)
    vote_number: Mapped[int | None] = mapped_column(Integer, nullable=True)
    result: Mapped[str | None] = mapped_column(String(50), nullable=True)
    held_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)


class RollcallRecord(Base):
    """How one member voted in a roll call."""

    __tablename__ = "bill_rollcall_records"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    rollcall_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("bill_rollcalls.id", ondelete="CASCADE"),
        nullable=False,
    )
    member_id: Mapped[str] = mapped_column(String(64), nullable=False, index=True)
    # yes, no, abstain, paired
    decision: Mapped[str] = mapped_column(String(16), nullable=False)
    party: Mapped[str | None] = mapped_column(String(100), nullable=True)


class TrackedPolitician(Base):
    """A politician a user follows from their dashboard."""

    __tablename__ = "tracked_politicians"
    __table_args__ = (
        UniqueConstraint("user_id", "politician_id", name="uq_tracked_politicians_user"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    politician_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("politicians.id", ondelete="CASCADE"),
        nullable=False,
    )
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow)
