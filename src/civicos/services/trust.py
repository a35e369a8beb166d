"""Politician trust score computation."""
from __future__ import annotations

import logging
from datetime import datetime, timedelta

from sqlalchemy import func
from sqlalchemy.orm import Session

from civicos.core.settings import settings
from civicos.db.time import as_utc, utcnow
from civicos.models import CampaignFinance, Politician, PoliticianTruthTracking, RollcallRecord

logger = logging.getLogger(__name__)

NEUTRAL_CONSISTENCY = 50.0
MAX_SPEND_PENALTY = 20.0
SPEND_PENALTY_UNIT = 10_000.0
DEFAULT_TRUTH_COMPONENT = 10.0

# Decisions that count against voting consistency.
_NON_COMMITTAL = ("abstain", "paired")


def vote_consistency(db: Session, member_id: str | None) -> float:
    """Share of recorded roll-call votes that were a firm yes or no, as a percent."""
    if not member_id:
        return NEUTRAL_CONSISTENCY

    rows = (
        db.query(func.lower(RollcallRecord.decision), func.count())
        .filter(RollcallRecord.member_id == member_id)
        .group_by(func.lower(RollcallRecord.decision))
        .all()
    )
    total = sum(count for _, count in rows)
    if total == 0:
        return NEUTRAL_CONSISTENCY
    skipped = sum(count for decision, count in rows if decision in _NON_COMMITTAL)
    return (1 - skipped / total) * 100


def spend_penalty(db: Session, politician_id: int) -> float:
    finance = (
        db.query(CampaignFinance)
        .filter(CampaignFinance.politician_id == politician_id)
        .order_by(CampaignFinance.id)
        .first()
    )
    if finance is None:
        return 0.0
    return min(MAX_SPEND_PENALTY, (finance.amount or 0.0) / SPEND_PENALTY_UNIT)


def truth_component(db: Session, politician_id: int) -> float:
    tracking = (
        db.query(PoliticianTruthTracking)
        .filter(PoliticianTruthTracking.politician_id == politician_id)
        .order_by(PoliticianTruthTracking.id)
        .first()
    )
    if tracking is None:
        return DEFAULT_TRUTH_COMPONENT
    return max(0.0, 100 - (tracking.truth_score or 0.0) * 20)


def compute_trust_score(db: Session, politician_id: int) -> float | None:
    """Compute a 0..100 trust score from voting, spending and fact-check records.

    Returns:
        The rounded score, or ``None`` when the politician does not exist.
    """
    politician = db.get(Politician, politician_id)
    if politician is None:
        return None

    consistency = vote_consistency(db, politician.parliament_member_id)
    penalty = spend_penalty(db, politician_id)
    truth = truth_component(db, politician_id)

    score = 60 + (consistency - 50) * 0.6 - penalty - truth * 0.2
    return float(max(0, min(100, round(score))))


def refresh_trust_score(
    db: Session,
    politician: Politician,
    now: datetime | None = None,
) -> float | None:
    """Recompute and persist a politician's score unless the stored one is fresh.

    Recomputation is deterministic for the same inputs, so concurrent refreshes
    agree and the last write wins.
    """
    current = now or utcnow()
    max_age = settings.trust_score_refresh_seconds
    if max_age > 0 and politician.trust_score_computed_at is not None:
        age = current - as_utc(politician.trust_score_computed_at)
        if age < timedelta(seconds=max_age):
            return politician.trust_score

    score = compute_trust_score(db, politician.id)
    if score is None:
        return None

    politician.trust_score = score
    politician.trust_score_computed_at = current
    db.commit()
    db.refresh(politician)
    logger.info("Refreshed trust score for politician %s: %s", politician.id, score)
    return score
