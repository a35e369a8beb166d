# mypy: ignore-errors
# tests/services/test_trust.py
"""Tests for the politician trust score."""

from datetime import timedelta

import pytest

from civicos.db.time import utcnow
from civicos.models import (
    BillRollcall,
    CampaignFinance,
    PoliticianTruthTracking,
    RollcallRecord,
)
from civicos.services import trust
from civicos.services.trust import compute_trust_score, refresh_trust_score


def _record_votes(db_session, member_id, decisions):
    rollcall = BillRollcall(bill_number="C-1")
    db_session.add(rollcall)
    db_session.flush()
    for decision in decisions:
        db_session.add(RollcallRecord(rollcall_id=rollcall.id, member_id=member_id, decision=decision))
    db_session.flush()


def test_unknown_politician_returns_none(db_session) -> None:
    assert compute_trust_score(db_session, 999) is None


def test_score_without_any_records(db_session, test_politician) -> None:
    # 60 + (50 - 50) * 0.6 - 0 - 10 * 0.2
    assert compute_trust_score(db_session, test_politician.id) == 58.0


def test_score_with_full_record(db_session, test_politician) -> None:
    _record_votes(db_session, "mp-1001", ["yes", "no", "yes", "abstain"])
    db_session.add(CampaignFinance(politician_id=test_politician.id, amount=50_000.0))
    db_session.add(PoliticianTruthTracking(politician_id=test_politician.id, truth_score=1.0))
    db_session.flush()

    # consistency 75, spend 5, truth 80: 60 + 15 - 5 - 16
    assert compute_trust_score(db_session, test_politician.id) == 54.0


def test_paired_votes_count_against_consistency(db_session, test_politician) -> None:
    _record_votes(db_session, "mp-1001", ["paired", "yes"])

    assert trust.vote_consistency(db_session, "mp-1001") == pytest.approx(50.0)


def test_spend_penalty_is_capped(db_session, test_politician) -> None:
    db_session.add(CampaignFinance(politician_id=test_politician.id, amount=10_000_000.0))
    db_session.flush()

    assert trust.spend_penalty(db_session, test_politician.id) == 20.0


def test_score_is_clamped_to_range(db_session, test_politician) -> None:
    _record_votes(db_session, "mp-1001", ["abstain"] * 5)
    db_session.add(CampaignFinance(politician_id=test_politician.id, amount=1_000_000.0))
    db_session.flush()

    score = compute_trust_score(db_session, test_politician.id)

    assert 0.0 <= score <= 100.0


def test_refresh_persists_score_and_timestamp(db_session, test_politician) -> None:
    score = refresh_trust_score(db_session, test_politician)

    assert score == 58.0
    assert test_politician.trust_score == 58.0
    assert test_politician.trust_score_computed_at is not None


def test_refresh_is_idempotent(db_session, test_politician) -> None:
    first = refresh_trust_score(db_session, test_politician)
    second = refresh_trust_score(db_session, test_politician)
    assert first == second


def test_refresh_skips_fresh_scores(db_session, test_politician, monkeypatch) -> None:
    monkeypatch.setattr(trust.settings, "trust_score_refresh_seconds", 3600)
    test_politician.trust_score = 77.0
    test_politician.trust_score_computed_at = utcnow() - timedelta(minutes=5)
    db_session.flush()

    assert refresh_trust_score(db_session, test_politician) == 77.0


def test_refresh_recomputes_stale_scores(db_session, test_politician, monkeypatch) -> None:
    monkeypatch.setattr(trust.settings, "trust_score_refresh_seconds", 60)
    test_politician.trust_score = 77.0
    test_politician.trust_score_computed_at = utcnow() - timedelta(hours=2)
    db_session.flush()

    assert refresh_trust_score(db_session, test_politician) == 58.0
