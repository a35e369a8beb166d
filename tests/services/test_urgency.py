# mypy: ignore-errors
# tests/services/test_urgency.py
"""Tests for petition urgency tiers and deadline arithmetic."""

from datetime import UTC, datetime, timedelta

import pytest

from civicos.services.urgency import UrgencyTier, classify, days_left

_ORDER = [UrgencyTier.LOW, UrgencyTier.MEDIUM, UrgencyTier.HIGH, UrgencyTier.CRITICAL]


@pytest.mark.parametrize(
    ("current", "target", "expected"),
    [
        (400, 500, UrgencyTier.CRITICAL),  # exactly 80%
        (399, 500, UrgencyTier.HIGH),
        (300, 500, UrgencyTier.HIGH),  # exactly 60%
        (299, 500, UrgencyTier.MEDIUM),
        (200, 500, UrgencyTier.MEDIUM),  # exactly 40%
        (199, 500, UrgencyTier.LOW),
        (0, 500, UrgencyTier.LOW),
        (750, 500, UrgencyTier.CRITICAL),
    ],
)
def test_classify_boundaries(current, target, expected) -> None:
    assert classify(current, target) is expected


def test_classify_zero_target_is_low() -> None:
    assert classify(0, 0) is UrgencyTier.LOW
    assert classify(25, 0) is UrgencyTier.LOW


def test_classify_negative_target_is_low() -> None:
    assert classify(10, -5) is UrgencyTier.LOW


@pytest.mark.parametrize("target", [1, 7, 100, 500, 1234])
def test_classify_is_monotonic(target) -> None:
    """Urgency never drops as signatures accumulate."""
    ranks = [_ORDER.index(classify(current, target)) for current in range(0, target * 2 + 1)]
    assert ranks == sorted(ranks)


def test_tier_serialises_as_display_string() -> None:
    assert UrgencyTier.CRITICAL == "Critical"
    assert classify(1, 2).value == "Medium"


def test_days_left_rounds_up_partial_days() -> None:
    now = datetime(2026, 1, 1, 12, 0, tzinfo=UTC)
    assert days_left(now + timedelta(days=2, hours=1), now=now) == 3
    assert days_left(now + timedelta(days=2), now=now) == 2


def test_days_left_never_negative() -> None:
    now = datetime(2026, 1, 1, tzinfo=UTC)
    assert days_left(now - timedelta(days=4), now=now) == 0


def test_days_left_handles_naive_and_missing_deadlines() -> None:
    now = datetime(2026, 1, 1, tzinfo=UTC)
    assert days_left(datetime(2026, 1, 11), now=now) == 10
    assert days_left(None, now=now) is None
