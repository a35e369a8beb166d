"""Petition urgency tiers and deadline arithmetic."""
from __future__ import annotations

import math
from datetime import datetime
from enum import Enum

from civicos.db.time import as_utc, utcnow

_SECONDS_PER_DAY = 86_400


class UrgencyTier(str, Enum):
    """How close a petition is to its signature goal."""

    CRITICAL = "Critical"
    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"


# (minimum percent of target reached, tier), checked top-down.
_THRESHOLDS: tuple[tuple[int, UrgencyTier], ...] = (
    (80, UrgencyTier.CRITICAL),
    (60, UrgencyTier.HIGH),
    (40, UrgencyTier.MEDIUM),
)


def classify(current: int, target: int) -> UrgencyTier:
    """Map signature progress onto an urgency tier.

    Args:
        current: Signatures collected so far.
        target: Signature goal. Zero or negative targets classify as ``LOW``.

    Returns:
        ``CRITICAL`` at 80% or more of the target, ``HIGH`` at 60%,
        ``MEDIUM`` at 40%, otherwise ``LOW``.
    """
    if target <= 0:
        return UrgencyTier.LOW

    # Integer cross-multiplication keeps the boundaries exact.
    for threshold, tier in _THRESHOLDS:
        if current * 100 >= threshold * target:
            return tier
    return UrgencyTier.LOW


def days_left(deadline: datetime | None, now: datetime | None = None) -> int | None:
    """Return whole days until ``deadline`` (rounded up, never negative).

    Independent of :func:`classify`; the two are displayed side by side.
    """
    if deadline is None:
        return None
    current = as_utc(now) if now is not None else utcnow()
    remaining = (as_utc(deadline) - current).total_seconds()
    if remaining <= 0:
        return 0
    return math.ceil(remaining / _SECONDS_PER_DAY)
