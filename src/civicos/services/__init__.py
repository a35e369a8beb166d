"""Business logic services for the CivicOS application."""

from .exceptions import (
    CivicServiceError,
    DuplicateInteractionError,
    NotFoundError,
    PermissionDeniedError,
)
from .tally import VoteTally, tally_item, tally_items
from .urgency import UrgencyTier, classify, days_left

__all__ = [
    "CivicServiceError",
    "DuplicateInteractionError",
    "NotFoundError",
    "PermissionDeniedError",
    "VoteTally",
    "tally_item",
    "tally_items",
    "UrgencyTier",
    "classify",
    "days_left",
]
