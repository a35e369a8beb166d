# src/civicos/models/__init__.py
"""SQLAlchemy models for the CivicOS application."""

from .bill import Bill
from .friend import UserFriend
from .legal import LegalAct, LegalCase
from .petition import Petition, PetitionSignature
from .politician import (
    BillRollcall,
    CampaignFinance,
    Politician,
    PoliticianPosition,
    PoliticianStatement,
    PoliticianTruthTracking,
    RollcallRecord,
    TrackedPolitician,
)
from .social import SocialComment, SocialLike, SocialPost
from .user import User, UserActivity
from .vote import Vote

__all__ = [
    "Bill",
    "UserFriend",
    "LegalAct", "LegalCase",
    "Petition", "PetitionSignature",
    "BillRollcall", "CampaignFinance", "Politician", "PoliticianPosition",
    "PoliticianStatement", "PoliticianTruthTracking", "RollcallRecord", "TrackedPolitician",
    "SocialComment", "SocialLike", "SocialPost",
    "User", "UserActivity",
    "Vote",
]
