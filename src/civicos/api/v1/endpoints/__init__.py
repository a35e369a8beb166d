# src/civicos/api/v1/endpoints/__init__.py
"""API endpoint modules for version 1."""

from .auth import router as auth_router
from .bills import router as bills_router
from .dashboard import router as dashboard_router
from .friends import router as friends_router
from .legal import router as legal_router
from .petitions import router as petitions_router
from .politicians import router as politicians_router
from .social import router as social_router
from .voting import router as voting_router

__all__ = [
    "auth_router",
    "bills_router",
    "dashboard_router",
    "friends_router",
    "legal_router",
    "petitions_router",
    "politicians_router",
    "social_router",
    "voting_router",
]
