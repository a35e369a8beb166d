# src/civicos/api/v1/__init__.py
"""Version 1 API endpoints."""

from .endpoints import (
    auth_router,
    bills_router,
    dashboard_router,
    friends_router,
    legal_router,
    petitions_router,
    politicians_router,
    social_router,
    voting_router,
)

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
