# src/civicos/api/v1/endpoints/friends.py
"""Friend request endpoints for the CivicOS API."""

from __future__ import annotations

from fastapi import APIRouter, status

from civicos.api.v1.dependencies import CurrentUserDep, SessionDep
from civicos.api.v1.errors import to_http_exception
from civicos.schemas.common import MessageResponse
from civicos.schemas.friend import (
    FriendRequestResponse,
    FriendRequestsResponse,
    FriendResponse,
    FriendSummary,
)
from civicos.services import friends as friends_service
from civicos.services.exceptions import CivicServiceError

router = APIRouter(prefix="/friends", tags=["friends"])


@router.get("", response_model=list[FriendResponse])
async def list_friends(db: SessionDep, current_user: CurrentUserDep) -> list[FriendResponse]:
    """Accepted friendships of the caller."""
    return [
        FriendResponse(
            friendship_id=friendship.id,
            friend=FriendSummary.model_validate(friend),
            since=friendship.updated_at,
        )
        for friendship, friend in friends_service.list_friendships(db, current_user.id)
    ]


@router.get("/requests", response_model=FriendRequestsResponse)
async def list_requests(db: SessionDep, current_user: CurrentUserDep) -> FriendRequestsResponse:
    incoming, outgoing = friends_service.pending_requests(db, current_user.id)
    return FriendRequestsResponse(
        incoming=[FriendRequestResponse.model_validate(request) for request in incoming],
        outgoing=[FriendRequestResponse.model_validate(request) for request in outgoing],
    )


@router.post(
    "/request/{user_id}",
    response_model=FriendRequestResponse,
    status_code=status.HTTP_201_CREATED,
)
async def send_request(user_id: int, db: SessionDep, current_user: CurrentUserDep) -> FriendRequestResponse:
    """Ask another user to be friends; 409 if the pair is already linked."""
    try:
        request = friends_service.send_friend_request(db, current_user.id, user_id)
    except CivicServiceError as err:
        raise to_http_exception(err) from err
    return FriendRequestResponse.model_validate(request)


@router.post("/requests/{request_id}/accept", response_model=FriendRequestResponse)
async def accept_request(request_id: int, db: SessionDep, current_user: CurrentUserDep) -> FriendRequestResponse:
    try:
        request = friends_service.accept_friend_request(db, request_id, current_user.id)
    except CivicServiceError as err:
        raise to_http_exception(err) from err
    return FriendRequestResponse.model_validate(request)


@router.post("/requests/{request_id}/reject", response_model=MessageResponse)
async def reject_request(request_id: int, db: SessionDep, current_user: CurrentUserDep) -> MessageResponse:
    try:
        friends_service.reject_friend_request(db, request_id, current_user.id)
    except CivicServiceError as err:
        raise to_http_exception(err) from err
    return MessageResponse(message="Friend request rejected")


@router.delete("/{friend_id}", response_model=MessageResponse)
async def remove_friend(friend_id: int, db: SessionDep, current_user: CurrentUserDep) -> MessageResponse:
    try:
        friends_service.remove_friend(db, current_user.id, friend_id)
    except CivicServiceError as err:
        raise to_http_exception(err) from err
    return MessageResponse(message="Friend removed")
