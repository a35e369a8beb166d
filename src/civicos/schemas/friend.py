"""Friend request and friendship schemas."""

from datetime import datetime

from civicos.schemas.common import CamelModel


class FriendSummary(CamelModel):
    """Public view of another citizen."""

    id: int
    username: str
    display_name: str
    city: str | None = None
    province: str | None = None


class FriendRequestResponse(CamelModel):
    id: int
    user_id: int
    friend_id: int
    status: str
    created_at: datetime


class FriendRequestsResponse(CamelModel):
    """Pending requests addressed to and sent by the caller."""

    incoming: list[FriendRequestResponse]
    outgoing: list[FriendRequestResponse]


class FriendResponse(CamelModel):
    friendship_id: int
    friend: FriendSummary
    since: datetime
