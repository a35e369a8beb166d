# mypy: ignore-errors
# tests/services/test_friends_service.py
"""Tests for friend requests and friendships."""

import pytest

from civicos.models import UserFriend
from civicos.models.friend import FRIEND_STATUS_ACCEPTED, pair_key
from civicos.services.exceptions import (
    CivicServiceError,
    DuplicateInteractionError,
    NotFoundError,
)
from civicos.services.friends import (
    accept_friend_request,
    friend_ids,
    list_friendships,
    pending_requests,
    reject_friend_request,
    remove_friend,
    send_friend_request,
)


def test_pair_key_ignores_direction() -> None:
    assert pair_key(7, 3) == pair_key(3, 7) == "3:7"


def test_request_then_accept(db_session, test_user, other_user) -> None:
    request = send_friend_request(db_session, test_user.id, other_user.id)

    incoming, outgoing = pending_requests(db_session, other_user.id)
    assert [r.id for r in incoming] == [request.id]
    assert outgoing == []

    accepted = accept_friend_request(db_session, request.id, other_user.id)

    assert accepted.status == FRIEND_STATUS_ACCEPTED
    assert friend_ids(db_session, test_user.id) == {other_user.id}
    assert friend_ids(db_session, other_user.id) == {test_user.id}
    assert [friend.id for _, friend in list_friendships(db_session, other_user.id)] == [test_user.id]


def test_repeat_request_conflicts(db_session, test_user, other_user) -> None:
    send_friend_request(db_session, test_user.id, other_user.id)

    with pytest.raises(DuplicateInteractionError):
        send_friend_request(db_session, test_user.id, other_user.id)

    assert db_session.query(UserFriend).count() == 1


def test_reverse_request_conflicts(db_session, test_user, other_user) -> None:
    send_friend_request(db_session, test_user.id, other_user.id)

    with pytest.raises(DuplicateInteractionError, match="already exists"):
        send_friend_request(db_session, other_user.id, test_user.id)


def test_request_after_accept_reports_friendship(db_session, test_user, other_user) -> None:
    request = send_friend_request(db_session, test_user.id, other_user.id)
    accept_friend_request(db_session, request.id, other_user.id)

    with pytest.raises(DuplicateInteractionError, match="already friends"):
        send_friend_request(db_session, other_user.id, test_user.id)


def test_cannot_befriend_self(db_session, test_user) -> None:
    with pytest.raises(CivicServiceError):
        send_friend_request(db_session, test_user.id, test_user.id)


def test_unknown_recipient(db_session, test_user) -> None:
    with pytest.raises(NotFoundError):
        send_friend_request(db_session, test_user.id, 9999)


def test_only_recipient_can_accept(db_session, test_user, other_user) -> None:
    request = send_friend_request(db_session, test_user.id, other_user.id)

    with pytest.raises(NotFoundError):
        accept_friend_request(db_session, request.id, test_user.id)


def test_rejected_request_can_be_sent_again(db_session, test_user, other_user) -> None:
    request = send_friend_request(db_session, test_user.id, other_user.id)
    reject_friend_request(db_session, request.id, other_user.id)

    again = send_friend_request(db_session, test_user.id, other_user.id)

    assert again.status == "pending"
    assert db_session.query(UserFriend).count() == 1


def test_remove_friend_either_side(db_session, test_user, other_user) -> None:
    request = send_friend_request(db_session, test_user.id, other_user.id)
    accept_friend_request(db_session, request.id, other_user.id)

    remove_friend(db_session, other_user.id, test_user.id)

    assert friend_ids(db_session, test_user.id) == set()
    with pytest.raises(NotFoundError):
        remove_friend(db_session, test_user.id, other_user.id)
