# mypy: ignore-errors
# tests/services/test_petitions_service.py
"""Tests for petition signing and creation."""

import pytest

from civicos.models import Petition, PetitionSignature
from civicos.services.exceptions import DuplicateInteractionError, NotFoundError
from civicos.services.petitions import (
    create_petition,
    has_signed,
    sign_petition,
    signed_petition_ids,
)


def test_signing_increments_count_once(db_session, test_user, test_petition) -> None:
    sign_petition(db_session, test_petition.id, test_user.id, "sig-a")

    assert db_session.get(Petition, test_petition.id).current_signatures == 1
    assert has_signed(db_session, test_petition.id, test_user.id)


def test_double_signing_conflicts_and_keeps_count(db_session, test_user, test_petition) -> None:
    sign_petition(db_session, test_petition.id, test_user.id, "sig-a")

    with pytest.raises(DuplicateInteractionError):
        sign_petition(db_session, test_petition.id, test_user.id, "sig-b")

    petition = db_session.get(Petition, test_petition.id)
    db_session.refresh(petition)
    assert petition.current_signatures == 1
    assert db_session.query(PetitionSignature).count() == 1


def test_distinct_users_each_count(db_session, make_user, test_petition) -> None:
    for n in range(3):
        sign_petition(db_session, test_petition.id, make_user().id, f"sig-{n}")

    petition = db_session.get(Petition, test_petition.id)
    assert petition.current_signatures == 3


def test_signing_unknown_petition(db_session, test_user) -> None:
    with pytest.raises(NotFoundError):
        sign_petition(db_session, 31337, test_user.id, "sig")


def test_create_petition_applies_default_deadline(db_session, test_user) -> None:
    petition = create_petition(db_session, creator_id=test_user.id, title="Bike lanes", target_signatures=100)

    assert petition.deadline is not None
    assert petition.current_signatures == 0
    assert petition.creator_id == test_user.id


def test_signed_petition_ids(db_session, test_user, make_petition) -> None:
    signed = make_petition(title="Signed")
    unsigned = make_petition(title="Unsigned")
    sign_petition(db_session, signed.id, test_user.id, "sig")

    assert signed_petition_ids(db_session, test_user.id, [signed.id, unsigned.id]) == {signed.id}
    assert signed_petition_ids(db_session, test_user.id, []) == set()
