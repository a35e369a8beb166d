# mypy: ignore-errors
# tests/v1/test_petitions.py
"""Tests for petition endpoints."""

from fastapi import status

from civicos.models import Petition


def _sign(client, headers, petition_id, verification_id="receipt"):
    body = {} if verification_id is None else {"verificationId": verification_id}
    return client.post(f"/api/petitions/{petition_id}/sign", json=body, headers=headers)


def test_sign_petition(client, auth_token, make_petition) -> None:
    petition = make_petition(target_signatures=500, current_signatures=399)

    response = _sign(client, auth_token, petition.id)

    assert response.status_code == status.HTTP_200_OK
    data = response.json()
    assert data["currentSignatures"] == 400
    assert data["urgency"] == "Critical"
    assert data["signature"]["verificationId"] == "receipt"


def test_sign_twice_conflicts_and_count_unchanged(client, auth_token, test_petition, db_session) -> None:
    assert _sign(client, auth_token, test_petition.id).status_code == status.HTTP_200_OK

    response = _sign(client, auth_token, test_petition.id, "second-receipt")

    assert response.status_code == status.HTTP_409_CONFLICT
    petition = db_session.get(Petition, test_petition.id)
    db_session.refresh(petition)
    assert petition.current_signatures == 1


def test_sign_requires_verification_id(client, auth_token, test_petition) -> None:
    response = _sign(client, auth_token, test_petition.id, verification_id=None)
    assert response.status_code == status.HTTP_400_BAD_REQUEST


def test_sign_unknown_petition(client, auth_token) -> None:
    assert _sign(client, auth_token, 9999).status_code == status.HTTP_404_NOT_FOUND


def test_sign_requires_authentication(client, test_petition) -> None:
    assert _sign(client, {}, test_petition.id).status_code == status.HTTP_401_UNAUTHORIZED


def test_list_petitions_marks_signed_and_urgency(client, auth_token, make_petition) -> None:
    signed = make_petition(title="Signed", target_signatures=10, current_signatures=5)
    make_petition(title="Open", target_signatures=10, current_signatures=1)
    _sign(client, auth_token, signed.id)

    response = client.get("/api/petitions", headers=auth_token)

    assert response.status_code == status.HTTP_200_OK
    data = response.json()
    by_title = {petition["title"]: petition for petition in data["petitions"]}
    assert by_title["Signed"]["hasSigned"] is True
    assert by_title["Signed"]["urgency"] == "High"
    assert by_title["Open"]["hasSigned"] is False
    assert by_title["Open"]["urgency"] == "Low"
    assert by_title["Open"]["daysLeft"] >= 9
    assert data["pagination"] == {"page": 1, "limit": 12, "total": 2, "totalPages": 1}


def test_list_petitions_paginates(client, auth_token, make_petition) -> None:
    for n in range(5):
        make_petition(title=f"Petition {n}")

    data = client.get("/api/petitions", params={"page": 2, "limit": 2}, headers=auth_token).json()

    assert len(data["petitions"]) == 2
    assert data["pagination"]["totalPages"] == 3


def test_create_petition(client, auth_token, test_user) -> None:
    response = client.post(
        "/api/petitions",
        json={"title": "Protect wetlands", "targetSignatures": 1000, "category": "Environment"},
        headers=auth_token,
    )

    assert response.status_code == status.HTTP_201_CREATED
    petition = response.json()["petition"]
    assert petition["creatorId"] == test_user.id
    assert petition["currentSignatures"] == 0
    assert petition["urgency"] == "Low"
    assert petition["deadline"] is not None


def test_create_petition_validates_target(client, auth_token) -> None:
    response = client.post(
        "/api/petitions",
        json={"title": "Nothing", "targetSignatures": 0},
        headers=auth_token,
    )
    assert response.status_code == 422


def test_get_petition_detail(client, auth_token, test_petition) -> None:
    _sign(client, auth_token, test_petition.id)

    response = client.get(f"/api/petitions/{test_petition.id}", headers=auth_token)

    assert response.status_code == status.HTTP_200_OK
    data = response.json()
    assert data["hasSigned"] is True
    assert len(data["signatures"]) == 1
    assert data["petition"]["currentSignatures"] == 1


def test_get_missing_petition(client) -> None:
    assert client.get("/api/petitions/5050").status_code == status.HTTP_404_NOT_FOUND
