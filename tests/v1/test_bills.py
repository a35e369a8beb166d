# mypy: ignore-errors
# tests/v1/test_bills.py
"""Tests for bill endpoints."""

from fastapi import status


def _vote(client, headers, bill_id, vote):
    return client.post("/api/voting/vote", json={"itemId": bill_id, "vote": vote}, headers=headers)


def test_list_bills_includes_vote_stats(client, auth_token, make_bill) -> None:
    voted = make_bill(bill_number="C-1", title="Voted")
    make_bill(bill_number="C-2", title="Quiet")
    _vote(client, auth_token, voted.id, "yes")

    response = client.get("/api/bills")

    assert response.status_code == status.HTTP_200_OK
    stats = {bill["title"]: bill["voteStats"] for bill in response.json()}
    assert stats["Voted"]["yes_votes"] == 1
    assert stats["Quiet"] == {"total_votes": 0, "yes_votes": 0, "no_votes": 0, "abstentions": 0}


def test_list_bills_filters_by_status(client, make_bill) -> None:
    make_bill(title="Live", status="Active")
    make_bill(title="Done", status="Passed")

    response = client.get("/api/bills", params={"status": "active"})

    assert [bill["title"] for bill in response.json()] == ["Live"]


def test_get_bill_with_support_and_user_vote(client, auth_token, other_auth_token, test_bill) -> None:
    _vote(client, auth_token, test_bill.id, "yes")
    _vote(client, other_auth_token, test_bill.id, "no")

    response = client.get(f"/api/bills/{test_bill.id}", headers=auth_token)

    assert response.status_code == status.HTTP_200_OK
    data = response.json()
    assert data["voteStats"]["total_votes"] == 2
    assert data["publicSupport"] == {"yes": 50, "no": 50, "neutral": 0}
    assert data["userVote"] == "yes"


def test_get_bill_anonymously(client, test_bill) -> None:
    response = client.get(f"/api/bills/{test_bill.id}")

    assert response.status_code == status.HTTP_200_OK
    assert response.json()["userVote"] is None


def test_get_missing_bill(client) -> None:
    assert client.get("/api/bills/424242").status_code == status.HTTP_404_NOT_FOUND


def test_search_requires_query(client) -> None:
    assert client.get("/api/bills/search").status_code == status.HTTP_400_BAD_REQUEST
    assert client.get("/api/bills/search", params={"q": "  "}).status_code == status.HTTP_400_BAD_REQUEST


def test_search_matches_title_and_sponsor(client, make_bill) -> None:
    make_bill(title="Clean Water Act", sponsor_name="Jane Doe")
    make_bill(title="Transit Funding", sponsor_name="Water Board Caucus")
    make_bill(title="Unrelated")

    response = client.get("/api/bills/search", params={"q": "water"})

    assert sorted(bill["title"] for bill in response.json()) == ["Clean Water Act", "Transit Funding"]


def test_search_is_capped(client, make_bill) -> None:
    for n in range(25):
        make_bill(bill_number=f"C-{n}", title=f"Housing bill {n}")

    response = client.get("/api/bills/search", params={"q": "housing"})

    assert len(response.json()) == 20


def test_bill_stats(client, make_bill) -> None:
    make_bill(status="Active", category="Health")
    make_bill(status="Active", category="Health")
    make_bill(status="Passed", category=None)

    data = client.get("/api/bills/stats").json()

    assert data["total"] == 3
    assert data["byStatus"] == {"Active": 2, "Passed": 1}
    assert data["byCategory"] == {"Health": 2, "Uncategorized": 1}
