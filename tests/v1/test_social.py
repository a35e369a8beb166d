# mypy: ignore-errors
# tests/v1/test_social.py
"""Tests for social feed endpoints."""

from fastapi import status

from civicos.models import SocialPost


def _create_post(client, headers, content="Town hall on Thursday", **extra):
    return client.post("/api/social/posts", json={"content": content, **extra}, headers=headers)


def test_create_post(client, auth_token, test_user) -> None:
    response = _create_post(client, auth_token)

    assert response.status_code == status.HTTP_201_CREATED
    data = response.json()
    assert data["userId"] == test_user.id
    assert data["likesCount"] == 0
    assert data["isLiked"] is False


def test_create_post_rejects_blank_content(client, auth_token) -> None:
    assert _create_post(client, auth_token, content="   ").status_code == status.HTTP_400_BAD_REQUEST


def test_feed_counts_are_attached(client, auth_token, other_auth_token) -> None:
    liked = _create_post(client, auth_token, content="Liked post").json()
    _create_post(client, auth_token, content="Quiet post")
    client.post(f"/api/social/posts/{liked['id']}/like", headers=other_auth_token)
    client.post(
        f"/api/social/posts/{liked['id']}/comment",
        json={"content": "Agreed"},
        headers=other_auth_token,
    )

    feed = client.get("/api/social/posts", headers=other_auth_token).json()

    by_content = {post["content"]: post for post in feed}
    assert by_content["Liked post"]["likesCount"] == 1
    assert by_content["Liked post"]["commentsCount"] == 1
    assert by_content["Liked post"]["isLiked"] is True
    assert by_content["Quiet post"]["likesCount"] == 0
    assert by_content["Quiet post"]["isLiked"] is False


def test_private_posts_only_visible_to_author(client, auth_token, other_auth_token) -> None:
    _create_post(client, auth_token, content="Just for me", visibility="private")

    own_feed = client.get("/api/social/posts", headers=auth_token).json()
    other_feed = client.get("/api/social/posts", headers=other_auth_token).json()

    assert [post["content"] for post in own_feed] == ["Just for me"]
    assert other_feed == []


def test_friends_posts_visible_to_accepted_friends(
    client, auth_token, other_auth_token, other_user, make_user, token_verifier
) -> None:
    stranger = {"Authorization": f"Bearer {token_verifier.issue(make_user().id)}"}
    post = _create_post(client, other_auth_token, content="Friends only", visibility="friends").json()

    assert client.get("/api/social/posts", headers=auth_token).json() == []
    request = client.post(f"/api/friends/request/{other_user.id}", headers=auth_token).json()
    # Still pending.
    assert client.get("/api/social/posts", headers=auth_token).json() == []

    client.post(f"/api/friends/requests/{request['id']}/accept", headers=other_auth_token)

    feed = client.get("/api/social/posts", headers=auth_token).json()
    assert [p["content"] for p in feed] == ["Friends only"]
    assert client.get("/api/social/posts", headers=stranger).json() == []

    comment = client.post(
        f"/api/social/posts/{post['id']}/comment",
        json={"content": "Nice"},
        headers=auth_token,
    )
    assert comment.status_code == status.HTTP_201_CREATED
    stranger_like = client.post(f"/api/social/posts/{post['id']}/like", headers=stranger)
    assert stranger_like.status_code == status.HTTP_404_NOT_FOUND


def test_like_toggles(client, auth_token) -> None:
    post_id = _create_post(client, auth_token).json()["id"]

    first = client.post(f"/api/social/posts/{post_id}/like", headers=auth_token).json()
    second = client.post(f"/api/social/posts/{post_id}/like", headers=auth_token).json()

    assert first == {"liked": True, "likesCount": 1}
    assert second == {"liked": False, "likesCount": 0}


def test_like_missing_post(client, auth_token) -> None:
    response = client.post("/api/social/posts/8080/like", headers=auth_token)
    assert response.status_code == status.HTTP_404_NOT_FOUND


def test_comment_and_list(client, auth_token) -> None:
    post_id = _create_post(client, auth_token).json()["id"]

    created = client.post(
        f"/api/social/posts/{post_id}/comment",
        json={"content": "See you there"},
        headers=auth_token,
    )
    comments = client.get(f"/api/social/posts/{post_id}/comments", headers=auth_token).json()

    assert created.status_code == status.HTTP_201_CREATED
    assert [comment["content"] for comment in comments] == ["See you there"]


def test_comment_rejects_blank_content(client, auth_token) -> None:
    post_id = _create_post(client, auth_token).json()["id"]
    response = client.post(
        f"/api/social/posts/{post_id}/comment",
        json={"content": ""},
        headers=auth_token,
    )
    assert response.status_code == status.HTTP_400_BAD_REQUEST


def test_delete_post_leaves_tombstone(client, auth_token, db_session) -> None:
    post_id = _create_post(client, auth_token).json()["id"]

    response = client.delete(f"/api/social/posts/{post_id}", headers=auth_token)

    assert response.status_code == status.HTTP_200_OK
    post = db_session.get(SocialPost, post_id)
    assert post is not None
    assert post.deleted is True
    assert post.content == "[deleted]"
    assert client.get("/api/social/posts", headers=auth_token).json() == []


def test_delete_post_by_other_user_is_forbidden(client, auth_token, other_auth_token) -> None:
    post_id = _create_post(client, auth_token).json()["id"]

    response = client.delete(f"/api/social/posts/{post_id}", headers=other_auth_token)

    assert response.status_code == status.HTTP_403_FORBIDDEN


def test_delete_comment_leaves_tombstone(client, auth_token) -> None:
    post_id = _create_post(client, auth_token).json()["id"]
    comment_id = client.post(
        f"/api/social/posts/{post_id}/comment",
        json={"content": "Typo"},
        headers=auth_token,
    ).json()["id"]

    response = client.delete(f"/api/social/comments/{comment_id}", headers=auth_token)

    assert response.status_code == status.HTTP_200_OK
    assert response.json()["content"] == "[deleted]"
    assert response.json()["deleted"] is True
