# mypy: ignore-errors
# tests/services/test_counters.py
"""Tests for the grouped row counters."""

from civicos.models import SocialLike, SocialPost
from civicos.services.counters import (
    count_by_value,
    count_grouped,
    count_grouped_by_value,
    count_matching,
)


def _post(db_session, user, content="hello"):
    post = SocialPost(user_id=user.id, content=content)
    db_session.add(post)
    db_session.flush()
    return post


def test_count_matching_single_item(db_session, make_user) -> None:
    author = make_user()
    post = _post(db_session, author)
    for _ in range(3):
        db_session.add(SocialLike(post_id=post.id, user_id=make_user().id))
    db_session.flush()

    assert count_matching(db_session, SocialLike.post_id, post.id) == 3
    assert count_matching(db_session, SocialLike.post_id, post.id, SocialLike.user_id == author.id) == 0


def test_count_by_value_groups_reactions(db_session, make_user) -> None:
    post = _post(db_session, make_user())
    for reaction in ("like", "like", "support"):
        db_session.add(SocialLike(post_id=post.id, user_id=make_user().id, reaction=reaction))
    db_session.flush()

    assert count_by_value(db_session, SocialLike.post_id, SocialLike.reaction, post.id) == {
        "like": 2,
        "support": 1,
    }


def test_count_grouped_fills_missing_ids(db_session, make_user) -> None:
    author = make_user()
    liked = _post(db_session, author)
    quiet = _post(db_session, author)
    db_session.add(SocialLike(post_id=liked.id, user_id=make_user().id))
    db_session.flush()

    counts = count_grouped(db_session, SocialLike.post_id, [liked.id, quiet.id, liked.id])

    assert counts == {liked.id: 1, quiet.id: 0}


def test_count_grouped_empty_input_skips_query(db_session) -> None:
    assert count_grouped(db_session, SocialLike.post_id, []) == {}
    assert count_grouped_by_value(db_session, SocialLike.post_id, SocialLike.reaction, []) == {}


def test_count_grouped_by_value(db_session, make_user) -> None:
    author = make_user()
    first = _post(db_session, author)
    second = _post(db_session, author)
    db_session.add_all(
        [
            SocialLike(post_id=first.id, user_id=make_user().id, reaction="like"),
            SocialLike(post_id=first.id, user_id=make_user().id, reaction="support"),
            SocialLike(post_id=second.id, user_id=make_user().id, reaction="like"),
        ]
    )
    db_session.flush()

    grouped = count_grouped_by_value(
        db_session,
        SocialLike.post_id,
        SocialLike.reaction,
        [first.id, second.id],
    )

    assert grouped == {first.id: {"like": 1, "support": 1}, second.id: {"like": 1}}
