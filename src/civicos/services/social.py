"""Social feed writes: posts, comments and likes."""
from __future__ import annotations

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from civicos.models import SocialComment, SocialLike, SocialPost
from civicos.models.social import TOMBSTONE, VISIBILITY_PUBLIC
from civicos.services.activity import record_activity
from civicos.services.exceptions import NotFoundError, PermissionDeniedError

logger = logging.getLogger(__name__)


def _get_post(db: Session, post_id: int) -> SocialPost:
    post = db.get(SocialPost, post_id)
    if post is None or post.deleted:
        raise NotFoundError("Post not found")
    return post


def create_post(
    db: Session,
    user_id: int,
    content: str,
    image_url: str | None = None,
    visibility: str = VISIBILITY_PUBLIC,
) -> SocialPost:
    post = SocialPost(user_id=user_id, content=content, image_url=image_url, visibility=visibility)
    db.add(post)
    db.flush()
    record_activity(db, user_id, "post_created", entity_type="post", entity_id=post.id)
    db.commit()
    db.refresh(post)
    return post


def add_comment(
    db: Session,
    post_id: int,
    user_id: int,
    content: str,
    parent_comment_id: int | None = None,
) -> SocialComment:
    """Attach a comment to a live post.

    Raises:
        NotFoundError: If the post (or the parent comment) does not exist.
    """
    _get_post(db, post_id)
    if parent_comment_id is not None:
        parent = db.get(SocialComment, parent_comment_id)
        if parent is None or parent.post_id != post_id:
            raise NotFoundError("Parent comment not found")

    comment = SocialComment(
        post_id=post_id,
        user_id=user_id,
        content=content,
        parent_comment_id=parent_comment_id,
    )
    db.add(comment)
    db.commit()
    db.refresh(comment)
    return comment


def toggle_like(db: Session, post_id: int, user_id: int, reaction: str = "like") -> bool:
    """Like the post, or remove an existing like.

    Returns:
        True if the post is liked by the user afterwards.
    """
    _get_post(db, post_id)

    existing = (
        db.query(SocialLike)
        .filter(SocialLike.post_id == post_id, SocialLike.user_id == user_id)
        .first()
    )
    if existing is not None:
        db.delete(existing)
        db.commit()
        return False

    try:
        with db.begin_nested():
            db.add(SocialLike(post_id=post_id, user_id=user_id, reaction=reaction))
    except IntegrityError:
        # Another request liked it first; the end state is the same.
        logger.info("Concurrent like on post %s by user %s", post_id, user_id)
        return True

    db.commit()
    return True


def soft_delete_post(db: Session, post_id: int, user_id: int) -> SocialPost:
    """Replace the post body with a tombstone. Only the author may do this."""
    post = _get_post(db, post_id)
    if post.user_id != user_id:
        raise PermissionDeniedError("Only the author can delete this post")

    post.content = TOMBSTONE
    post.image_url = None
    post.deleted = True
    db.commit()
    db.refresh(post)
    logger.info("Post %s deleted by its author", post_id)
    return post


def soft_delete_comment(db: Session, comment_id: int, user_id: int) -> SocialComment:
    comment = db.get(SocialComment, comment_id)
    if comment is None or comment.deleted:
        raise NotFoundError("Comment not found")
    if comment.user_id != user_id:
        raise PermissionDeniedError("Only the author can delete this comment")

    comment.content = TOMBSTONE
    comment.deleted = True
    db.commit()
    db.refresh(comment)
    return comment
