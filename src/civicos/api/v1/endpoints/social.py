# src/civicos/api/v1/endpoints/social.py
"""Social feed endpoints for the CivicOS API."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, Query, status
from sqlalchemy import and_, or_
from sqlalchemy.orm import Session

from civicos.api.v1.dependencies import CurrentUserDep, SessionDep
from civicos.api.v1.errors import to_http_exception
from civicos.models import SocialComment, SocialLike, SocialPost, User
from civicos.models.social import VISIBILITY_FRIENDS, VISIBILITY_PUBLIC
from civicos.schemas.social import (
    CommentCreate,
    CommentResponse,
    LikeResponse,
    PostCreate,
    PostResponse,
)
from civicos.services import social as social_service
from civicos.services.counters import count_grouped, count_matching
from civicos.services.exceptions import CivicServiceError
from civicos.services.friends import friend_ids

router = APIRouter(prefix="/social", tags=["social"])


def _get_visible_post_or_404(db: Session, post_id: int, user: User) -> SocialPost:
    post = db.get(SocialPost, post_id)
    if post is None or post.deleted or not _can_view(db, post, user):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Post not found")
    return post


def _can_view(db: Session, post: SocialPost, user: User) -> bool:
    if post.visibility == VISIBILITY_PUBLIC or post.user_id == user.id:
        return True
    return post.visibility == VISIBILITY_FRIENDS and post.user_id in friend_ids(db, user.id)


def _to_responses(db: Session, posts: list[SocialPost], viewer: User) -> list[PostResponse]:
    """Attach like/comment counts and the viewer's like state in three grouped queries."""
    post_ids = [post.id for post in posts]
    likes = count_grouped(db, SocialLike.post_id, post_ids)
    comments = count_grouped(db, SocialComment.post_id, post_ids, SocialComment.deleted.is_(False))
    liked = count_grouped(db, SocialLike.post_id, post_ids, SocialLike.user_id == viewer.id)

    authors: dict[int, str] = {}
    author_ids = {post.user_id for post in posts}
    if author_ids:
        for user in db.query(User).filter(User.id.in_(author_ids)).all():
            authors[user.id] = user.display_name

    return [
        PostResponse.model_validate(post).model_copy(
            update={
                "author_name": authors.get(post.user_id),
                "likes_count": likes[post.id],
                "comments_count": comments[post.id],
                "is_liked": liked[post.id] > 0,
            }
        )
        for post in posts
    ]


@router.get("/posts", response_model=list[PostResponse])
async def list_posts(
    db: SessionDep,
    current_user: CurrentUserDep,
    limit: int = Query(20, ge=1, le=100),
    offset: int = Query(0, ge=0),
    author_id: int | None = Query(None, alias="authorId"),
) -> list[PostResponse]:
    """Feed of public posts, friends-only posts from friends and the caller's own, newest first."""
    friends = sorted(friend_ids(db, current_user.id))
    query = db.query(SocialPost).filter(
        SocialPost.deleted.is_(False),
        or_(
            SocialPost.visibility == VISIBILITY_PUBLIC,
            SocialPost.user_id == current_user.id,
            and_(SocialPost.visibility == VISIBILITY_FRIENDS, SocialPost.user_id.in_(friends)),
        ),
    )
    if author_id is not None:
        query = query.filter(SocialPost.user_id == author_id)

    posts = (
        query.order_by(SocialPost.created_at.desc(), SocialPost.id.desc())
        .offset(offset)
        .limit(limit)
        .all()
    )
    return _to_responses(db, posts, current_user)


@router.post("/posts", response_model=PostResponse, status_code=status.HTTP_201_CREATED)
async def create_post(payload: PostCreate, db: SessionDep, current_user: CurrentUserDep) -> PostResponse:
    content = payload.content.strip()
    if not content:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Content is required")

    post = social_service.create_post(
        db,
        current_user.id,
        content,
        image_url=payload.image_url,
        visibility=payload.visibility,
    )
    return _to_responses(db, [post], current_user)[0]


@router.delete("/posts/{post_id}", response_model=PostResponse)
async def delete_post(post_id: int, db: SessionDep, current_user: CurrentUserDep) -> PostResponse:
    """Tombstone a post. Only its author may delete it."""
    try:
        post = social_service.soft_delete_post(db, post_id, current_user.id)
    except CivicServiceError as err:
        raise to_http_exception(err) from err
    return PostResponse.model_validate(post)


@router.post("/posts/{post_id}/like", response_model=LikeResponse)
async def like_post(post_id: int, db: SessionDep, current_user: CurrentUserDep) -> LikeResponse:
    """Toggle the caller's like on a post."""
    _get_visible_post_or_404(db, post_id, current_user)
    try:
        liked = social_service.toggle_like(db, post_id, current_user.id)
    except CivicServiceError as err:
        raise to_http_exception(err) from err
    return LikeResponse(liked=liked, likes_count=count_matching(db, SocialLike.post_id, post_id))


@router.post(
    "/posts/{post_id}/comment",
    response_model=CommentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def comment_on_post(
    post_id: int,
    payload: CommentCreate,
    db: SessionDep,
    current_user: CurrentUserDep,
) -> CommentResponse:
    content = payload.content.strip()
    if not content:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Content is required")

    _get_visible_post_or_404(db, post_id, current_user)
    try:
        comment = social_service.add_comment(
            db,
            post_id,
            current_user.id,
            content,
            parent_comment_id=payload.parent_comment_id,
        )
    except CivicServiceError as err:
        raise to_http_exception(err) from err
    return CommentResponse.model_validate(comment)


@router.get("/posts/{post_id}/comments", response_model=list[CommentResponse])
async def list_comments(post_id: int, db: SessionDep, current_user: CurrentUserDep) -> list[SocialComment]:
    _get_visible_post_or_404(db, post_id, current_user)
    return (
        db.query(SocialComment)
        .filter(SocialComment.post_id == post_id)
        .order_by(SocialComment.created_at.asc(), SocialComment.id.asc())
        .all()
    )


@router.delete("/comments/{comment_id}", response_model=CommentResponse)
async def delete_comment(comment_id: int, db: SessionDep, current_user: CurrentUserDep) -> CommentResponse:
    try:
        comment = social_service.soft_delete_comment(db, comment_id, current_user.id)
    except CivicServiceError as err:
        raise to_http_exception(err) from err
    return CommentResponse.model_validate(comment)
