"""Social feed Pydantic schemas."""

from datetime import datetime
from typing import Literal

from pydantic import Field

from civicos.schemas.common import CamelModel


class PostCreate(CamelModel):
    """Schema for publishing a post. Blank content is rejected by the router."""

    content: str = Field("", max_length=5000)
    image_url: str | None = Field(None, max_length=500)
    visibility: Literal["public", "friends", "private"] = "public"


class PostResponse(CamelModel):
    """Feed post with its interaction counts."""

    id: int
    user_id: int
    author_name: str | None = None
    content: str
    image_url: str | None
    visibility: str
    deleted: bool
    created_at: datetime
    likes_count: int = 0
    comments_count: int = 0
    is_liked: bool = False


class CommentCreate(CamelModel):
    content: str = Field("", max_length=2000)
    parent_comment_id: int | None = None


class CommentResponse(CamelModel):
    id: int
    post_id: int
    user_id: int
    content: str
    parent_comment_id: int | None
    deleted: bool
    created_at: datetime


class LikeResponse(CamelModel):
    liked: bool
    likes_count: int
