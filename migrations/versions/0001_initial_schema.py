"""initial schema

Revision ID: 0001_initial_schema
Revises:
Create Date: 2026-10-19 09:00:00.000000

"""
from __future__ import annotations

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "0001_initial_schema"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
    ]


def upgrade() -> None:
    """Create the users, bills, politicians, petitions, votes and social tables."""
    op.create_table(
        "users",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("username", sa.String(length=50), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=True),
        sa.Column("password_hash", sa.Text(), nullable=True),
        sa.Column("first_name", sa.String(length=100), nullable=True),
        sa.Column("last_name", sa.String(length=100), nullable=True),
        sa.Column("city", sa.String(length=100), nullable=True),
        sa.Column("province", sa.String(length=100), nullable=True),
        sa.Column("civic_points", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("trust_score", sa.Float(), nullable=False, server_default="100"),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("username"),
        sa.UniqueConstraint("email"),
    )
    op.create_table(
        "user_activities",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("user_id", sa.Integer(), nullable=False),
        sa.Column("activity_type", sa.String(length=50), nullable=False),
        sa.Column("entity_type", sa.String(length=50), nullable=True),
        sa.Column("entity_id", sa.Integer(), nullable=True),
        sa.Column("details", sa.JSON(), nullable=True),
        sa.Column("points_earned", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "ix_user_activities_user_created",
        "user_activities",
        ["user_id", "created_at"],
    )

    op.create_table(
        "bills",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("bill_number", sa.String(length=32), nullable=True),
        sa.Column("title", sa.String(length=500), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("summary", sa.Text(), nullable=True),
        sa.Column("status", sa.String(length=50), nullable=False, server_default="Active"),
        sa.Column("category", sa.String(length=100), nullable=True),
        sa.Column("jurisdiction", sa.String(length=100), nullable=True),
        sa.Column("sponsor_name", sa.String(length=200), nullable=True),
        sa.Column("introduced_date", sa.Date(), nullable=True),
        sa.Column("voting_deadline", sa.DateTime(timezone=True), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_bills_bill_number", "bills", ["bill_number"])

    op.create_table(
        "votes",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("user_id", sa.Integer(), nullable=False),
        sa.Column("item_id", sa.Integer(), nullable=False),
        sa.Column("item_type", sa.String(length=32), nullable=False, server_default="bill"),
        sa.Column("vote_value", sa.SmallInteger(), nullable=False),
        sa.Column("reasoning", sa.Text(), nullable=True),
        sa.Column("verification_id", sa.String(length=128), nullable=False),
        sa.Column("integrity_hash", sa.String(length=64), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.CheckConstraint("vote_value IN (1, 0, -1)", name="ck_votes_vote_value"),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("user_id", "item_id", "item_type", name="uq_votes_user_item"),
    )
    op.create_index("ix_votes_item", "votes", ["item_type", "item_id"])

    op.create_table(
        "petitions",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("title", sa.String(length=500), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("category", sa.String(length=100), nullable=True),
        sa.Column("jurisdiction", sa.String(length=100), nullable=True),
        sa.Column("target_signatures", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("current_signatures", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("status", sa.String(length=32), nullable=False, server_default="active"),
        sa.Column("deadline", sa.DateTime(timezone=True), nullable=True),
        sa.Column("creator_id", sa.Integer(), nullable=True),
        sa.Column("related_bill_id", sa.Integer(), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(["creator_id"], ["users.id"], ondelete="SET NULL"),
        sa.ForeignKeyConstraint(["related_bill_id"], ["bills.id"], ondelete="SET NULL"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_table(
        "petition_signatures",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("petition_id", sa.Integer(), nullable=False),
        sa.Column("user_id", sa.Integer(), nullable=False),
        sa.Column("verification_id", sa.String(length=128), nullable=False),
        sa.Column("signed_at", sa.DateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(["petition_id"], ["petitions.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("petition_id", "user_id", name="uq_petition_signatures_user"),
    )
    op.create_index(
        "ix_petition_signatures_petition_id",
        "petition_signatures",
        ["petition_id"],
    )

    op.create_table(
        "politicians",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(length=200), nullable=False),
        sa.Column("party", sa.String(length=100), nullable=True),
        sa.Column("position", sa.String(length=200), nullable=True),
        sa.Column("riding", sa.String(length=200), nullable=True),
        sa.Column("level", sa.String(length=50), nullable=True),
        sa.Column("jurisdiction", sa.String(length=100), nullable=True),
        sa.Column("parliament_member_id", sa.String(length=64), nullable=True),
        sa.Column("is_incumbent", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("biography", sa.Text(), nullable=True),
        sa.Column("trust_score", sa.Float(), nullable=False, server_default="50"),
        sa.Column("trust_score_computed_at", sa.DateTime(timezone=True), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("parliament_member_id"),
    )
    for table, columns in (
        (
            "politician_statements",
            [
                sa.Column("statement", sa.Text(), nullable=False),
                sa.Column("context", sa.Text(), nullable=True),
                sa.Column("source", sa.String(length=500), nullable=True),
                sa.Column("stated_at", sa.DateTime(timezone=True), nullable=False),
            ],
        ),
        (
            "politician_positions",
            [
                sa.Column("position", sa.String(length=500), nullable=False),
                sa.Column("stated_at", sa.DateTime(timezone=True), nullable=False),
            ],
        ),
        (
            "campaign_finance",
            [
                sa.Column("amount", sa.Float(), nullable=False, server_default="0"),
                sa.Column("source", sa.String(length=200), nullable=True),
                sa.Column("reporting_period", sa.DateTime(timezone=True), nullable=True),
            ],
        ),
        (
            "politician_truth_tracking",
            [
                sa.Column("truth_score", sa.Float(), nullable=False, server_default="0"),
                sa.Column("fact_check_result", sa.String(length=100), nullable=True),
                sa.Column("checked_at", sa.DateTime(timezone=True), nullable=False),
            ],
        ),
    ):
        op.create_table(
            table,
            sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
            sa.Column("politician_id", sa.Integer(), nullable=False),
            *columns,
            sa.ForeignKeyConstraint(["politician_id"], ["politicians.id"], ondelete="CASCADE"),
            sa.PrimaryKeyConstraint("id"),
        )
        op.create_index(f"ix_{table}_politician_id", table, ["politician_id"])

    op.create_table(
        "bill_rollcalls",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("bill_number", sa.String(length=32), nullable=False),
        sa.Column("parliament", sa.Integer(), nullable=True),
        sa.Column("session", sa.String(length=16), nullable=True),
        sa.Column("vote_number", sa.Integer(), nullable=True),
        sa.Column("result", sa.String(length=50), nullable=True),
        sa.Column("held_at", sa.DateTime(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_bill_rollcalls_bill_number", "bill_rollcalls", ["bill_number"])
    op.create_table(
        "bill_rollcall_records",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("rollcall_id", sa.Integer(), nullable=False),
        sa.Column("member_id", sa.String(length=64), nullable=False),
        sa.Column("decision", sa.String(length=16), nullable=False),
        sa.Column("party", sa.String(length=100), nullable=True),
        sa.ForeignKeyConstraint(["rollcall_id"], ["bill_rollcalls.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "ix_bill_rollcall_records_member_id",
        "bill_rollcall_records",
        ["member_id"],
    )
    op.create_table(
        "tracked_politicians",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("user_id", sa.Integer(), nullable=False),
        sa.Column("politician_id", sa.Integer(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["politician_id"], ["politicians.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("user_id", "politician_id", name="uq_tracked_politicians_user"),
    )
    op.create_index("ix_tracked_politicians_user_id", "tracked_politicians", ["user_id"])

    op.create_table(
        "social_posts",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("user_id", sa.Integer(), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("image_url", sa.String(length=500), nullable=True),
        sa.Column("visibility", sa.String(length=16), nullable=False, server_default="public"),
        sa.Column("deleted", sa.Boolean(), nullable=False, server_default=sa.false()),
        *_timestamps(),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_social_posts_user_id", "social_posts", ["user_id"])
    op.create_table(
        "social_comments",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("post_id", sa.Integer(), nullable=False),
        sa.Column("user_id", sa.Integer(), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("parent_comment_id", sa.Integer(), nullable=True),
        sa.Column("deleted", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(["post_id"], ["social_posts.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["parent_comment_id"], ["social_comments.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_social_comments_post_id", "social_comments", ["post_id"])
    op.create_table(
        "social_likes",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("post_id", sa.Integer(), nullable=False),
        sa.Column("user_id", sa.Integer(), nullable=False),
        sa.Column("reaction", sa.String(length=32), nullable=False, server_default="like"),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(["post_id"], ["social_posts.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("post_id", "user_id", name="uq_social_likes_user"),
    )
    op.create_index("ix_social_likes_post_id", "social_likes", ["post_id"])


def downgrade() -> None:
    """Drop every table created by this revision."""
    for table in (
        "social_likes",
        "social_comments",
        "social_posts",
        "tracked_politicians",
        "bill_rollcall_records",
        "bill_rollcalls",
        "politician_truth_tracking",
        "campaign_finance",
        "politician_positions",
        "politician_statements",
        "politicians",
        "petition_signatures",
        "petitions",
        "votes",
        "bills",
        "user_activities",
        "users",
    ):
        op.drop_table(table)
