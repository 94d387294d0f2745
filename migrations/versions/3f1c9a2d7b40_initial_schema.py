"""initial_schema

Create the forum schema:
- Members and their points ledger
- Categories with per-group permissions
- Topics, posts and post votes (one vote per member per post)
- Polls with answers and poll votes
- Topic and category subscriptions, and the outgoing email queue
- Banned words and banned link domains

Revision ID: 3f1c9a2d7b40
Revises:
Create Date: 2026-10-19 10:12:44.318204

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "3f1c9a2d7b40"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _id() -> sa.Column:
    return sa.Column(
        "id",
        sa.UUID(),
        server_default=sa.text("uuid_generate_v4()"),
        nullable=False,
    )


def _timestamp(name: str = "created_at") -> sa.Column:
    return sa.Column(
        name,
        sa.TIMESTAMP(timezone=True),
        nullable=False,
        server_default=sa.text("NOW()"),
    )


def upgrade() -> None:
    """Upgrade schema."""
    op.execute('CREATE EXTENSION IF NOT EXISTS "uuid-ossp"')

    # ========================================================================
    # MEMBERS and POINTS LEDGER
    # ========================================================================
    op.create_table(
        "members",
        _id(),
        sa.Column("username", sa.String(150), nullable=False),
        sa.Column("email", sa.String(255), nullable=True),
        sa.Column(
            "member_group", sa.String(20), nullable=False, server_default="standard"
        ),
        sa.Column("points", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("post_count", sa.Integer(), nullable=False, server_default="0"),
        sa.Column(
            "is_locked_out", sa.Boolean(), nullable=False, server_default="false"
        ),
        sa.Column("is_approved", sa.Boolean(), nullable=False, server_default="true"),
        sa.Column(
            "disable_posting", sa.Boolean(), nullable=False, server_default="false"
        ),
        sa.Column(
            "disable_email_notifications",
            sa.Boolean(),
            nullable=False,
            server_default="false",
        ),
        _timestamp(),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("username", name="uq_member_username"),
        sa.CheckConstraint(
            "member_group IN ('guest', 'standard', 'admin')",
            name="valid_member_group",
        ),
    )

    # ========================================================================
    # CATEGORIES
    # ========================================================================
    op.create_table(
        "categories",
        _id(),
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column("slug", sa.String(100), nullable=False),
        sa.Column("parent_id", sa.UUID(), nullable=True),
        sa.Column(
            "moderate_all_topics", sa.Boolean(), nullable=False, server_default="false"
        ),
        _timestamp(),
        sa.ForeignKeyConstraint(["parent_id"], ["categories.id"], ondelete="SET NULL"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("slug", name="uq_category_slug"),
    )

    op.create_table(
        "category_permissions",
        _id(),
        sa.Column("category_id", sa.UUID(), nullable=False),
        sa.Column("member_group", sa.String(20), nullable=False),
        sa.Column("permission", sa.String(30), nullable=False),
        sa.Column("granted", sa.Boolean(), nullable=False, server_default="true"),
        sa.ForeignKeyConstraint(["category_id"], ["categories.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint(
            "category_id", "member_group", "permission", name="uq_category_permission"
        ),
    )

    # ========================================================================
    # POLLS
    # ========================================================================
    op.create_table(
        "polls",
        _id(),
        sa.Column("member_id", sa.UUID(), nullable=False),
        _timestamp(),
        sa.ForeignKeyConstraint(["member_id"], ["members.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_table(
        "poll_answers",
        _id(),
        sa.Column("poll_id", sa.UUID(), nullable=False),
        sa.Column("answer", sa.String(600), nullable=False),
        sa.ForeignKeyConstraint(["poll_id"], ["polls.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_poll_answers_poll_id", "poll_answers", ["poll_id"])

    op.create_table(
        "poll_votes",
        _id(),
        sa.Column("answer_id", sa.UUID(), nullable=False),
        sa.Column("member_id", sa.UUID(), nullable=False),
        _timestamp("voted_at"),
        sa.ForeignKeyConstraint(["answer_id"], ["poll_answers.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["member_id"], ["members.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_poll_votes_answer_id", "poll_votes", ["answer_id"])

    # ========================================================================
    # TOPICS and POSTS
    # ========================================================================
    op.create_table(
        "topics",
        _id(),
        sa.Column("name", sa.String(450), nullable=False),
        sa.Column("slug", sa.String(100), nullable=False),
        sa.Column("category_id", sa.UUID(), nullable=False),
        sa.Column("member_id", sa.UUID(), nullable=False),
        sa.Column("views", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("solved", sa.Boolean(), nullable=False, server_default="false"),
        sa.Column("pending", sa.Boolean(), nullable=False, server_default="false"),
        sa.Column("poll_id", sa.UUID(), nullable=True),
        sa.Column("last_post_id", sa.UUID(), nullable=True),
        _timestamp(),
        sa.ForeignKeyConstraint(["category_id"], ["categories.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["member_id"], ["members.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["poll_id"], ["polls.id"], ondelete="SET NULL"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("slug", name="uq_topic_slug"),
    )
    op.create_index(
        "idx_topics_created_at", "topics", [sa.text("created_at DESC")]
    )
    op.create_index("idx_topics_category_id", "topics", ["category_id"])

    op.create_table(
        "posts",
        _id(),
        sa.Column("topic_id", sa.UUID(), nullable=False),
        sa.Column("member_id", sa.UUID(), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("vote_count", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("is_solution", sa.Boolean(), nullable=False, server_default="false"),
        sa.Column(
            "is_topic_starter", sa.Boolean(), nullable=False, server_default="false"
        ),
        _timestamp(),
        _timestamp("updated_at"),
        sa.ForeignKeyConstraint(["topic_id"], ["topics.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["member_id"], ["members.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "idx_posts_topic_id_created_at", "posts", ["topic_id", "created_at"]
    )
    op.create_index("idx_posts_member_id", "posts", ["member_id"])

    op.create_table(
        "member_points",
        _id(),
        sa.Column("member_id", sa.UUID(), nullable=False),
        sa.Column("points", sa.Integer(), nullable=False),
        sa.Column("related_post_id", sa.UUID(), nullable=True),
        _timestamp(),
        sa.ForeignKeyConstraint(["member_id"], ["members.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["related_post_id"], ["posts.id"], ondelete="SET NULL"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_member_points_member_id", "member_points", ["member_id"])

    # ========================================================================
    # VOTES (one per member per post)
    # ========================================================================
    op.create_table(
        "votes",
        _id(),
        sa.Column("post_id", sa.UUID(), nullable=False),
        sa.Column("member_id", sa.UUID(), nullable=False),
        sa.Column("amount", sa.Integer(), nullable=False),
        _timestamp("voted_at"),
        sa.ForeignKeyConstraint(["post_id"], ["posts.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["member_id"], ["members.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("post_id", "member_id", name="unique_vote"),
        sa.CheckConstraint("amount IN (1, -1)", name="vote_amount_unit"),
    )
    op.create_index("idx_votes_member_id", "votes", ["member_id"])

    # ========================================================================
    # SUBSCRIPTIONS and EMAIL QUEUE
    # ========================================================================
    op.create_table(
        "topic_subscriptions",
        _id(),
        sa.Column("topic_id", sa.UUID(), nullable=False),
        sa.Column("member_id", sa.UUID(), nullable=False),
        _timestamp(),
        sa.ForeignKeyConstraint(["topic_id"], ["topics.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["member_id"], ["members.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("topic_id", "member_id", name="uq_topic_subscription"),
    )

    op.create_table(
        "category_subscriptions",
        _id(),
        sa.Column("category_id", sa.UUID(), nullable=False),
        sa.Column("member_id", sa.UUID(), nullable=False),
        _timestamp(),
        sa.ForeignKeyConstraint(["category_id"], ["categories.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["member_id"], ["members.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint(
            "category_id", "member_id", name="uq_category_subscription"
        ),
    )

    op.create_table(
        "emails",
        _id(),
        sa.Column("email_to", sa.String(255), nullable=False),
        sa.Column("name_to", sa.String(150), nullable=False),
        sa.Column("email_from", sa.String(255), nullable=False),
        sa.Column("subject", sa.String(500), nullable=False),
        sa.Column("body", sa.Text(), nullable=False),
        _timestamp(),
        sa.PrimaryKeyConstraint("id"),
    )

    # ========================================================================
    # BANNED CONTENT
    # ========================================================================
    op.create_table(
        "banned_words",
        _id(),
        sa.Column("word", sa.String(100), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("word", name="uq_banned_word"),
    )

    op.create_table(
        "banned_links",
        _id(),
        sa.Column("domain", sa.String(255), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("domain", name="uq_banned_link_domain"),
    )


def downgrade() -> None:
    """Downgrade schema."""
    # Drop tables (in reverse order of dependencies)
    op.drop_table("banned_links")
    op.drop_table("banned_words")
    op.drop_table("emails")
    op.drop_table("category_subscriptions")
    op.drop_table("topic_subscriptions")
    op.drop_table("votes")
    op.drop_table("member_points")
    op.drop_table("posts")
    op.drop_table("topics")
    op.drop_table("poll_votes")
    op.drop_table("poll_answers")
    op.drop_table("polls")
    op.drop_table("category_permissions")
    op.drop_table("categories")
    op.drop_table("members")
