"""SQLAlchemy table definitions for the forum.

These tables match the schema defined in the Alembic migrations. Rows are
mapped to pydantic domain models by hand in ``agora.persistence.mappers``.
"""

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    UniqueConstraint,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# MEMBERS TABLE
# ============================================================================
members_table = Table(
    "members",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("username", String(150), nullable=False, unique=True),
    Column("email", String(255), nullable=True),
    Column("member_group", String(20), nullable=False, server_default="standard"),
    Column("points", Integer, nullable=False, server_default="0"),
    Column("post_count", Integer, nullable=False, server_default="0"),
    Column("is_locked_out", Boolean, nullable=False, server_default="false"),
    Column("is_approved", Boolean, nullable=False, server_default="true"),
    Column("disable_posting", Boolean, nullable=False, server_default="false"),
    Column(
        "disable_email_notifications", Boolean, nullable=False, server_default="false"
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint(
        "member_group IN ('guest', 'standard', 'admin')", name="valid_member_group"
    ),
)

# ============================================================================
# POINTS LEDGER
# ============================================================================
member_points_table = Table(
    "member_points",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column(
        "member_id", UUID, ForeignKey("members.id", ondelete="CASCADE"), nullable=False
    ),
    Column("points", Integer, nullable=False),
    Column(
        "related_post_id",
        UUID,
        ForeignKey("posts.id", ondelete="SET NULL"),
        nullable=True,
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_member_points_member_id", member_points_table.c.member_id)

# ============================================================================
# CATEGORIES
# ============================================================================
categories_table = Table(
    "categories",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("name", String(200), nullable=False),
    Column("slug", String(100), nullable=False, unique=True),
    Column(
        "parent_id",
        UUID,
        ForeignKey("categories.id", ondelete="SET NULL"),
        nullable=True,
    ),
    Column("moderate_all_topics", Boolean, nullable=False, server_default="false"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

category_permissions_table = Table(
    "category_permissions",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column(
        "category_id",
        UUID,
        ForeignKey("categories.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("member_group", String(20), nullable=False),
    Column("permission", String(30), nullable=False),
    Column("granted", Boolean, nullable=False, server_default="true"),
    UniqueConstraint(
        "category_id", "member_group", "permission", name="uq_category_permission"
    ),
)

# ============================================================================
# POLLS
# ============================================================================
polls_table = Table(
    "polls",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column(
        "member_id", UUID, ForeignKey("members.id", ondelete="CASCADE"), nullable=False
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

poll_answers_table = Table(
    "poll_answers",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("poll_id", UUID, ForeignKey("polls.id", ondelete="CASCADE"), nullable=False),
    Column("answer", String(600), nullable=False),
)

Index("idx_poll_answers_poll_id", poll_answers_table.c.poll_id)

poll_votes_table = Table(
    "poll_votes",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column(
        "answer_id",
        UUID,
        ForeignKey("poll_answers.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "member_id", UUID, ForeignKey("members.id", ondelete="CASCADE"), nullable=False
    ),
    Column(
        "voted_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_poll_votes_answer_id", poll_votes_table.c.answer_id)

# ============================================================================
# TOPICS
# ============================================================================
topics_table = Table(
    "topics",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("name", String(450), nullable=False),
    Column("slug", String(100), nullable=False, unique=True),
    Column(
        "category_id",
        UUID,
        ForeignKey("categories.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "member_id", UUID, ForeignKey("members.id", ondelete="CASCADE"), nullable=False
    ),
    Column("views", Integer, nullable=False, server_default="0"),
    Column("solved", Boolean, nullable=False, server_default="false"),
    Column("pending", Boolean, nullable=False, server_default="false"),
    Column("poll_id", UUID, ForeignKey("polls.id", ondelete="SET NULL"), nullable=True),
    # No FK: posts reference topics, the starter post is written after the topic
    Column("last_post_id", UUID, nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_topics_created_at", topics_table.c.created_at.desc())
Index("idx_topics_category_id", topics_table.c.category_id)

# ============================================================================
# POSTS
# ============================================================================
posts_table = Table(
    "posts",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column(
        "topic_id", UUID, ForeignKey("topics.id", ondelete="CASCADE"), nullable=False
    ),
    Column(
        "member_id", UUID, ForeignKey("members.id", ondelete="CASCADE"), nullable=False
    ),
    Column("content", Text, nullable=False),
    Column("vote_count", Integer, nullable=False, server_default="0"),
    Column("is_solution", Boolean, nullable=False, server_default="false"),
    Column("is_topic_starter", Boolean, nullable=False, server_default="false"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_posts_topic_id_created_at", posts_table.c.topic_id, posts_table.c.created_at)
Index("idx_posts_member_id", posts_table.c.member_id)

# ============================================================================
# VOTES TABLE
# ============================================================================
votes_table = Table(
    "votes",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("post_id", UUID, ForeignKey("posts.id", ondelete="CASCADE"), nullable=False),
    Column(
        "member_id", UUID, ForeignKey("members.id", ondelete="CASCADE"), nullable=False
    ),
    Column("amount", Integer, nullable=False),
    Column(
        "voted_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("post_id", "member_id", name="unique_vote"),
    CheckConstraint("amount IN (1, -1)", name="vote_amount_unit"),
)

Index("idx_votes_member_id", votes_table.c.member_id)

# ============================================================================
# SUBSCRIPTIONS
# ============================================================================
topic_subscriptions_table = Table(
    "topic_subscriptions",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column(
        "topic_id", UUID, ForeignKey("topics.id", ondelete="CASCADE"), nullable=False
    ),
    Column(
        "member_id", UUID, ForeignKey("members.id", ondelete="CASCADE"), nullable=False
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("topic_id", "member_id", name="uq_topic_subscription"),
)

category_subscriptions_table = Table(
    "category_subscriptions",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column(
        "category_id",
        UUID,
        ForeignKey("categories.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "member_id", UUID, ForeignKey("members.id", ondelete="CASCADE"), nullable=False
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("category_id", "member_id", name="uq_category_subscription"),
)

# ============================================================================
# EMAIL QUEUE
# ============================================================================
emails_table = Table(
    "emails",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("email_to", String(255), nullable=False),
    Column("name_to", String(150), nullable=False),
    Column("email_from", String(255), nullable=False),
    Column("subject", String(500), nullable=False),
    Column("body", Text, nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

# ============================================================================
# BANNED CONTENT
# ============================================================================
banned_words_table = Table(
    "banned_words",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("word", String(100), nullable=False, unique=True),
)

banned_links_table = Table(
    "banned_links",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("domain", String(255), nullable=False, unique=True),
)
