"""SQLAlchemy table definitions for StackIt.

These table definitions are used with SQLAlchemy Core.
They match the schema defined in Alembic migrations.
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
)
from sqlalchemy.dialects import postgresql
from sqlalchemy.dialects.postgresql import ARRAY, TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# USERS TABLE (mirrored from the identity service)
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("handle", String(30), nullable=False, unique=True),
    Column("email", String(255), nullable=True),
    Column(
        "role",
        postgresql.ENUM("user", "admin", name="user_role", create_type=False),
        nullable=False,
        server_default="user",
    ),
    Column("is_active", Boolean, nullable=False, server_default="true"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_users_handle", users_table.c.handle, unique=True)

# ============================================================================
# TAGS TABLE
# ============================================================================
tags_table = Table(
    "tags",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("name", String(20), nullable=False, unique=True),
    Column("description", String(200), nullable=True),
    Column("color", String(7), nullable=False, server_default="#3B82F6"),
    Column("questions_count", Integer, nullable=False, server_default="0"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_tags_questions_count", tags_table.c.questions_count.desc())

# ============================================================================
# POSTS TABLE (questions and answers, single-table)
# ============================================================================
posts_table = Table(
    "posts",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column(
        "kind",
        postgresql.ENUM("question", "answer", name="post_kind", create_type=False),
        nullable=False,
    ),
    Column(
        "author_id",
        UUID(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("author_handle", String(30), nullable=False),  # Denormalized from users
    Column("body", Text, nullable=False),
    Column(
        "upvoters", ARRAY(UUID(as_uuid=True)), nullable=False, server_default="{}"
    ),
    Column(
        "downvoters", ARRAY(UUID(as_uuid=True)), nullable=False, server_default="{}"
    ),
    # Denormalized for sorting, always written from the voter sets
    Column("vote_score", Integer, nullable=False, server_default="0"),
    Column("is_active", Boolean, nullable=False, server_default="true"),
    Column("version", Integer, nullable=False, server_default="1"),
    # Question columns
    Column("title", String(200), nullable=True),
    Column("tags", ARRAY(String(20)), nullable=True),
    Column("views", Integer, nullable=False, server_default="0"),
    Column(
        "accepted_answer_id",
        UUID(as_uuid=True),
        ForeignKey("posts.id", ondelete="SET NULL"),
        nullable=True,
    ),
    # Answer columns
    Column(
        "question_id",
        UUID(as_uuid=True),
        ForeignKey("posts.id", ondelete="CASCADE"),
        nullable=True,
    ),
    Column("is_accepted", Boolean, nullable=False, server_default="false"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint(
        "(kind = 'question' AND title IS NOT NULL AND question_id IS NULL)"
        " OR (kind = 'answer' AND question_id IS NOT NULL)",
        name="post_kind_columns",
    ),
    CheckConstraint("views >= 0", name="views_non_negative"),
)

Index("idx_posts_kind_created_at", posts_table.c.kind, posts_table.c.created_at.desc())
Index("idx_posts_question_id", posts_table.c.question_id)
Index("idx_posts_author_id", posts_table.c.author_id)
Index("idx_posts_tags", posts_table.c.tags, postgresql_using="gin")

# ============================================================================
# NOTIFICATIONS TABLE
# ============================================================================
notifications_table = Table(
    "notifications",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column(
        "type",
        postgresql.ENUM(
            "answer",
            "vote",
            "accept",
            "comment",
            name="notification_type",
            create_type=False,
        ),
        nullable=False,
    ),
    Column(
        "recipient_id",
        UUID(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "sender_id",
        UUID(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("message", String(500), nullable=False),
    Column(
        "question_id",
        UUID(as_uuid=True),
        ForeignKey("posts.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "answer_id",
        UUID(as_uuid=True),
        ForeignKey("posts.id", ondelete="CASCADE"),
        nullable=True,
    ),
    Column("is_read", Boolean, nullable=False, server_default="false"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index(
    "idx_notifications_recipient_created_at",
    notifications_table.c.recipient_id,
    notifications_table.c.created_at.desc(),
)
Index(
    "idx_notifications_recipient_unread",
    notifications_table.c.recipient_id,
    postgresql_where=notifications_table.c.is_read.is_(False),
)

# ============================================================================
# COMMENTS TABLE (flat comments on answers)
# ============================================================================
comments_table = Table(
    "comments",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column(
        "answer_id",
        UUID(as_uuid=True),
        ForeignKey("posts.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "question_id",
        UUID(as_uuid=True),
        ForeignKey("posts.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "author_id",
        UUID(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("author_handle", String(30), nullable=False),  # Denormalized from users
    Column("content", String(500), nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index(
    "idx_comments_answer_created_at",
    comments_table.c.answer_id,
    comments_table.c.created_at,
)
