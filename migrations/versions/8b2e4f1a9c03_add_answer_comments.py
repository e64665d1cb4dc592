"""add answer comments

Revision ID: 8b2e4f1a9c03
Revises: 3f1c9a7d2b60
Create Date: 2026-10-19 15:41:27.902114

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "8b2e4f1a9c03"
down_revision: Union[str, Sequence[str], None] = "3f1c9a7d2b60"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    # New notification type; not used in this transaction, so PG12+ accepts it
    op.execute("ALTER TYPE notification_type ADD VALUE IF NOT EXISTS 'comment'")

    op.create_table(
        "comments",
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column(
            "answer_id",
            postgresql.UUID(as_uuid=True),
            sa.ForeignKey("posts.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column(
            "question_id",
            postgresql.UUID(as_uuid=True),
            sa.ForeignKey("posts.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column(
            "author_id",
            postgresql.UUID(as_uuid=True),
            sa.ForeignKey("users.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("author_handle", sa.String(30), nullable=False),
        sa.Column("content", sa.String(500), nullable=False),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
    )

    op.create_index(
        "idx_comments_answer_created_at",
        "comments",
        ["answer_id", "created_at"],
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index("idx_comments_answer_created_at", table_name="comments")
    op.drop_table("comments")
    # PostgreSQL cannot drop a single enum value; 'comment' stays on
    # notification_type and is simply unused after a downgrade
