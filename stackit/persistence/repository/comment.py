"""PostgreSQL implementation of Comment repository."""

from typing import Optional

from sqlalchemy import asc, delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from stackit.domain.model import Comment
from stackit.domain.repository import CommentRepository
from stackit.domain.value import CommentId, PostId
from stackit.persistence.mappers import comment_to_dict, row_to_comment
from stackit.persistence.tables import comments_table


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def save(self, comment: Comment) -> Comment:
        """Insert a comment."""
        stmt = comments_table.insert().values(**comment_to_dict(comment))
        await self.session.execute(stmt)
        await self.session.flush()
        return comment

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        stmt = select(comments_table).where(comments_table.c.id == comment_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_comment(dict(row)) if row else None

    async def find_by_answers(self, answer_ids: list[PostId]) -> list[Comment]:
        """Find the comments on any of the given answers, oldest first."""
        stmt = (
            select(comments_table)
            .where(comments_table.c.answer_id.in_(answer_ids))
            .order_by(asc(comments_table.c.created_at))
        )
        result = await self.session.execute(stmt)
        return [row_to_comment(dict(row)) for row in result.mappings().all()]

    async def delete(self, comment_id: CommentId) -> bool:
        """Delete a comment."""
        stmt = delete(comments_table).where(comments_table.c.id == comment_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0
