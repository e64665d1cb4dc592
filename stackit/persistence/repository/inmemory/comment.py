"""In-memory comment repository for testing."""

from typing import Optional

from stackit.domain.model import Comment
from stackit.domain.repository import CommentRepository
from stackit.domain.value import CommentId, PostId


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self) -> None:
        self._comments: dict[CommentId, Comment] = {}

    async def save(self, comment: Comment) -> Comment:
        """Save a comment."""
        self._comments[comment.id] = comment
        return comment

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        return self._comments.get(comment_id)

    async def find_by_answers(self, answer_ids: list[PostId]) -> list[Comment]:
        """Find the comments on any of the given answers, oldest first."""
        wanted = set(answer_ids)
        comments = [c for c in self._comments.values() if c.answer_id in wanted]
        comments.sort(key=lambda c: c.created_at)
        return comments

    async def delete(self, comment_id: CommentId) -> bool:
        """Delete a comment."""
        return self._comments.pop(comment_id, None) is not None
