"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from stackit.domain.model.comment import Comment
from stackit.domain.value import CommentId, PostId


class CommentRepository(ABC):
    """Repository for comments on answers."""

    @abstractmethod
    async def save(self, comment: Comment) -> Comment:
        """Save a new comment."""
        pass

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        pass

    @abstractmethod
    async def find_by_answers(self, answer_ids: list[PostId]) -> list[Comment]:
        """Find the comments on any of the given answers, oldest first."""
        pass

    @abstractmethod
    async def delete(self, comment_id: CommentId) -> bool:
        """Delete a comment.

        Returns:
            Whether a comment was deleted
        """
        pass
