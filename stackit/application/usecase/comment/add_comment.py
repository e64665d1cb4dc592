"""Add comment use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from stackit.domain.service import CommentService, UserService
from stackit.domain.value import Handle, PostId, UserId


class AddCommentRequest(BaseModel):
    """Add comment request."""

    answer_id: str  # UUID string
    content: str
    user_id: str  # Author, from authenticated user


class AddCommentResponse(BaseModel):
    """Add comment response."""

    comment_id: str
    answer_id: str
    author_id: str
    author_handle: Handle
    content: str
    created_at: datetime


class AddCommentUseCase:
    """Use case for commenting on an answer."""

    def __init__(
        self, comment_service: CommentService, user_service: UserService
    ) -> None:
        """Initialize add comment use case.

        Args:
            comment_service: Comment domain service
            user_service: User domain service
        """
        self.comment_service = comment_service
        self.user_service = user_service

    async def execute(self, request: AddCommentRequest) -> AddCommentResponse:
        """Execute add comment flow.

        Raises:
            NotFoundError: If the answer is missing or inactive
        """
        author = await self.user_service.get_by_id(UserId(UUID(request.user_id)))

        comment = await self.comment_service.add_comment(
            PostId(UUID(request.answer_id)), author, request.content
        )

        return AddCommentResponse(
            comment_id=str(comment.id),
            answer_id=str(comment.answer_id),
            author_id=str(comment.author_id),
            author_handle=comment.author_handle,
            content=comment.content,
            created_at=comment.created_at,
        )
