"""Delete comment use case."""

from uuid import UUID

from pydantic import BaseModel

from stackit.domain.service import CommentService, UserService
from stackit.domain.value import CommentId, PostId, UserId


class DeleteCommentRequest(BaseModel):
    """Delete comment request."""

    answer_id: str  # UUID string
    comment_id: str  # UUID string
    user_id: str  # Must be the comment author or an admin


class DeleteCommentUseCase:
    """Use case for deleting a comment on an answer."""

    def __init__(
        self, comment_service: CommentService, user_service: UserService
    ) -> None:
        self.comment_service = comment_service
        self.user_service = user_service

    async def execute(self, request: DeleteCommentRequest) -> None:
        """Execute delete comment flow.

        Raises:
            NotFoundError: If the answer or comment is missing
            NotAuthorizedError: If the user may not delete the comment
        """
        actor = await self.user_service.get_by_id(UserId(UUID(request.user_id)))
        await self.comment_service.delete_comment(
            PostId(UUID(request.answer_id)),
            CommentId(UUID(request.comment_id)),
            actor,
        )
