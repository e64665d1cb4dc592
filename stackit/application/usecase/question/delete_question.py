"""Delete question use case."""

from uuid import UUID

from pydantic import BaseModel

from stackit.domain.service import PostService, TagService, UserService
from stackit.domain.value import PostId, UserId


class DeleteQuestionRequest(BaseModel):
    """Delete question request."""

    question_id: str  # UUID string
    user_id: str  # Must be the author or an admin


class DeleteQuestionUseCase:
    """Use case for soft-deleting a question."""

    def __init__(
        self,
        post_service: PostService,
        tag_service: TagService,
        user_service: UserService,
    ) -> None:
        """Initialize delete question use case.

        Args:
            post_service: Post domain service
            tag_service: Tag domain service
            user_service: User domain service
        """
        self.post_service = post_service
        self.tag_service = tag_service
        self.user_service = user_service

    async def execute(self, request: DeleteQuestionRequest) -> None:
        """Execute delete question flow.

        Raises:
            NotFoundError: If the question is missing or inactive
            NotAuthorizedError: If the user may not delete the question
        """
        actor = await self.user_service.get_by_id(UserId(UUID(request.user_id)))
        question = await self.post_service.delete_question(
            PostId(UUID(request.question_id)), actor
        )
        await self.tag_service.refresh_counts(question.tags)
