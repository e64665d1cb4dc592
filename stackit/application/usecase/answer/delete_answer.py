"""Delete answer use case."""

from uuid import UUID

from pydantic import BaseModel

from stackit.domain.service import PostService, UserService
from stackit.domain.value import PostId, UserId


class DeleteAnswerRequest(BaseModel):
    """Delete answer request."""

    answer_id: str  # UUID string
    user_id: str  # Must be the author or an admin


class DeleteAnswerUseCase:
    """Use case for soft-deleting an answer."""

    def __init__(self, post_service: PostService, user_service: UserService) -> None:
        """Initialize delete answer use case.

        Args:
            post_service: Post domain service
            user_service: User domain service
        """
        self.post_service = post_service
        self.user_service = user_service

    async def execute(self, request: DeleteAnswerRequest) -> None:
        """Execute delete answer flow.

        Raises:
            NotFoundError: If the answer is missing or inactive
            NotAuthorizedError: If the user may not delete the answer
        """
        actor = await self.user_service.get_by_id(UserId(UUID(request.user_id)))
        await self.post_service.delete_answer(PostId(UUID(request.answer_id)), actor)
