"""Update answer use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from stackit.domain.service import PostService, UserService
from stackit.domain.value import PostId, UserId


class UpdateAnswerRequest(BaseModel):
    """Update answer request."""

    answer_id: str  # UUID string
    body: str
    user_id: str  # Must be the author or an admin


class UpdateAnswerResponse(BaseModel):
    """Update answer response."""

    answer_id: str
    body: str
    updated_at: datetime


class UpdateAnswerUseCase:
    """Use case for editing an answer."""

    def __init__(self, post_service: PostService, user_service: UserService) -> None:
        """Initialize update answer use case.

        Args:
            post_service: Post domain service
            user_service: User domain service
        """
        self.post_service = post_service
        self.user_service = user_service

    async def execute(self, request: UpdateAnswerRequest) -> UpdateAnswerResponse:
        """Execute update answer flow.

        Raises:
            NotFoundError: If the answer is missing or inactive
            NotAuthorizedError: If the user may not edit the answer
        """
        actor = await self.user_service.get_by_id(UserId(UUID(request.user_id)))

        answer = await self.post_service.update_answer(
            PostId(UUID(request.answer_id)), actor, request.body
        )

        return UpdateAnswerResponse(
            answer_id=str(answer.id),
            body=answer.body,
            updated_at=answer.updated_at,
        )
