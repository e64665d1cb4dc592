"""Create answer use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from stackit.domain.service import PostService, UserService
from stackit.domain.value import Handle, PostId, UserId


class CreateAnswerRequest(BaseModel):
    """Create answer request."""

    question_id: str  # UUID string
    body: str
    user_id: str  # Author, from authenticated user


class CreateAnswerResponse(BaseModel):
    """Create answer response."""

    answer_id: str
    question_id: str
    author_id: str
    author_handle: Handle
    body: str
    created_at: datetime


class CreateAnswerUseCase:
    """Use case for answering a question."""

    def __init__(self, post_service: PostService, user_service: UserService) -> None:
        """Initialize create answer use case.

        Args:
            post_service: Post domain service
            user_service: User domain service
        """
        self.post_service = post_service
        self.user_service = user_service

    async def execute(self, request: CreateAnswerRequest) -> CreateAnswerResponse:
        """Execute create answer flow.

        Raises:
            NotFoundError: If the question is missing or inactive
        """
        author = await self.user_service.get_by_id(UserId(UUID(request.user_id)))

        answer = await self.post_service.create_answer(
            PostId(UUID(request.question_id)), author, request.body
        )

        return CreateAnswerResponse(
            answer_id=str(answer.id),
            question_id=str(answer.question_id),
            author_id=str(answer.author_id),
            author_handle=answer.author_handle,
            body=answer.body,
            created_at=answer.created_at,
        )
