"""Create question use case."""

from datetime import datetime
from uuid import UUID

import logfire
from pydantic import BaseModel, Field

from stackit.domain.service import PostService, TagService, UserService
from stackit.domain.value import Handle, TagName, UserId


class CreateQuestionRequest(BaseModel):
    """Create question request."""

    title: str
    body: str
    tags: list[TagName] = Field(min_length=1, max_length=5)
    user_id: str  # Author, from authenticated user


class CreateQuestionResponse(BaseModel):
    """Create question response."""

    question_id: str
    title: str
    body: str
    tags: list[str]
    author_id: str
    author_handle: Handle
    created_at: datetime


class CreateQuestionUseCase:
    """Use case for asking a question."""

    def __init__(
        self,
        post_service: PostService,
        tag_service: TagService,
        user_service: UserService,
    ) -> None:
        """Initialize create question use case.

        Args:
            post_service: Post domain service
            tag_service: Tag domain service
            user_service: User domain service
        """
        self.post_service = post_service
        self.tag_service = tag_service
        self.user_service = user_service

    async def execute(self, request: CreateQuestionRequest) -> CreateQuestionResponse:
        """Execute create question flow.

        Steps:
        1. Load the author
        2. Create tags used for the first time
        3. Save the question
        4. Recompute tag counts

        Args:
            request: Question data

        Returns:
            Created question
        """
        with logfire.span("create_question.execute", user_id=request.user_id):
            author = await self.user_service.get_by_id(UserId(UUID(request.user_id)))

            await self.tag_service.ensure_tags(request.tags)
            question = await self.post_service.create_question(
                author, request.title, request.body, request.tags
            )
            await self.tag_service.refresh_counts(question.tags)

            return CreateQuestionResponse(
                question_id=str(question.id),
                title=question.title,
                body=question.body,
                tags=[tag.root for tag in question.tags],
                author_id=str(question.author_id),
                author_handle=question.author_handle,
                created_at=question.created_at,
            )
