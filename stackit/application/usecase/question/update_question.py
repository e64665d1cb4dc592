"""Update question use case."""

from datetime import datetime
from typing import Optional
from uuid import UUID

import logfire
from pydantic import BaseModel, Field

from stackit.domain.service import PostService, TagService, UserService
from stackit.domain.value import PostId, TagName, UserId


class UpdateQuestionRequest(BaseModel):
    """Update question request. Omitted fields are left unchanged."""

    question_id: str  # UUID string
    user_id: str  # Must be the author or an admin
    title: Optional[str] = None
    body: Optional[str] = None
    tags: Optional[list[TagName]] = Field(default=None, min_length=1, max_length=5)


class UpdateQuestionResponse(BaseModel):
    """Update question response."""

    question_id: str
    title: str
    body: str
    tags: list[str]
    updated_at: datetime


class UpdateQuestionUseCase:
    """Use case for editing a question."""

    def __init__(
        self,
        post_service: PostService,
        tag_service: TagService,
        user_service: UserService,
    ) -> None:
        """Initialize update question use case.

        Args:
            post_service: Post domain service
            tag_service: Tag domain service
            user_service: User domain service
        """
        self.post_service = post_service
        self.tag_service = tag_service
        self.user_service = user_service

    async def execute(self, request: UpdateQuestionRequest) -> UpdateQuestionResponse:
        """Execute update question flow.

        Tag counts are recomputed for both the old and the new tags.

        Raises:
            NotFoundError: If the question is missing or inactive
            NotAuthorizedError: If the user may not edit the question
        """
        with logfire.span(
            "update_question.execute",
            question_id=request.question_id,
            user_id=request.user_id,
        ):
            actor = await self.user_service.get_by_id(UserId(UUID(request.user_id)))

            if request.tags is not None:
                await self.tag_service.ensure_tags(request.tags)

            question, previous_tags = await self.post_service.update_question(
                PostId(UUID(request.question_id)),
                actor,
                title=request.title,
                body=request.body,
                tags=request.tags,
            )

            if request.tags is not None:
                await self.tag_service.refresh_counts(previous_tags + question.tags)

            return UpdateQuestionResponse(
                question_id=str(question.id),
                title=question.title,
                body=question.body,
                tags=[tag.root for tag in question.tags],
                updated_at=question.updated_at,
            )
