"""List questions use case."""

from datetime import datetime
from uuid import UUID

import logfire
from pydantic import BaseModel, Field

from stackit.domain.repository import QuestionSortOrder
from stackit.domain.service import PostService
from stackit.domain.value import Handle, TagName, UserId, VoteState


class QuestionListItem(BaseModel):
    """Question list item in response."""

    question_id: str
    title: str
    tags: list[str]
    author_id: str
    author_handle: Handle
    vote_score: int
    views: int
    answer_count: int
    has_accepted_answer: bool
    user_vote: VoteState
    created_at: datetime


class ListQuestionsRequest(BaseModel):
    """List questions request."""

    sort: QuestionSortOrder = QuestionSortOrder.RECENT
    tag: str | None = None  # Filter by tag name
    search: str | None = None  # Keyword over title and body
    limit: int = Field(default=20, ge=1, le=100)
    offset: int = Field(default=0, ge=0)
    user_id: str | None = None  # Current user ID (if authenticated)


class ListQuestionsResponse(BaseModel):
    """List questions response."""

    questions: list[QuestionListItem]
    total: int
    limit: int
    offset: int


class ListQuestionsUseCase:
    """Use case for listing questions with filtering and pagination."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize list questions use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: ListQuestionsRequest) -> ListQuestionsResponse:
        """Execute list questions flow.

        Args:
            request: List questions request with filters and pagination

        Returns:
            Page of questions matching the filters
        """
        with logfire.span(
            "list_questions.execute",
            sort=request.sort.value,
            tag=request.tag,
            search=request.search,
            limit=request.limit,
            offset=request.offset,
        ):
            tag_filter = TagName(request.tag) if request.tag else None
            search = request.search.strip() if request.search else None
            viewer_id = UserId(UUID(request.user_id)) if request.user_id else None

            questions, total = await self.post_service.list_questions(
                sort=request.sort,
                tag=tag_filter,
                search=search or None,
                limit=request.limit,
                offset=request.offset,
            )

            items = [
                QuestionListItem(
                    question_id=str(question.id),
                    title=question.title,
                    tags=[tag.root for tag in question.tags],
                    author_id=str(question.author_id),
                    author_handle=question.author_handle,
                    vote_score=question.vote_score,
                    views=question.views,
                    answer_count=await self.post_service.count_answers(question.id),
                    has_accepted_answer=question.accepted_answer_id is not None,
                    user_vote=question.vote_state_of(viewer_id),
                    created_at=question.created_at,
                )
                for question in questions
            ]

            return ListQuestionsResponse(
                questions=items,
                total=total,
                limit=request.limit,
                offset=request.offset,
            )
