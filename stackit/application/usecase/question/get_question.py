"""Get question use case."""

from datetime import datetime
from typing import Optional
from uuid import UUID

import logfire
from pydantic import BaseModel

from stackit.domain.model import Answer, Comment
from stackit.domain.service import CommentService, PostService
from stackit.domain.value import Handle, PostId, UserId, VoteState


class GetQuestionRequest(BaseModel):
    """Get question request."""

    question_id: str  # UUID string
    user_id: str | None = None  # Current user ID (if authenticated)


class CommentItem(BaseModel):
    """Comment on an answer in a question detail response."""

    comment_id: str
    author_id: str
    author_handle: Handle
    content: str
    is_owner: bool
    created_at: datetime


class AnswerItem(BaseModel):
    """Answer in a question detail response."""

    answer_id: str
    author_id: str
    author_handle: Handle
    body: str
    vote_score: int
    is_accepted: bool
    user_vote: VoteState
    is_owner: bool
    created_at: datetime
    updated_at: datetime
    comments: list[CommentItem]


class GetQuestionResponse(BaseModel):
    """Get question response."""

    question_id: str
    title: str
    body: str
    tags: list[str]
    author_id: str
    author_handle: Handle
    vote_score: int
    views: int
    accepted_answer_id: str | None
    user_vote: VoteState
    is_owner: bool
    created_at: datetime
    updated_at: datetime
    answers: list[AnswerItem]


class GetQuestionUseCase:
    """Use case for reading a question with its answers.

    Counts a view unless the reader is the author.
    """

    def __init__(
        self, post_service: PostService, comment_service: CommentService
    ) -> None:
        """Initialize get question use case.

        Args:
            post_service: Post domain service
            comment_service: Comment domain service
        """
        self.post_service = post_service
        self.comment_service = comment_service

    async def execute(self, request: GetQuestionRequest) -> GetQuestionResponse:
        """Execute get question flow.

        Raises:
            NotFoundError: If the question is missing or inactive
        """
        with logfire.span("get_question.execute", question_id=request.question_id):
            viewer_id: Optional[UserId] = (
                UserId(UUID(request.user_id)) if request.user_id else None
            )

            question = await self.post_service.get_active_question(
                PostId(UUID(request.question_id))
            )
            counted = await self.post_service.record_view(question, viewer_id)
            answers = await self.post_service.list_answers(question.id)
            comments = await self.comment_service.comments_by_answer(
                [answer.id for answer in answers]
            )

            return GetQuestionResponse(
                question_id=str(question.id),
                title=question.title,
                body=question.body,
                tags=[tag.root for tag in question.tags],
                author_id=str(question.author_id),
                author_handle=question.author_handle,
                vote_score=question.vote_score,
                views=question.views + (1 if counted else 0),
                accepted_answer_id=(
                    str(question.accepted_answer_id)
                    if question.accepted_answer_id
                    else None
                ),
                user_vote=question.vote_state_of(viewer_id),
                is_owner=viewer_id == question.author_id,
                created_at=question.created_at,
                updated_at=question.updated_at,
                answers=[
                    _to_item(answer, comments.get(answer.id, []), viewer_id)
                    for answer in answers
                ],
            )


def _to_item(
    answer: Answer, comments: list[Comment], viewer_id: Optional[UserId]
) -> AnswerItem:
    return AnswerItem(
        answer_id=str(answer.id),
        author_id=str(answer.author_id),
        author_handle=answer.author_handle,
        body=answer.body,
        vote_score=answer.vote_score,
        is_accepted=answer.is_accepted,
        user_vote=answer.vote_state_of(viewer_id),
        is_owner=viewer_id == answer.author_id,
        created_at=answer.created_at,
        updated_at=answer.updated_at,
        comments=[
            CommentItem(
                comment_id=str(c.id),
                author_id=str(c.author_id),
                author_handle=c.author_handle,
                content=c.content,
                is_owner=viewer_id == c.author_id,
                created_at=c.created_at,
            )
            for c in comments
        ],
    )
