"""Get user profile use case."""

from datetime import datetime

import logfire
import pydantic
from pydantic import BaseModel

from stackit.domain.error import NotFoundError
from stackit.domain.service import AuthorStats, PostService, UserService
from stackit.domain.value import Handle, UserRole


class GetUserProfileRequest(BaseModel):
    """Get user profile request."""

    handle: str
    limit: int = 10  # Recent questions and answers to include


class ProfileQuestionItem(BaseModel):
    """Recent question on a profile."""

    question_id: str
    title: str
    vote_score: int
    views: int
    created_at: datetime


class ProfileAnswerItem(BaseModel):
    """Recent answer on a profile."""

    answer_id: str
    question_id: str
    question_title: str | None
    vote_score: int
    is_accepted: bool
    created_at: datetime


class GetUserProfileResponse(BaseModel):
    """Public profile of a user. The email address is not exposed."""

    user_id: str
    handle: Handle
    role: UserRole
    created_at: datetime
    stats: AuthorStats
    questions: list[ProfileQuestionItem]
    answers: list[ProfileAnswerItem]


class GetUserProfileUseCase:
    """Use case for reading a user's public profile and recent activity."""

    def __init__(self, user_service: UserService, post_service: PostService) -> None:
        """Initialize get user profile use case.

        Args:
            user_service: User domain service
            post_service: Post domain service
        """
        self.user_service = user_service
        self.post_service = post_service

    async def execute(self, request: GetUserProfileRequest) -> GetUserProfileResponse:
        """Execute get user profile flow.

        Raises:
            NotFoundError: If no active user has this handle
        """
        with logfire.span("get_user_profile.execute", handle=request.handle):
            try:
                handle = Handle(request.handle)
            except pydantic.ValidationError:
                raise NotFoundError("User", request.handle)

            user = await self.user_service.get_user_by_handle(handle)
            if user is None or not user.is_active:
                raise NotFoundError("User", request.handle)

            questions, answers = await self.post_service.list_by_author(
                user.id, limit=request.limit
            )
            stats = await self.post_service.author_stats(user.id)
            titles = await self.post_service.question_titles(
                [answer.question_id for answer in answers]
            )

            return GetUserProfileResponse(
                user_id=str(user.id),
                handle=user.handle,
                role=user.role,
                created_at=user.created_at,
                stats=stats,
                questions=[
                    ProfileQuestionItem(
                        question_id=str(q.id),
                        title=q.title,
                        vote_score=q.vote_score,
                        views=q.views,
                        created_at=q.created_at,
                    )
                    for q in questions
                ],
                answers=[
                    ProfileAnswerItem(
                        answer_id=str(a.id),
                        question_id=str(a.question_id),
                        question_title=titles.get(a.question_id),
                        vote_score=a.vote_score,
                        is_accepted=a.is_accepted,
                        created_at=a.created_at,
                    )
                    for a in answers
                ],
            )
