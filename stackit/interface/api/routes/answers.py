"""Answer routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, status
from pydantic import BaseModel, Field

from stackit.application.usecase.answer import (
    DeleteAnswerRequest,
    DeleteAnswerUseCase,
    UpdateAnswerRequest,
    UpdateAnswerResponse,
    UpdateAnswerUseCase,
)
from stackit.application.usecase.auth import GetCurrentUserUseCase
from stackit.application.usecase.comment import (
    AddCommentRequest,
    AddCommentResponse,
    AddCommentUseCase,
    DeleteCommentRequest,
    DeleteCommentUseCase,
)
from stackit.application.usecase.vote import (
    CastVoteRequest,
    CastVoteResponse,
    CastVoteUseCase,
)
from stackit.domain.value import PostKind
from stackit.interface.api.auth import require_user
from stackit.interface.api.routes.questions import VoteAPIRequest
from stackit.interface.error import to_http_exception

router = APIRouter(prefix="/answers", tags=["answers"], route_class=DishkaRoute)


class UpdateAnswerAPIRequest(BaseModel):
    """API request for editing an answer."""

    body: str = Field(min_length=10, max_length=30000)


class AddCommentAPIRequest(BaseModel):
    """API request for commenting on an answer."""

    content: str = Field(min_length=1, max_length=500)


@router.patch("/{answer_id}", response_model=UpdateAnswerResponse)
async def update_answer(
    answer_id: UUID,
    request: UpdateAnswerAPIRequest,
    update_answer_use_case: FromDishka[UpdateAnswerUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> UpdateAnswerResponse:
    """Edit an answer. Only the author or an admin can edit."""
    user = await require_user(get_current_user_use_case, auth_token)

    try:
        return await update_answer_use_case.execute(
            UpdateAnswerRequest(
                answer_id=str(answer_id), body=request.body, user_id=user.user_id
            )
        )
    except Exception as e:
        raise to_http_exception(e, "update answer")


@router.delete("/{answer_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_answer(
    answer_id: UUID,
    delete_answer_use_case: FromDishka[DeleteAnswerUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> None:
    """Soft-delete an answer. Only the author or an admin can delete."""
    user = await require_user(get_current_user_use_case, auth_token)

    try:
        await delete_answer_use_case.execute(
            DeleteAnswerRequest(answer_id=str(answer_id), user_id=user.user_id)
        )
    except Exception as e:
        raise to_http_exception(e, "delete answer")


@router.post("/{answer_id}/vote", response_model=CastVoteResponse)
async def vote_answer(
    answer_id: UUID,
    request: VoteAPIRequest,
    cast_vote_use_case: FromDishka[CastVoteUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> CastVoteResponse:
    """Vote on an answer with toggle semantics."""
    user = await require_user(get_current_user_use_case, auth_token)

    try:
        return await cast_vote_use_case.execute(
            CastVoteRequest(
                post_id=str(answer_id),
                kind=PostKind.ANSWER,
                direction=request.direction,
                user_id=user.user_id,
            )
        )
    except Exception as e:
        raise to_http_exception(e, "vote on answer")


@router.post(
    "/{answer_id}/comments",
    response_model=AddCommentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def add_comment(
    answer_id: UUID,
    request: AddCommentAPIRequest,
    add_comment_use_case: FromDishka[AddCommentUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> AddCommentResponse:
    """Comment on an answer. The answer author is notified."""
    user = await require_user(get_current_user_use_case, auth_token)

    try:
        return await add_comment_use_case.execute(
            AddCommentRequest(
                answer_id=str(answer_id), content=request.content, user_id=user.user_id
            )
        )
    except Exception as e:
        raise to_http_exception(e, "add comment")


@router.delete(
    "/{answer_id}/comments/{comment_id}", status_code=status.HTTP_204_NO_CONTENT
)
async def delete_comment(
    answer_id: UUID,
    comment_id: UUID,
    delete_comment_use_case: FromDishka[DeleteCommentUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> None:
    """Delete a comment. Only its author or an admin can delete."""
    user = await require_user(get_current_user_use_case, auth_token)

    try:
        await delete_comment_use_case.execute(
            DeleteCommentRequest(
                answer_id=str(answer_id),
                comment_id=str(comment_id),
                user_id=user.user_id,
            )
        )
    except Exception as e:
        raise to_http_exception(e, "delete comment")
