"""Question routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, status
from pydantic import BaseModel, Field

from stackit.application.usecase.answer import (
    AcceptAnswerRequest,
    AcceptAnswerResponse,
    AcceptAnswerUseCase,
    CreateAnswerRequest,
    CreateAnswerResponse,
    CreateAnswerUseCase,
)
from stackit.application.usecase.auth import GetCurrentUserUseCase
from stackit.application.usecase.question import (
    CreateQuestionRequest,
    CreateQuestionResponse,
    CreateQuestionUseCase,
    DeleteQuestionRequest,
    DeleteQuestionUseCase,
    GetQuestionRequest,
    GetQuestionResponse,
    GetQuestionUseCase,
    ListQuestionsRequest,
    ListQuestionsResponse,
    ListQuestionsUseCase,
    UpdateQuestionRequest,
    UpdateQuestionResponse,
    UpdateQuestionUseCase,
)
from stackit.application.usecase.vote import (
    CastVoteRequest,
    CastVoteResponse,
    CastVoteUseCase,
)
from stackit.domain.repository import QuestionSortOrder
from stackit.domain.value import PostKind, VoteDirection
from stackit.interface.api.auth import optional_user_id, require_user
from stackit.interface.error import to_http_exception

router = APIRouter(prefix="/questions", tags=["questions"], route_class=DishkaRoute)


class CreateQuestionAPIRequest(BaseModel):
    """API request for asking a question."""

    title: str = Field(min_length=10, max_length=200)
    body: str = Field(min_length=20, max_length=30000)
    tags: list[str] = Field(min_length=1, max_length=5)


class UpdateQuestionAPIRequest(BaseModel):
    """API request for editing a question. Omitted fields are unchanged."""

    title: str | None = Field(default=None, min_length=10, max_length=200)
    body: str | None = Field(default=None, min_length=20, max_length=30000)
    tags: list[str] | None = Field(default=None, min_length=1, max_length=5)


class VoteAPIRequest(BaseModel):
    """API request for voting on a post."""

    direction: VoteDirection


class CreateAnswerAPIRequest(BaseModel):
    """API request for answering a question."""

    body: str = Field(min_length=10, max_length=30000)


@router.get("", response_model=ListQuestionsResponse)
async def list_questions(
    list_questions_use_case: FromDishka[ListQuestionsUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    sort: QuestionSortOrder = QuestionSortOrder.RECENT,
    tag: str | None = None,
    search: str | None = None,
    limit: int = 20,
    offset: int = 0,
    auth_token: str | None = Cookie(default=None),
) -> ListQuestionsResponse:
    """List questions with filtering and pagination.

    Args:
        list_questions_use_case: List questions use case from DI
        get_current_user_use_case: Get current user use case from DI
        sort: recent, votes or popular
        tag: Filter by tag name (optional)
        search: Keyword matched against title and body (optional)
        limit: Maximum number of questions to return (1-100)
        offset: Number of questions to skip
        auth_token: JWT token from cookie (optional)

    Returns:
        Page of questions
    """
    user_id = await optional_user_id(get_current_user_use_case, auth_token)

    try:
        return await list_questions_use_case.execute(
            ListQuestionsRequest(
                sort=sort,
                tag=tag,
                search=search,
                limit=limit,
                offset=offset,
                user_id=user_id,
            )
        )
    except Exception as e:
        raise to_http_exception(e, "list questions")


@router.post(
    "", response_model=CreateQuestionResponse, status_code=status.HTTP_201_CREATED
)
async def create_question(
    request: CreateQuestionAPIRequest,
    create_question_use_case: FromDishka[CreateQuestionUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> CreateQuestionResponse:
    """Ask a new question.

    Requires authentication. Tags that don't exist yet are created.
    """
    user = await require_user(get_current_user_use_case, auth_token)

    try:
        return await create_question_use_case.execute(
            CreateQuestionRequest(
                title=request.title.strip(),
                body=request.body,
                tags=request.tags,
                user_id=user.user_id,
            )
        )
    except Exception as e:
        raise to_http_exception(e, "create question")


@router.get("/{question_id}", response_model=GetQuestionResponse)
async def get_question(
    question_id: UUID,
    get_question_use_case: FromDishka[GetQuestionUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> GetQuestionResponse:
    """Get a question with its answers, best first.

    Counts a view unless the reader is the author.
    """
    user_id = await optional_user_id(get_current_user_use_case, auth_token)

    try:
        return await get_question_use_case.execute(
            GetQuestionRequest(question_id=str(question_id), user_id=user_id)
        )
    except Exception as e:
        raise to_http_exception(e, "fetch question")


@router.patch("/{question_id}", response_model=UpdateQuestionResponse)
async def update_question(
    question_id: UUID,
    request: UpdateQuestionAPIRequest,
    update_question_use_case: FromDishka[UpdateQuestionUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> UpdateQuestionResponse:
    """Edit a question. Only the author or an admin can edit."""
    user = await require_user(get_current_user_use_case, auth_token)

    try:
        return await update_question_use_case.execute(
            UpdateQuestionRequest(
                question_id=str(question_id),
                user_id=user.user_id,
                title=request.title.strip() if request.title else None,
                body=request.body,
                tags=request.tags,
            )
        )
    except Exception as e:
        raise to_http_exception(e, "update question")


@router.delete("/{question_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_question(
    question_id: UUID,
    delete_question_use_case: FromDishka[DeleteQuestionUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> None:
    """Soft-delete a question. Only the author or an admin can delete."""
    user = await require_user(get_current_user_use_case, auth_token)

    try:
        await delete_question_use_case.execute(
            DeleteQuestionRequest(question_id=str(question_id), user_id=user.user_id)
        )
    except Exception as e:
        raise to_http_exception(e, "delete question")


@router.post("/{question_id}/vote", response_model=CastVoteResponse)
async def vote_question(
    question_id: UUID,
    request: VoteAPIRequest,
    cast_vote_use_case: FromDishka[CastVoteUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> CastVoteResponse:
    """Vote on a question.

    Repeating a vote retracts it; voting the other way switches it.
    Authors cannot vote on their own questions.
    """
    user = await require_user(get_current_user_use_case, auth_token)

    try:
        return await cast_vote_use_case.execute(
            CastVoteRequest(
                post_id=str(question_id),
                kind=PostKind.QUESTION,
                direction=request.direction,
                user_id=user.user_id,
            )
        )
    except Exception as e:
        raise to_http_exception(e, "vote on question")


@router.post(
    "/{question_id}/answers",
    response_model=CreateAnswerResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_answer(
    question_id: UUID,
    request: CreateAnswerAPIRequest,
    create_answer_use_case: FromDishka[CreateAnswerUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> CreateAnswerResponse:
    """Answer a question. The question author is notified."""
    user = await require_user(get_current_user_use_case, auth_token)

    try:
        return await create_answer_use_case.execute(
            CreateAnswerRequest(
                question_id=str(question_id), body=request.body, user_id=user.user_id
            )
        )
    except Exception as e:
        raise to_http_exception(e, "create answer")


@router.post(
    "/{question_id}/answers/{answer_id}/accept", response_model=AcceptAnswerResponse
)
async def accept_answer(
    question_id: UUID,
    answer_id: UUID,
    accept_answer_use_case: FromDishka[AcceptAnswerUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> AcceptAnswerResponse:
    """Accept an answer. Only the question author can accept.

    Accepting another answer moves the acceptance to it.
    """
    user = await require_user(get_current_user_use_case, auth_token)

    try:
        return await accept_answer_use_case.execute(
            AcceptAnswerRequest(
                question_id=str(question_id),
                answer_id=str(answer_id),
                user_id=user.user_id,
            )
        )
    except Exception as e:
        raise to_http_exception(e, "accept answer")
