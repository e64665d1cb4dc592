"""Unit tests for CastVoteUseCase."""

from uuid import uuid4

import pytest

from stackit.application.usecase.vote import CastVoteRequest, CastVoteUseCase
from stackit.domain.error import NotFoundError, SelfVoteForbiddenError
from stackit.domain.repository import PostRepository
from stackit.domain.value import PostKind, VoteDirection, VoteState
from tests.conftest import make_answer, make_question, make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestCastVoteUseCase:
    """Tests for CastVoteUseCase."""

    @pytest.mark.asyncio
    async def test_vote_then_retract(self, unit_env):
        """Voting up twice returns to no vote."""
        use_case = await unit_env.get(CastVoteUseCase)
        post_repo = await unit_env.get(PostRepository)
        question = await post_repo.save(
            make_question(make_user("alice")), expected_version=None
        )
        voter = make_user("bob")

        request = CastVoteRequest(
            post_id=str(question.id),
            kind=PostKind.QUESTION,
            direction=VoteDirection.UP,
            user_id=str(voter.id),
        )
        first = await use_case.execute(request)
        second = await use_case.execute(request)

        assert first.post_id == str(question.id)
        assert (first.vote_score, first.user_vote) == (1, VoteState.UP)
        assert (second.vote_score, second.user_vote) == (0, VoteState.NONE)

    @pytest.mark.asyncio
    async def test_answer_route_rejects_question_id(self, unit_env):
        """Voting on a question through the answer kind is not found."""
        use_case = await unit_env.get(CastVoteUseCase)
        post_repo = await unit_env.get(PostRepository)
        question = await post_repo.save(
            make_question(make_user("alice")), expected_version=None
        )

        with pytest.raises(NotFoundError):
            await use_case.execute(
                CastVoteRequest(
                    post_id=str(question.id),
                    kind=PostKind.ANSWER,
                    direction=VoteDirection.DOWN,
                    user_id=str(uuid4()),
                )
            )

    @pytest.mark.asyncio
    async def test_self_vote_on_answer(self, unit_env):
        """Answer authors cannot vote on their answers."""
        use_case = await unit_env.get(CastVoteUseCase)
        post_repo = await unit_env.get(PostRepository)
        answerer = make_user("bob")
        question = await post_repo.save(
            make_question(make_user("alice")), expected_version=None
        )
        answer = await post_repo.save(
            make_answer(question, answerer), expected_version=None
        )

        with pytest.raises(SelfVoteForbiddenError):
            await use_case.execute(
                CastVoteRequest(
                    post_id=str(answer.id),
                    kind=PostKind.ANSWER,
                    direction=VoteDirection.UP,
                    user_id=str(answerer.id),
                )
            )
