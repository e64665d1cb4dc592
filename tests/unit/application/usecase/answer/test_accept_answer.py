"""Unit tests for answer use cases."""

import pytest

from stackit.application.usecase.answer import (
    AcceptAnswerRequest,
    AcceptAnswerUseCase,
    CreateAnswerRequest,
    CreateAnswerUseCase,
    DeleteAnswerRequest,
    DeleteAnswerUseCase,
    UpdateAnswerRequest,
    UpdateAnswerUseCase,
)
from stackit.domain.error import NotAuthorizedError, NotFoundError
from stackit.domain.repository import PostRepository, UserRepository
from tests.conftest import make_question, make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


async def _setup(unit_env):
    """Save an asker, an answerer and a question; return them."""
    user_repo = await unit_env.get(UserRepository)
    post_repo = await unit_env.get(PostRepository)
    asker, answerer = make_user("alice"), make_user("bob")
    await user_repo.save(asker)
    await user_repo.save(answerer)
    question = await post_repo.save(make_question(asker), expected_version=None)
    return asker, answerer, question


class TestAnswerLifecycle:
    """Create, accept, edit and delete an answer."""

    @pytest.mark.asyncio
    async def test_create_and_accept(self, unit_env):
        """The asker accepts a posted answer."""
        asker, answerer, question = await _setup(unit_env)
        create = await unit_env.get(CreateAnswerUseCase)
        accept = await unit_env.get(AcceptAnswerUseCase)

        created = await create.execute(
            CreateAnswerRequest(
                question_id=str(question.id),
                body="Use reversed() or slicing.",
                user_id=str(answerer.id),
            )
        )
        accepted = await accept.execute(
            AcceptAnswerRequest(
                question_id=str(question.id),
                answer_id=created.answer_id,
                user_id=str(asker.id),
            )
        )

        assert created.author_handle == answerer.handle
        assert accepted.answer_id == created.answer_id
        assert accepted.is_accepted is True

    @pytest.mark.asyncio
    async def test_answerer_cannot_accept(self, unit_env):
        """Only the asker may accept."""
        _, answerer, question = await _setup(unit_env)
        create = await unit_env.get(CreateAnswerUseCase)
        accept = await unit_env.get(AcceptAnswerUseCase)
        created = await create.execute(
            CreateAnswerRequest(
                question_id=str(question.id),
                body="Use reversed() or slicing.",
                user_id=str(answerer.id),
            )
        )

        with pytest.raises(NotAuthorizedError):
            await accept.execute(
                AcceptAnswerRequest(
                    question_id=str(question.id),
                    answer_id=created.answer_id,
                    user_id=str(answerer.id),
                )
            )

    @pytest.mark.asyncio
    async def test_edit_and_delete(self, unit_env):
        """Authors can edit and then delete their answer."""
        _, answerer, question = await _setup(unit_env)
        create = await unit_env.get(CreateAnswerUseCase)
        update = await unit_env.get(UpdateAnswerUseCase)
        delete = await unit_env.get(DeleteAnswerUseCase)
        post_repo = await unit_env.get(PostRepository)
        created = await create.execute(
            CreateAnswerRequest(
                question_id=str(question.id),
                body="Use reversed() or slicing.",
                user_id=str(answerer.id),
            )
        )

        updated = await update.execute(
            UpdateAnswerRequest(
                answer_id=created.answer_id,
                body="Use list.reverse() in place.",
                user_id=str(answerer.id),
            )
        )
        await delete.execute(
            DeleteAnswerRequest(answer_id=created.answer_id, user_id=str(answerer.id))
        )

        assert updated.body == "Use list.reverse() in place."
        assert await post_repo.count_answers(question.id) == 0
        with pytest.raises(NotFoundError):
            await delete.execute(
                DeleteAnswerRequest(
                    answer_id=created.answer_id, user_id=str(answerer.id)
                )
            )
