"""Unit tests for question use cases."""

from uuid import UUID

import pytest

from stackit.application.usecase.question import (
    CreateQuestionRequest,
    CreateQuestionUseCase,
    DeleteQuestionRequest,
    DeleteQuestionUseCase,
    GetQuestionRequest,
    GetQuestionUseCase,
    ListQuestionsRequest,
    ListQuestionsUseCase,
    UpdateQuestionRequest,
    UpdateQuestionUseCase,
)
from stackit.domain.error import NotFoundError
from stackit.domain.repository import TagRepository, UserRepository
from stackit.domain.service import VoteLedger
from stackit.domain.value import PostId, TagName, VoteDirection, VoteState
from tests.conftest import make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


async def _ask(unit_env, author, tags=("python",)):
    create = await unit_env.get(CreateQuestionUseCase)
    return await create.execute(
        CreateQuestionRequest(
            title="How do I flatten a nested list?",
            body="I have [[1, 2], [3]] and want [1, 2, 3].",
            tags=list(tags),
            user_id=str(author.id),
        )
    )


class TestCreateQuestion:
    """Tests for CreateQuestionUseCase."""

    @pytest.mark.asyncio
    async def test_creates_question_and_tags(self, unit_env):
        """New tags are created and counted."""
        user_repo = await unit_env.get(UserRepository)
        tag_repo = await unit_env.get(TagRepository)
        author = make_user("alice")
        await user_repo.save(author)

        response = await _ask(unit_env, author, tags=("Python", "lists"))

        assert response.tags == ["python", "lists"]
        assert response.author_handle == author.handle
        tag = await tag_repo.find_by_name(TagName("lists"))
        assert tag.questions_count == 1

    @pytest.mark.asyncio
    async def test_unknown_author(self, unit_env):
        """Authors must exist."""
        with pytest.raises(NotFoundError, match="User not found"):
            await _ask(unit_env, make_user("ghost"))


class TestGetQuestion:
    """Tests for GetQuestionUseCase."""

    @pytest.mark.asyncio
    async def test_reader_sees_own_vote_and_counts_view(self, unit_env):
        """The response reflects the reader's vote and the new view."""
        user_repo = await unit_env.get(UserRepository)
        ledger = await unit_env.get(VoteLedger)
        get = await unit_env.get(GetQuestionUseCase)
        author, reader = make_user("alice"), make_user("bob")
        await user_repo.save(author)
        created = await _ask(unit_env, author)
        await ledger.cast_vote(
            PostId(UUID(created.question_id)), reader.id, VoteDirection.UP
        )

        response = await get.execute(
            GetQuestionRequest(question_id=created.question_id, user_id=str(reader.id))
        )

        assert response.vote_score == 1
        assert response.user_vote == VoteState.UP
        assert response.is_owner is False
        assert response.views == 1
        assert response.answers == []

    @pytest.mark.asyncio
    async def test_author_view_is_not_counted(self, unit_env):
        """Authors reading their question don't add views."""
        user_repo = await unit_env.get(UserRepository)
        get = await unit_env.get(GetQuestionUseCase)
        author = make_user("alice")
        await user_repo.save(author)
        created = await _ask(unit_env, author)

        response = await get.execute(
            GetQuestionRequest(question_id=created.question_id, user_id=str(author.id))
        )

        assert response.views == 0
        assert response.is_owner is True


class TestListQuestions:
    """Tests for ListQuestionsUseCase."""

    @pytest.mark.asyncio
    async def test_lists_with_answer_counts(self, unit_env):
        """Listing reports totals and per-question metadata."""
        user_repo = await unit_env.get(UserRepository)
        list_questions = await unit_env.get(ListQuestionsUseCase)
        author = make_user("alice")
        await user_repo.save(author)
        await _ask(unit_env, author, tags=("python",))
        await _ask(unit_env, author, tags=("rust",))

        response = await list_questions.execute(ListQuestionsRequest(tag="rust"))

        assert response.total == 1
        [item] = response.questions
        assert item.tags == ["rust"]
        assert item.answer_count == 0
        assert item.has_accepted_answer is False
        assert item.user_vote == VoteState.NONE


class TestEditQuestion:
    """Tests for update and delete use cases."""

    @pytest.mark.asyncio
    async def test_retagging_refreshes_both_tag_sets(self, unit_env):
        """Old tags lose the question, new tags gain it."""
        user_repo = await unit_env.get(UserRepository)
        tag_repo = await unit_env.get(TagRepository)
        update = await unit_env.get(UpdateQuestionUseCase)
        author = make_user("alice")
        await user_repo.save(author)
        created = await _ask(unit_env, author, tags=("python",))

        response = await update.execute(
            UpdateQuestionRequest(
                question_id=created.question_id,
                user_id=str(author.id),
                tags=["rust"],
            )
        )

        assert response.tags == ["rust"]
        assert (await tag_repo.find_by_name(TagName("python"))).questions_count == 0
        assert (await tag_repo.find_by_name(TagName("rust"))).questions_count == 1

    @pytest.mark.asyncio
    async def test_delete_hides_question(self, unit_env):
        """Deleted questions are gone from reads and tag counts."""
        user_repo = await unit_env.get(UserRepository)
        tag_repo = await unit_env.get(TagRepository)
        delete = await unit_env.get(DeleteQuestionUseCase)
        get = await unit_env.get(GetQuestionUseCase)
        author = make_user("alice")
        await user_repo.save(author)
        created = await _ask(unit_env, author)

        await delete.execute(
            DeleteQuestionRequest(
                question_id=created.question_id, user_id=str(author.id)
            )
        )

        assert (await tag_repo.find_by_name(TagName("python"))).questions_count == 0
        with pytest.raises(NotFoundError):
            await get.execute(GetQuestionRequest(question_id=created.question_id))
