"""Unit tests for the user profile use case."""

from datetime import datetime, timedelta

import pytest

from stackit.application.usecase.user import (
    GetUserProfileRequest,
    GetUserProfileUseCase,
)
from stackit.domain.error import NotFoundError
from stackit.domain.repository import PostRepository, UserRepository
from stackit.domain.service import PostService, VoteLedger
from stackit.domain.value import TagName
from tests.conftest import make_question, make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestGetUserProfile:
    """Tests for GetUserProfileUseCase."""

    @pytest.mark.asyncio
    async def test_profile_lists_activity(self, unit_env):
        """Recent posts and counts cover only active posts."""
        user_repo = await unit_env.get(UserRepository)
        post_service = await unit_env.get(PostService)
        vote_ledger = await unit_env.get(VoteLedger)
        use_case = await unit_env.get(GetUserProfileUseCase)
        asker, answerer = make_user("alice"), make_user("bob")
        await user_repo.save(asker)
        await user_repo.save(answerer)
        question = await post_service.create_question(
            asker,
            "How do I sort a dict by value?",
            "I want the keys ordered by their values, largest first.",
            [TagName("python")],
        )
        kept = await post_service.create_answer(
            question.id, answerer, "sorted(d, key=d.get, reverse=True)"
        )
        removed = await post_service.create_answer(
            question.id, answerer, "Use an OrderedDict for this."
        )
        await post_service.delete_answer(removed.id, answerer)
        await vote_ledger.accept_answer(question.id, kept.id, asker.id)

        profile = await use_case.execute(GetUserProfileRequest(handle="bob"))

        assert profile.user_id == str(answerer.id)
        assert profile.stats.questions_count == 0
        assert profile.stats.answers_count == 1
        assert profile.stats.accepted_answers_count == 1
        assert profile.questions == []
        [answer] = profile.answers
        assert answer.answer_id == str(kept.id)
        assert answer.question_title == question.title
        assert answer.is_accepted is True

    @pytest.mark.asyncio
    async def test_recent_questions_newest_first(self, unit_env):
        user_repo = await unit_env.get(UserRepository)
        post_repo = await unit_env.get(PostRepository)
        use_case = await unit_env.get(GetUserProfileUseCase)
        asker = make_user("alice")
        await user_repo.save(asker)
        start = datetime(2024, 1, 1)
        titles = [f"Question number {n} about generators" for n in range(3)]
        for n, title in enumerate(titles):
            await post_repo.save(
                make_question(
                    asker, title=title, created_at=start + timedelta(hours=n)
                ),
                expected_version=None,
            )

        profile = await use_case.execute(GetUserProfileRequest(handle="alice", limit=2))

        assert [q.title for q in profile.questions] == titles[:0:-1]
        assert profile.stats.questions_count == 3

    @pytest.mark.asyncio
    async def test_unknown_handle(self, unit_env):
        use_case = await unit_env.get(GetUserProfileUseCase)

        with pytest.raises(NotFoundError, match="User not found"):
            await use_case.execute(GetUserProfileRequest(handle="ghost"))

    @pytest.mark.asyncio
    async def test_malformed_handle_is_not_found(self, unit_env):
        use_case = await unit_env.get(GetUserProfileUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(GetUserProfileRequest(handle="no spaces!"))

    @pytest.mark.asyncio
    async def test_inactive_user_is_hidden(self, unit_env):
        user_repo = await unit_env.get(UserRepository)
        use_case = await unit_env.get(GetUserProfileUseCase)
        user = make_user("gone_user")
        await user_repo.save(user.model_copy(update={"is_active": False}))

        with pytest.raises(NotFoundError):
            await use_case.execute(GetUserProfileRequest(handle="gone_user"))
