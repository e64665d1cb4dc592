"""Unit tests for VoteLedger.accept_answer."""

from uuid import uuid4

import pytest

from stackit.config import ConsistencySettings
from stackit.domain.error import MismatchError, NotAuthorizedError, NotFoundError
from stackit.domain.model import AnswerAccepted
from stackit.domain.service import VoteLedger
from stackit.domain.value import PostId
from stackit.persistence.repository.inmemory import InMemoryPostRepository
from tests.conftest import RecordingNotifier, make_answer, make_question, make_user


@pytest.fixture
def notifier():
    return RecordingNotifier()


@pytest.fixture
def post_repo():
    return InMemoryPostRepository()


@pytest.fixture
def ledger(post_repo, notifier):
    return VoteLedger(
        post_repository=post_repo,
        notifier=notifier,
        consistency_settings=ConsistencySettings(backoff_seconds=0),
    )


@pytest.fixture
def asker():
    return make_user("alice")


@pytest.fixture
def answerer():
    return make_user("bob")


async def _thread(post_repo, asker, answerer, answers: int = 2):
    """Save a question with ``answers`` answers by ``answerer``."""
    question = await post_repo.save(make_question(asker), expected_version=None)
    saved = [
        await post_repo.save(make_answer(question, answerer), expected_version=None)
        for _ in range(answers)
    ]
    return question, saved


class TestAcceptAnswer:
    """Tests for moving the accepted answer."""

    @pytest.mark.asyncio
    async def test_accept_sets_flag_and_pointer(self, ledger, post_repo, asker, answerer):
        """Accepting marks the answer and points the question at it."""
        question, (answer, _) = await _thread(post_repo, asker, answerer)

        accepted = await ledger.accept_answer(question.id, answer.id, asker.id)

        assert accepted.is_accepted is True
        stored_question = await post_repo.find_by_id(question.id)
        assert stored_question.accepted_answer_id == answer.id

    @pytest.mark.asyncio
    async def test_accepting_another_answer_moves_acceptance(
        self, ledger, post_repo, asker, answerer
    ):
        """Only one answer per question is accepted at a time."""
        question, (first, second) = await _thread(post_repo, asker, answerer)

        await ledger.accept_answer(question.id, first.id, asker.id)
        await ledger.accept_answer(question.id, second.id, asker.id)

        stored_first = await post_repo.find_by_id(first.id)
        stored_second = await post_repo.find_by_id(second.id)
        stored_question = await post_repo.find_by_id(question.id)
        assert stored_first.is_accepted is False
        assert stored_second.is_accepted is True
        assert stored_question.accepted_answer_id == second.id

        answers = await post_repo.find_answers(question.id)
        assert sum(a.is_accepted for a in answers) == 1

    @pytest.mark.asyncio
    async def test_accepting_twice_is_idempotent(
        self, ledger, post_repo, notifier, asker, answerer
    ):
        """Re-accepting the accepted answer changes nothing."""
        question, (answer, _) = await _thread(post_repo, asker, answerer)
        await ledger.accept_answer(question.id, answer.id, asker.id)
        question_version = (await post_repo.find_by_id(question.id)).version

        accepted = await ledger.accept_answer(question.id, answer.id, asker.id)

        assert accepted.is_accepted is True
        assert (await post_repo.find_by_id(question.id)).version == question_version
        assert len(notifier.events) == 1

    @pytest.mark.asyncio
    async def test_accept_does_not_change_vote_score(
        self, ledger, post_repo, asker, answerer
    ):
        """Acceptance and voting are independent."""
        question, (answer, _) = await _thread(post_repo, asker, answerer)

        accepted = await ledger.accept_answer(question.id, answer.id, asker.id)

        assert accepted.vote_score == 0


class TestAcceptAnswerRejections:
    """Tests for acceptance preconditions."""

    @pytest.mark.asyncio
    async def test_non_author_cannot_accept(self, ledger, post_repo, asker, answerer):
        """Only the question author can accept."""
        question, (answer, _) = await _thread(post_repo, asker, answerer)

        with pytest.raises(NotAuthorizedError):
            await ledger.accept_answer(question.id, answer.id, answerer.id)

        stored = await post_repo.find_by_id(answer.id)
        assert stored.is_accepted is False

    @pytest.mark.asyncio
    async def test_answer_from_another_question(
        self, ledger, post_repo, asker, answerer
    ):
        """An answer must belong to the question it is accepted on."""
        question, _ = await _thread(post_repo, asker, answerer)
        _, (foreign, _) = await _thread(post_repo, asker, answerer)

        with pytest.raises(MismatchError):
            await ledger.accept_answer(question.id, foreign.id, asker.id)

    @pytest.mark.asyncio
    async def test_mismatch_is_checked_before_ownership(
        self, ledger, post_repo, asker, answerer
    ):
        """A stranger accepting a foreign answer gets MismatchError."""
        question, _ = await _thread(post_repo, asker, answerer)
        _, (foreign, _) = await _thread(post_repo, asker, answerer)

        with pytest.raises(MismatchError):
            await ledger.accept_answer(question.id, foreign.id, make_user("eve").id)

    @pytest.mark.asyncio
    async def test_missing_answer(self, ledger, post_repo, asker, answerer):
        """Accepting an unknown answer raises NotFoundError."""
        question, _ = await _thread(post_repo, asker, answerer)

        with pytest.raises(NotFoundError, match="Answer not found"):
            await ledger.accept_answer(question.id, PostId(uuid4()), asker.id)

    @pytest.mark.asyncio
    async def test_missing_question(self, ledger, post_repo, asker, answerer):
        """Accepting on an unknown question raises NotFoundError."""
        _, (answer, _) = await _thread(post_repo, asker, answerer)

        with pytest.raises(NotFoundError, match="Question not found"):
            await ledger.accept_answer(PostId(uuid4()), answer.id, asker.id)

    @pytest.mark.asyncio
    async def test_inactive_answer(self, ledger, post_repo, asker, answerer):
        """Soft-deleted answers cannot be accepted."""
        question, (answer, _) = await _thread(post_repo, asker, answerer)
        await post_repo.save(
            answer.model_copy(update={"is_active": False}),
            expected_version=answer.version,
        )

        with pytest.raises(NotFoundError):
            await ledger.accept_answer(question.id, answer.id, asker.id)


class TestAcceptanceEvents:
    """Tests for AnswerAccepted events."""

    @pytest.mark.asyncio
    async def test_accept_notifies_answer_author(
        self, ledger, post_repo, notifier, asker, answerer
    ):
        """The answer author learns about the acceptance."""
        question, (answer, _) = await _thread(post_repo, asker, answerer)

        await ledger.accept_answer(question.id, answer.id, asker.id)

        assert len(notifier.events) == 1
        event = notifier.events[0]
        assert isinstance(event, AnswerAccepted)
        assert event.post_id == answer.id
        assert event.question_id == question.id
        assert event.actor_id == asker.id
        assert event.recipient_id == answerer.id

    @pytest.mark.asyncio
    async def test_accepting_own_answer_is_silent(
        self, ledger, post_repo, notifier, asker
    ):
        """Accepting your own answer is allowed but not announced."""
        question, (answer,) = await _thread(post_repo, asker, asker, answers=1)

        accepted = await ledger.accept_answer(question.id, answer.id, asker.id)

        assert accepted.is_accepted is True
        assert notifier.events == []
