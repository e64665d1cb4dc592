"""Unit tests for PostService."""

from uuid import uuid4

import pytest

from stackit.config import ConsistencySettings
from stackit.domain.error import NotAuthorizedError, NotFoundError
from stackit.domain.model import AnswerPosted
from stackit.domain.repository import (
    NotificationRepository,
    PostRepository,
    QuestionSortOrder,
    UserRepository,
)
from stackit.domain.service import PostService, VoteLedger
from stackit.domain.value import PostId, TagName, UserRole, VoteDirection
from stackit.persistence.repository.inmemory import InMemoryPostRepository
from tests.conftest import RecordingNotifier, make_user
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no database needed
unit_env = create_env_fixture()


async def _ask(post_service, author, title="How do I parse JSON in Python?", tags=None):
    return await post_service.create_question(
        author,
        title,
        "I have a JSON string and want a dict out of it.",
        [TagName(t) for t in (tags or ["python"])],
    )


class TestCreate:
    """Tests for creating questions and answers."""

    @pytest.mark.asyncio
    async def test_create_question(self, unit_env):
        """A new question is saved with version 1 and no votes."""
        post_service = await unit_env.get(PostService)
        post_repo = await unit_env.get(PostRepository)
        author = make_user("alice")

        question = await _ask(post_service, author, tags=["python", "json", "python"])

        stored = await post_repo.find_by_id(question.id)
        assert stored.version == 1
        assert stored.vote_score == 0
        assert [t.root for t in stored.tags] == ["python", "json"]
        assert stored.author_handle == author.handle

    @pytest.mark.asyncio
    async def test_create_answer_notifies_asker(self, unit_env):
        """Answering someone else's question stores a notification."""
        post_service = await unit_env.get(PostService)
        user_repo = await unit_env.get(UserRepository)
        notification_repo = await unit_env.get(NotificationRepository)
        asker, answerer = make_user("alice"), make_user("bob")
        await user_repo.save(asker)
        await user_repo.save(answerer)
        question = await _ask(post_service, asker)

        answer = await post_service.create_answer(
            question.id, answerer, "Use json.loads on the string."
        )

        assert answer.question_id == question.id
        notifications = await notification_repo.find_by_recipient(asker.id)
        assert len(notifications) == 1
        assert notifications[0].message == "bob answered your question"
        assert notifications[0].answer_id == answer.id

    @pytest.mark.asyncio
    async def test_answering_own_question_is_silent(self, unit_env):
        """No notification for answering your own question."""
        post_service = await unit_env.get(PostService)
        notification_repo = await unit_env.get(NotificationRepository)
        asker = make_user("alice")
        question = await _ask(post_service, asker)

        await post_service.create_answer(question.id, asker, "Never mind, solved it.")

        assert await notification_repo.count_unread(asker.id) == 0

    @pytest.mark.asyncio
    async def test_answer_to_missing_question(self, unit_env):
        """Answering an unknown question raises NotFoundError."""
        post_service = await unit_env.get(PostService)

        with pytest.raises(NotFoundError, match="Question not found"):
            await post_service.create_answer(
                PostId(uuid4()), make_user("bob"), "Some answer body"
            )

    @pytest.mark.asyncio
    async def test_answer_to_deleted_question(self, unit_env):
        """Deleted questions accept no answers."""
        post_service = await unit_env.get(PostService)
        asker = make_user("alice")
        question = await _ask(post_service, asker)
        await post_service.delete_question(question.id, asker)

        with pytest.raises(NotFoundError):
            await post_service.create_answer(
                question.id, make_user("bob"), "Some answer body"
            )


class TestAnswerPostedEvent:
    """AnswerPosted carries the thread."""

    @pytest.mark.asyncio
    async def test_event_fields(self):
        """Event is about the answer and addressed to the asker."""
        notifier = RecordingNotifier()
        post_service = PostService(
            InMemoryPostRepository(), notifier, ConsistencySettings()
        )
        asker, answerer = make_user("alice"), make_user("bob")
        question = await _ask(post_service, asker)

        answer = await post_service.create_answer(
            question.id, answerer, "Use json.loads on the string."
        )

        assert len(notifier.events) == 1
        event = notifier.events[0]
        assert isinstance(event, AnswerPosted)
        assert event.post_id == answer.id
        assert event.question_id == question.id
        assert event.recipient_id == asker.id
        assert event.actor_id == answerer.id


class TestEditAndDelete:
    """Tests for ownership-checked edits and soft-deletes."""

    @pytest.mark.asyncio
    async def test_author_can_edit_question(self, unit_env):
        """Edits bump the version and keep votes."""
        post_service = await unit_env.get(PostService)
        ledger = await unit_env.get(VoteLedger)
        asker, voter = make_user("alice"), make_user("bob")
        question = await _ask(post_service, asker)
        await ledger.cast_vote(question.id, voter.id, VoteDirection.UP)

        updated, previous_tags = await post_service.update_question(
            question.id, asker, title="How do I parse JSON safely?", tags=[TagName("json")]
        )

        assert updated.title == "How do I parse JSON safely?"
        assert [t.root for t in updated.tags] == ["json"]
        assert [t.root for t in previous_tags] == ["python"]
        assert updated.vote_score == 1
        assert updated.version == 3

    @pytest.mark.asyncio
    async def test_stranger_cannot_edit_question(self, unit_env):
        """Only the author or an admin may edit."""
        post_service = await unit_env.get(PostService)
        question = await _ask(post_service, make_user("alice"))

        with pytest.raises(NotAuthorizedError):
            await post_service.update_question(
                question.id, make_user("mallory"), body="Hijacked body text here."
            )

    @pytest.mark.asyncio
    async def test_admin_can_delete_question(self, unit_env):
        """Admins may delete any question."""
        post_service = await unit_env.get(PostService)
        question = await _ask(post_service, make_user("alice"))
        admin = make_user("moderator", role=UserRole.ADMIN)

        deleted = await post_service.delete_question(question.id, admin)

        assert deleted.is_active is False
        with pytest.raises(NotFoundError):
            await post_service.get_active_question(question.id)

    @pytest.mark.asyncio
    async def test_answer_edit_by_author(self, unit_env):
        """Answer authors can edit their answers."""
        post_service = await unit_env.get(PostService)
        asker, answerer = make_user("alice"), make_user("bob")
        question = await _ask(post_service, asker)
        answer = await post_service.create_answer(question.id, answerer, "First draft.")

        updated = await post_service.update_answer(answer.id, answerer, "Second draft.")

        assert updated.body == "Second draft."
        with pytest.raises(NotAuthorizedError):
            await post_service.update_answer(answer.id, asker, "Not yours to edit.")

    @pytest.mark.asyncio
    async def test_deleting_accepted_answer_clears_pointer(self, unit_env):
        """A question never points at a deleted answer."""
        post_service = await unit_env.get(PostService)
        ledger = await unit_env.get(VoteLedger)
        asker, answerer = make_user("alice"), make_user("bob")
        question = await _ask(post_service, asker)
        answer = await post_service.create_answer(question.id, answerer, "Use json.")
        await ledger.accept_answer(question.id, answer.id, asker.id)

        deleted = await post_service.delete_answer(answer.id, answerer)

        assert deleted.is_active is False
        assert deleted.is_accepted is False
        stored = await post_service.get_active_question(question.id)
        assert stored.accepted_answer_id is None
        assert await post_service.count_answers(question.id) == 0


class TestReads:
    """Tests for listing and view counting."""

    @pytest.mark.asyncio
    async def test_list_questions_sorted_by_votes(self, unit_env):
        """Sorting by votes puts the best question first."""
        post_service = await unit_env.get(PostService)
        ledger = await unit_env.get(VoteLedger)
        asker = make_user("alice")
        first = await _ask(post_service, asker, title="First question title")
        second = await _ask(post_service, asker, title="Second question title")
        await ledger.cast_vote(first.id, make_user("bob").id, VoteDirection.UP)

        questions, total = await post_service.list_questions(
            sort=QuestionSortOrder.VOTES
        )

        assert total == 2
        assert [q.id for q in questions] == [first.id, second.id]

    @pytest.mark.asyncio
    async def test_list_questions_filters_by_tag_and_search(self, unit_env):
        """Tag and keyword filters narrow the listing."""
        post_service = await unit_env.get(PostService)
        asker = make_user("alice")
        await _ask(post_service, asker, title="Python decorators explained", tags=["python"])
        rust = await _ask(post_service, asker, title="Rust lifetimes explained", tags=["rust"])

        by_tag, _ = await post_service.list_questions(tag=TagName("rust"))
        by_search, total = await post_service.list_questions(search="LIFETIMES")

        assert [q.id for q in by_tag] == [rust.id]
        assert [q.id for q in by_search] == [rust.id]
        assert total == 1

    @pytest.mark.asyncio
    async def test_record_view_skips_author(self, unit_env):
        """Authors viewing their own question don't count."""
        post_service = await unit_env.get(PostService)
        post_repo = await unit_env.get(PostRepository)
        asker = make_user("alice")
        question = await _ask(post_service, asker)

        assert await post_service.record_view(question, asker.id) is False
        assert await post_service.record_view(question, make_user("bob").id) is True
        assert await post_service.record_view(question, None) is True

        stored = await post_repo.find_by_id(question.id)
        assert stored.views == 2
        assert stored.version == question.version
