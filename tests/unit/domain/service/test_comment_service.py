"""Unit tests for CommentService."""

from uuid import uuid4

import pytest

from stackit.domain.error import NotAuthorizedError, NotFoundError
from stackit.domain.model import CommentAdded
from stackit.domain.repository import (
    CommentRepository,
    NotificationRepository,
    PostRepository,
    UserRepository,
)
from stackit.domain.service import CommentService, PostService
from stackit.domain.value import CommentId, NotificationType, PostId, UserRole
from stackit.persistence.repository.inmemory import (
    InMemoryCommentRepository,
    InMemoryPostRepository,
)
from tests.conftest import RecordingNotifier, make_answer, make_question, make_user
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no database needed
unit_env = create_env_fixture()


async def _thread(unit_env, asker, answerer):
    """Save a question by ``asker`` with one answer by ``answerer``."""
    post_repo = await unit_env.get(PostRepository)
    question = await post_repo.save(make_question(asker), expected_version=None)
    answer = await post_repo.save(
        make_answer(question, answerer), expected_version=None
    )
    return question, answer


class TestAddComment:
    """Tests for commenting on answers."""

    @pytest.mark.asyncio
    async def test_comment_notifies_answer_author(self, unit_env):
        """The answer author gets a comment notification linking the answer."""
        comment_service = await unit_env.get(CommentService)
        user_repo = await unit_env.get(UserRepository)
        notification_repo = await unit_env.get(NotificationRepository)
        asker, answerer, commenter = (
            make_user("alice"),
            make_user("bob"),
            make_user("carol"),
        )
        await user_repo.save(commenter)
        question, answer = await _thread(unit_env, asker, answerer)

        comment = await comment_service.add_comment(
            answer.id, commenter, "Does this work on tuples too?"
        )

        assert comment.answer_id == answer.id
        assert comment.question_id == question.id
        assert comment.author_handle == commenter.handle
        [notification] = await notification_repo.find_by_recipient(answerer.id)
        assert notification.type == NotificationType.COMMENT
        assert notification.message == "carol commented on your answer"
        assert notification.question_id == question.id
        assert notification.answer_id == answer.id

    @pytest.mark.asyncio
    async def test_commenting_own_answer_is_silent(self, unit_env):
        """No notification for commenting on your own answer."""
        comment_service = await unit_env.get(CommentService)
        notification_repo = await unit_env.get(NotificationRepository)
        asker, answerer = make_user("alice"), make_user("bob")
        _, answer = await _thread(unit_env, asker, answerer)

        await comment_service.add_comment(answer.id, answerer, "Edit: also works.")

        assert await notification_repo.count_unread(answerer.id) == 0

    @pytest.mark.asyncio
    async def test_comment_on_deleted_answer(self, unit_env):
        """Soft-deleted answers take no comments."""
        comment_service = await unit_env.get(CommentService)
        post_service = await unit_env.get(PostService)
        asker, answerer = make_user("alice"), make_user("bob")
        _, answer = await _thread(unit_env, asker, answerer)
        await post_service.delete_answer(answer.id, answerer)

        with pytest.raises(NotFoundError, match="Answer not found"):
            await comment_service.add_comment(answer.id, asker, "Why delete it?")

    @pytest.mark.asyncio
    async def test_comment_on_question_id(self, unit_env):
        """Only answers take comments."""
        comment_service = await unit_env.get(CommentService)
        asker, answerer = make_user("alice"), make_user("bob")
        question, _ = await _thread(unit_env, asker, answerer)

        with pytest.raises(NotFoundError):
            await comment_service.add_comment(question.id, answerer, "Hello")

    @pytest.mark.asyncio
    async def test_event_fields(self):
        """CommentAdded is about the answer and addressed to its author."""
        notifier = RecordingNotifier()
        post_repo = InMemoryPostRepository()
        comment_service = CommentService(
            InMemoryCommentRepository(), post_repo, notifier
        )
        asker, answerer = make_user("alice"), make_user("bob")
        question = await post_repo.save(make_question(asker), expected_version=None)
        answer = await post_repo.save(
            make_answer(question, answerer), expected_version=None
        )

        await comment_service.add_comment(answer.id, asker, "Thanks, that helped.")

        [event] = notifier.events
        assert isinstance(event, CommentAdded)
        assert event.post_id == answer.id
        assert event.question_id == question.id
        assert event.recipient_id == answerer.id
        assert event.actor_id == asker.id


class TestDeleteComment:
    """Only the comment author or an admin may delete a comment."""

    @pytest.mark.asyncio
    async def test_author_can_delete(self, unit_env):
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        asker, answerer = make_user("alice"), make_user("bob")
        _, answer = await _thread(unit_env, asker, answerer)
        comment = await comment_service.add_comment(answer.id, asker, "Nice one.")

        await comment_service.delete_comment(answer.id, comment.id, asker)

        assert await comment_repo.find_by_id(comment.id) is None

    @pytest.mark.asyncio
    async def test_admin_can_delete(self, unit_env):
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        asker, answerer = make_user("alice"), make_user("bob")
        admin = make_user("root_admin", role=UserRole.ADMIN)
        _, answer = await _thread(unit_env, asker, answerer)
        comment = await comment_service.add_comment(answer.id, asker, "Spam here.")

        await comment_service.delete_comment(answer.id, comment.id, admin)

        assert await comment_repo.find_by_id(comment.id) is None

    @pytest.mark.asyncio
    async def test_other_user_cannot_delete(self, unit_env):
        """The answer author does not own comments on the answer."""
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        asker, answerer = make_user("alice"), make_user("bob")
        _, answer = await _thread(unit_env, asker, answerer)
        comment = await comment_service.add_comment(answer.id, asker, "Not quite.")

        with pytest.raises(NotAuthorizedError):
            await comment_service.delete_comment(answer.id, comment.id, answerer)

        assert await comment_repo.find_by_id(comment.id) is not None

    @pytest.mark.asyncio
    async def test_comment_under_other_answer(self, unit_env):
        """A comment is only reachable through its own answer."""
        comment_service = await unit_env.get(CommentService)
        post_repo = await unit_env.get(PostRepository)
        asker, answerer = make_user("alice"), make_user("bob")
        question, answer = await _thread(unit_env, asker, answerer)
        other = await post_repo.save(
            make_answer(question, asker, body="Or use slicing: xs[::-1]."),
            expected_version=None,
        )
        comment = await comment_service.add_comment(answer.id, asker, "Nice one.")

        with pytest.raises(NotFoundError, match="Comment not found"):
            await comment_service.delete_comment(other.id, comment.id, asker)

    @pytest.mark.asyncio
    async def test_missing_comment(self, unit_env):
        comment_service = await unit_env.get(CommentService)
        asker, answerer = make_user("alice"), make_user("bob")
        _, answer = await _thread(unit_env, asker, answerer)

        with pytest.raises(NotFoundError, match="Comment not found"):
            await comment_service.delete_comment(
                answer.id, CommentId(uuid4()), asker
            )


class TestCommentsByAnswer:
    """Grouping comments for the question detail view."""

    @pytest.mark.asyncio
    async def test_grouped_oldest_first(self, unit_env):
        comment_service = await unit_env.get(CommentService)
        post_repo = await unit_env.get(PostRepository)
        asker, answerer = make_user("alice"), make_user("bob")
        question, answer = await _thread(unit_env, asker, answerer)
        other = await post_repo.save(
            make_answer(question, asker, body="Or use slicing: xs[::-1]."),
            expected_version=None,
        )
        first = await comment_service.add_comment(answer.id, asker, "First.")
        second = await comment_service.add_comment(answer.id, answerer, "Second.")
        on_other = await comment_service.add_comment(other.id, answerer, "Neat.")

        grouped = await comment_service.comments_by_answer(
            [answer.id, other.id, PostId(uuid4())]
        )

        assert [c.id for c in grouped[answer.id]] == [first.id, second.id]
        assert [c.id for c in grouped[other.id]] == [on_other.id]

    @pytest.mark.asyncio
    async def test_no_answers(self, unit_env):
        comment_service = await unit_env.get(CommentService)

        assert await comment_service.comments_by_answer([]) == {}
