"""Unit tests for NotificationService."""

from uuid import uuid4

import pytest

from stackit.domain.model import AnswerAccepted, VoteAdded
from stackit.domain.repository import NotificationRepository, UserRepository
from stackit.domain.service import NotificationService
from stackit.domain.value import NotificationType, PostId, UserId
from tests.conftest import make_user
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no database needed
unit_env = create_env_fixture()


class TestPublish:
    """Events become stored notifications."""

    @pytest.mark.asyncio
    async def test_answer_vote_notification(self, unit_env):
        """Upvotes on answers link both the question and the answer."""
        notification_service = await unit_env.get(NotificationService)
        user_repo = await unit_env.get(UserRepository)
        voter, recipient = make_user("bob"), make_user("alice")
        await user_repo.save(voter)
        question_id, answer_id = PostId(uuid4()), PostId(uuid4())

        await notification_service.publish(
            VoteAdded(
                post_id=answer_id,
                actor_id=voter.id,
                recipient_id=recipient.id,
                question_id=question_id,
            )
        )

        [notification] = await notification_service.list_for_user(recipient.id)
        assert notification.type == NotificationType.VOTE
        assert notification.message == "bob upvoted your answer"
        assert notification.question_id == question_id
        assert notification.answer_id == answer_id
        assert notification.sender_id == voter.id
        assert notification.is_read is False

    @pytest.mark.asyncio
    async def test_unknown_sender_is_someone(self, unit_env):
        """Senders missing from the user store are named generically."""
        notification_service = await unit_env.get(NotificationService)
        recipient = make_user("alice")

        await notification_service.publish(
            AnswerAccepted(
                post_id=PostId(uuid4()),
                actor_id=UserId(uuid4()),
                recipient_id=recipient.id,
                question_id=PostId(uuid4()),
            )
        )

        [notification] = await notification_service.list_for_user(recipient.id)
        assert notification.type == NotificationType.ACCEPT
        assert notification.message == "Someone accepted your answer"

    @pytest.mark.asyncio
    async def test_self_events_are_dropped(self, unit_env):
        """Nobody is notified about their own actions."""
        notification_service = await unit_env.get(NotificationService)
        notification_repo = await unit_env.get(NotificationRepository)
        user = make_user("alice")
        post_id = PostId(uuid4())

        await notification_service.publish(
            VoteAdded(
                post_id=post_id,
                actor_id=user.id,
                recipient_id=user.id,
                question_id=post_id,
            )
        )

        assert await notification_repo.count_unread(user.id) == 0


class TestInbox:
    """Tests for listing and marking notifications."""

    @pytest.mark.asyncio
    async def test_mark_some_then_all_read(self, unit_env):
        """Marking read by ID and then everything."""
        notification_service = await unit_env.get(NotificationService)
        recipient = make_user("alice")
        for _ in range(3):
            question_id = PostId(uuid4())
            await notification_service.publish(
                VoteAdded(
                    post_id=question_id,
                    actor_id=UserId(uuid4()),
                    recipient_id=recipient.id,
                    question_id=question_id,
                )
            )
        notifications = await notification_service.list_for_user(recipient.id)

        changed = await notification_service.mark_read(
            recipient.id, [notifications[0].id]
        )

        assert changed == 1
        assert await notification_service.count_unread(recipient.id) == 2
        unread = await notification_service.list_for_user(recipient.id, unread_only=True)
        assert notifications[0].id not in {n.id for n in unread}

        assert await notification_service.mark_read(recipient.id) == 2
        assert await notification_service.count_unread(recipient.id) == 0

    @pytest.mark.asyncio
    async def test_cannot_mark_someone_elses_notifications(self, unit_env):
        """mark_read only touches the recipient's own notifications."""
        notification_service = await unit_env.get(NotificationService)
        recipient, other = make_user("alice"), make_user("bob")
        question_id = PostId(uuid4())
        await notification_service.publish(
            VoteAdded(
                post_id=question_id,
                actor_id=UserId(uuid4()),
                recipient_id=recipient.id,
                question_id=question_id,
            )
        )
        [notification] = await notification_service.list_for_user(recipient.id)

        changed = await notification_service.mark_read(other.id, [notification.id])

        assert changed == 0
        assert await notification_service.count_unread(recipient.id) == 1
