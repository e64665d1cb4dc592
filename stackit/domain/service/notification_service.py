"""Notification domain service.

In-repo Notifier: domain events become stored in-app notifications.
"""

from typing import Optional
from uuid import uuid4

import logfire

from stackit.domain.model import DomainEvent, Notification
from stackit.domain.repository import NotificationRepository, UserRepository
from stackit.domain.value import EventType, NotificationId, NotificationType, UserId

from .base import Service
from .notifier import Notifier

_NOTIFICATION_TYPES = {
    EventType.VOTE_ADDED: NotificationType.VOTE,
    EventType.ANSWER_ACCEPTED: NotificationType.ACCEPT,
    EventType.ANSWER_POSTED: NotificationType.ANSWER,
    EventType.COMMENT_ADDED: NotificationType.COMMENT,
}


class NotificationService(Service, Notifier):
    """Stores notifications for domain events and serves the inbox."""

    def __init__(
        self,
        notification_repository: NotificationRepository,
        user_repository: UserRepository,
    ) -> None:
        """Initialize notification service.

        Args:
            notification_repository: Notification repository
            user_repository: User repository, used to name the sender
        """
        self.notification_repository = notification_repository
        self.user_repository = user_repository

    async def publish(self, event: DomainEvent) -> None:
        """Store a notification for the event's recipient.

        Events where the actor is also the recipient are dropped.

        Args:
            event: The event to publish
        """
        with logfire.span(
            "notification_service.publish",
            event_type=event.type.value,
            post_id=str(event.post_id),
            recipient_id=str(event.recipient_id),
        ):
            if event.actor_id == event.recipient_id:
                logfire.debug("Skipping self notification", event_type=event.type.value)
                return

            sender = await self.user_repository.find_by_id(event.actor_id)
            sender_name = sender.handle.root if sender else "Someone"

            notification = Notification(
                id=NotificationId(uuid4()),
                type=_NOTIFICATION_TYPES[event.type],
                recipient_id=event.recipient_id,
                sender_id=event.actor_id,
                message=_message_for(event, sender_name),
                question_id=event.question_id,
                answer_id=None if event.is_about_question else event.post_id,
                created_at=event.occurred_at,
            )
            await self.notification_repository.save(notification)
            logfire.info(
                "Notification stored",
                notification_id=str(notification.id),
                type=notification.type.value,
            )

    async def list_for_user(
        self,
        recipient_id: UserId,
        unread_only: bool = False,
        limit: int = 20,
        offset: int = 0,
    ) -> list[Notification]:
        """List a user's notifications, newest first."""
        with logfire.span(
            "notification_service.list_for_user",
            recipient_id=str(recipient_id),
            unread_only=unread_only,
        ):
            notifications = await self.notification_repository.find_by_recipient(
                recipient_id, unread_only=unread_only, limit=limit, offset=offset
            )
            logfire.info("Notifications retrieved", count=len(notifications))
            return notifications

    async def count_unread(self, recipient_id: UserId) -> int:
        """Count a user's unread notifications."""
        return await self.notification_repository.count_unread(recipient_id)

    async def mark_read(
        self,
        recipient_id: UserId,
        notification_ids: Optional[list[NotificationId]] = None,
    ) -> int:
        """Mark the given notifications, or all of them, as read.

        Returns:
            Number of notifications changed
        """
        with logfire.span(
            "notification_service.mark_read",
            recipient_id=str(recipient_id),
            all=notification_ids is None,
        ):
            changed = await self.notification_repository.mark_read(
                recipient_id, notification_ids
            )
            logfire.info("Notifications marked read", count=changed)
            return changed


def _message_for(event: DomainEvent, sender_name: str) -> str:
    if event.type == EventType.VOTE_ADDED:
        target = "question" if event.is_about_question else "answer"
        return f"{sender_name} upvoted your {target}"
    if event.type == EventType.ANSWER_ACCEPTED:
        return f"{sender_name} accepted your answer"
    if event.type == EventType.COMMENT_ADDED:
        return f"{sender_name} commented on your answer"
    return f"{sender_name} answered your question"
