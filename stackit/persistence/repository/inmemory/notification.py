"""In-memory notification repository for testing."""

from typing import Optional

from stackit.domain.model import Notification
from stackit.domain.repository import NotificationRepository
from stackit.domain.value import NotificationId, UserId


class InMemoryNotificationRepository(NotificationRepository):
    """In-memory implementation of NotificationRepository for testing."""

    def __init__(self) -> None:
        self._notifications: dict[NotificationId, Notification] = {}

    async def save(self, notification: Notification) -> Notification:
        """Save a notification."""
        self._notifications[notification.id] = notification
        return notification

    def _for(self, recipient_id: UserId, unread_only: bool) -> list[Notification]:
        return [
            n
            for n in self._notifications.values()
            if n.recipient_id == recipient_id and not (unread_only and n.is_read)
        ]

    async def find_by_recipient(
        self,
        recipient_id: UserId,
        unread_only: bool = False,
        limit: int = 20,
        offset: int = 0,
    ) -> list[Notification]:
        """Find a user's notifications, newest first."""
        notifications = self._for(recipient_id, unread_only)
        notifications.sort(key=lambda n: n.created_at, reverse=True)
        return notifications[offset : offset + limit]

    async def count_unread(self, recipient_id: UserId) -> int:
        """Count a user's unread notifications."""
        return len(self._for(recipient_id, unread_only=True))

    async def mark_read(
        self,
        recipient_id: UserId,
        notification_ids: Optional[list[NotificationId]] = None,
    ) -> int:
        """Mark notifications as read, returning how many changed."""
        changed = 0
        for n in self._for(recipient_id, unread_only=True):
            if notification_ids is not None and n.id not in notification_ids:
                continue
            self._notifications[n.id] = n.model_copy(update={"is_read": True})
            changed += 1
        return changed
