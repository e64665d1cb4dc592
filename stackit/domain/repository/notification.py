"""Notification repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from stackit.domain.model.notification import Notification
from stackit.domain.value import NotificationId, UserId


class NotificationRepository(ABC):
    """Repository for in-app notifications."""

    @abstractmethod
    async def save(self, notification: Notification) -> Notification:
        """Save a notification."""
        pass

    @abstractmethod
    async def find_by_recipient(
        self,
        recipient_id: UserId,
        unread_only: bool = False,
        limit: int = 20,
        offset: int = 0,
    ) -> list[Notification]:
        """Find a user's notifications, newest first."""
        pass

    @abstractmethod
    async def count_unread(self, recipient_id: UserId) -> int:
        """Count a user's unread notifications."""
        pass

    @abstractmethod
    async def mark_read(
        self,
        recipient_id: UserId,
        notification_ids: Optional[list[NotificationId]] = None,
    ) -> int:
        """Mark notifications as read.

        Only notifications addressed to ``recipient_id`` are touched.

        Args:
            recipient_id: Owner of the notifications
            notification_ids: Notifications to mark, None for all

        Returns:
            Number of notifications that changed from unread to read
        """
        pass
