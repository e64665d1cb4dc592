"""PostgreSQL implementation of Notification repository."""

from typing import Optional

from sqlalchemy import desc, func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from stackit.domain.model import Notification
from stackit.domain.repository import NotificationRepository
from stackit.domain.value import NotificationId, UserId
from stackit.persistence.mappers import notification_to_dict, row_to_notification
from stackit.persistence.tables import notifications_table


class PostgresNotificationRepository(NotificationRepository):
    """PostgreSQL implementation of NotificationRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def save(self, notification: Notification) -> Notification:
        """Insert a notification."""
        stmt = notifications_table.insert().values(**notification_to_dict(notification))
        await self.session.execute(stmt)
        await self.session.flush()
        return notification

    async def find_by_recipient(
        self,
        recipient_id: UserId,
        unread_only: bool = False,
        limit: int = 20,
        offset: int = 0,
    ) -> list[Notification]:
        """Find a user's notifications, newest first."""
        stmt = select(notifications_table).where(
            notifications_table.c.recipient_id == recipient_id
        )
        if unread_only:
            stmt = stmt.where(notifications_table.c.is_read.is_(False))
        stmt = (
            stmt.order_by(desc(notifications_table.c.created_at))
            .limit(limit)
            .offset(offset)
        )

        result = await self.session.execute(stmt)
        return [row_to_notification(dict(row)) for row in result.mappings().all()]

    async def count_unread(self, recipient_id: UserId) -> int:
        """Count a user's unread notifications."""
        stmt = (
            select(func.count())
            .select_from(notifications_table)
            .where(
                notifications_table.c.recipient_id == recipient_id,
                notifications_table.c.is_read.is_(False),
            )
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def mark_read(
        self,
        recipient_id: UserId,
        notification_ids: Optional[list[NotificationId]] = None,
    ) -> int:
        """Mark notifications as read, returning how many changed."""
        stmt = (
            update(notifications_table)
            .where(notifications_table.c.recipient_id == recipient_id)
            .where(notifications_table.c.is_read.is_(False))
            .values(is_read=True)
        )
        if notification_ids is not None:
            if not notification_ids:
                return 0
            stmt = stmt.where(notifications_table.c.id.in_(notification_ids))

        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount or 0
