"""List notifications use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field

from stackit.domain.service import NotificationService
from stackit.domain.value import NotificationType, UserId


class NotificationItem(BaseModel):
    """Notification item in response."""

    notification_id: str
    type: NotificationType
    sender_id: str
    message: str
    question_id: str
    answer_id: str | None
    is_read: bool
    created_at: datetime


class ListNotificationsRequest(BaseModel):
    """List notifications request."""

    user_id: str  # Recipient, from authenticated user
    unread_only: bool = False
    limit: int = Field(default=20, ge=1, le=100)
    offset: int = Field(default=0, ge=0)


class ListNotificationsResponse(BaseModel):
    """List notifications response."""

    notifications: list[NotificationItem]
    unread_count: int


class ListNotificationsUseCase:
    """Use case for reading the notification inbox."""

    def __init__(self, notification_service: NotificationService) -> None:
        """Initialize list notifications use case.

        Args:
            notification_service: Notification domain service
        """
        self.notification_service = notification_service

    async def execute(
        self, request: ListNotificationsRequest
    ) -> ListNotificationsResponse:
        """Execute list notifications flow."""
        recipient_id = UserId(UUID(request.user_id))

        notifications = await self.notification_service.list_for_user(
            recipient_id,
            unread_only=request.unread_only,
            limit=request.limit,
            offset=request.offset,
        )
        unread_count = await self.notification_service.count_unread(recipient_id)

        return ListNotificationsResponse(
            notifications=[
                NotificationItem(
                    notification_id=str(n.id),
                    type=n.type,
                    sender_id=str(n.sender_id),
                    message=n.message,
                    question_id=str(n.question_id),
                    answer_id=str(n.answer_id) if n.answer_id else None,
                    is_read=n.is_read,
                    created_at=n.created_at,
                )
                for n in notifications
            ],
            unread_count=unread_count,
        )
