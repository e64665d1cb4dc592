"""Mark notifications read use case."""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel

from stackit.domain.service import NotificationService
from stackit.domain.value import NotificationId, UserId


class MarkReadRequest(BaseModel):
    """Mark read request."""

    user_id: str  # Recipient, from authenticated user
    notification_ids: Optional[list[str]] = None  # None marks all


class MarkReadResponse(BaseModel):
    """Mark read response."""

    marked: int
    unread_count: int


class MarkReadUseCase:
    """Use case for marking notifications as read."""

    def __init__(self, notification_service: NotificationService) -> None:
        """Initialize mark read use case.

        Args:
            notification_service: Notification domain service
        """
        self.notification_service = notification_service

    async def execute(self, request: MarkReadRequest) -> MarkReadResponse:
        """Execute mark read flow.

        Notifications addressed to other users are silently ignored.
        """
        recipient_id = UserId(UUID(request.user_id))
        ids = (
            [NotificationId(UUID(i)) for i in request.notification_ids]
            if request.notification_ids is not None
            else None
        )

        marked = await self.notification_service.mark_read(recipient_id, ids)
        unread_count = await self.notification_service.count_unread(recipient_id)

        return MarkReadResponse(marked=marked, unread_count=unread_count)
