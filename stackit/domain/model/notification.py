"""In-app notification entity."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from stackit.domain.model.common import DomainModel
from stackit.domain.value import NotificationId, NotificationType, PostId, UserId


class Notification(DomainModel):
    """Notification shown in a user's inbox."""

    id: NotificationId
    type: NotificationType
    recipient_id: UserId
    sender_id: UserId
    message: str = Field(min_length=1, max_length=500)
    question_id: PostId
    answer_id: Optional[PostId] = None
    is_read: bool = False
    created_at: datetime = Field(default_factory=datetime.now)
