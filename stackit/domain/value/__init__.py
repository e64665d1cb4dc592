"""Domain value objects for StackIt."""

from stackit.domain.value.identifiers import (
    CommentId,
    NotificationId,
    PostId,
    TagId,
    UserId,
)
from stackit.domain.value.types import (
    EventType,
    Handle,
    NotificationType,
    PostKind,
    TagName,
    UserRole,
    VoteDirection,
    VoteState,
)

__all__ = [
    # Identifiers
    "UserId",
    "PostId",
    "TagId",
    "NotificationId",
    "CommentId",
    # Types
    "EventType",
    "Handle",
    "NotificationType",
    "PostKind",
    "TagName",
    "UserRole",
    "VoteDirection",
    "VoteState",
]
