"""Domain services."""

from .base import Service
from .comment_service import CommentService
from .concurrency import retry_on_conflict
from .jwt_service import JWTService
from .notification_service import NotificationService
from .notifier import Notifier
from .post_service import AuthorStats, PostService
from .tag_service import TagService
from .user_service import UserService
from .vote_ledger import VoteLedger, VoteResult

__all__ = [
    "AuthorStats",
    "CommentService",
    "JWTService",
    "NotificationService",
    "Notifier",
    "PostService",
    "Service",
    "TagService",
    "UserService",
    "VoteLedger",
    "VoteResult",
    "retry_on_conflict",
]
