"""PostgreSQL repository implementations."""

from stackit.persistence.repository.comment import PostgresCommentRepository
from stackit.persistence.repository.notification import PostgresNotificationRepository
from stackit.persistence.repository.post import PostgresPostRepository
from stackit.persistence.repository.tag import PostgresTagRepository
from stackit.persistence.repository.user import PostgresUserRepository

__all__ = [
    "PostgresCommentRepository",
    "PostgresNotificationRepository",
    "PostgresPostRepository",
    "PostgresTagRepository",
    "PostgresUserRepository",
]
