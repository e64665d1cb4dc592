"""Repository interfaces for the StackIt domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from stackit.domain.repository.comment import CommentRepository
from stackit.domain.repository.notification import NotificationRepository
from stackit.domain.repository.post import PostRepository, QuestionSortOrder
from stackit.domain.repository.tag import TagRepository
from stackit.domain.repository.user import UserRepository

__all__ = [
    "CommentRepository",
    "NotificationRepository",
    "PostRepository",
    "QuestionSortOrder",
    "TagRepository",
    "UserRepository",
]
