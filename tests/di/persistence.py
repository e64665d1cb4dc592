"""Mock persistence providers for testing."""

from dishka import Scope, provide

from stackit.domain.repository import (
    CommentRepository,
    NotificationRepository,
    PostRepository,
    TagRepository,
    UserRepository,
)
from stackit.persistence.repository.inmemory import (
    InMemoryCommentRepository,
    InMemoryNotificationRepository,
    InMemoryPostRepository,
    InMemoryTagRepository,
    InMemoryUserRepository,
)
from stackit.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    Uses APP scope so state survives across requests of one container, as
    a database would. Each test builds its own container, so tests stay
    isolated.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_user_repository(self) -> UserRepository:
        """Provide in-memory user repository."""
        return InMemoryUserRepository()

    @provide(scope=Scope.APP)
    def get_post_repository(self) -> PostRepository:
        """Provide in-memory post repository."""
        return InMemoryPostRepository()

    @provide(scope=Scope.APP)
    def get_tag_repository(self) -> TagRepository:
        """Provide in-memory tag repository."""
        return InMemoryTagRepository()

    @provide(scope=Scope.APP)
    def get_notification_repository(self) -> NotificationRepository:
        """Provide in-memory notification repository."""
        return InMemoryNotificationRepository()

    @provide(scope=Scope.APP)
    def get_comment_repository(self) -> CommentRepository:
        """Provide in-memory comment repository."""
        return InMemoryCommentRepository()
