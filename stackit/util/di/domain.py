"""Domain layer DI providers."""

from dishka import Scope, provide

from stackit.config import AuthSettings, ConsistencySettings
from stackit.domain.repository import (
    CommentRepository,
    NotificationRepository,
    PostRepository,
    TagRepository,
    UserRepository,
)
from stackit.domain.service import (
    CommentService,
    JWTService,
    NotificationService,
    Notifier,
    PostService,
    TagService,
    UserService,
    VoteLedger,
)
from stackit.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_user_service(self, user_repository: UserRepository) -> UserService:
        """Provide user domain service."""
        return UserService(user_repository=user_repository)

    @provide
    def get_notification_service(
        self,
        notification_repository: NotificationRepository,
        user_repository: UserRepository,
    ) -> NotificationService:
        """Provide notification domain service."""
        return NotificationService(
            notification_repository=notification_repository,
            user_repository=user_repository,
        )

    @provide
    def get_notifier(self, notification_service: NotificationService) -> Notifier:
        """Provide the notifier: events are stored as in-app notifications."""
        return notification_service

    @provide
    def get_post_service(
        self,
        post_repository: PostRepository,
        notifier: Notifier,
        consistency_settings: ConsistencySettings,
    ) -> PostService:
        """Provide post domain service."""
        return PostService(
            post_repository=post_repository,
            notifier=notifier,
            consistency_settings=consistency_settings,
        )

    @provide
    def get_vote_ledger(
        self,
        post_repository: PostRepository,
        notifier: Notifier,
        consistency_settings: ConsistencySettings,
    ) -> VoteLedger:
        """Provide vote ledger domain service."""
        return VoteLedger(
            post_repository=post_repository,
            notifier=notifier,
            consistency_settings=consistency_settings,
        )

    @provide
    def get_tag_service(
        self, tag_repository: TagRepository, post_repository: PostRepository
    ) -> TagService:
        """Provide tag domain service."""
        return TagService(tag_repository=tag_repository, post_repository=post_repository)

    @provide
    def get_comment_service(
        self,
        comment_repository: CommentRepository,
        post_repository: PostRepository,
        notifier: Notifier,
    ) -> CommentService:
        """Provide answer comment domain service."""
        return CommentService(
            comment_repository=comment_repository,
            post_repository=post_repository,
            notifier=notifier,
        )
