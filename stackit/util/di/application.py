"""Application layer DI providers."""

from dishka import Scope, provide

from stackit.application.usecase.answer import (
    AcceptAnswerUseCase,
    CreateAnswerUseCase,
    DeleteAnswerUseCase,
    UpdateAnswerUseCase,
)
from stackit.application.usecase.auth import GetCurrentUserUseCase
from stackit.application.usecase.comment import (
    AddCommentUseCase,
    DeleteCommentUseCase,
)
from stackit.application.usecase.notification import (
    ListNotificationsUseCase,
    MarkReadUseCase,
)
from stackit.application.usecase.question import (
    CreateQuestionUseCase,
    DeleteQuestionUseCase,
    GetQuestionUseCase,
    ListQuestionsUseCase,
    UpdateQuestionUseCase,
)
from stackit.application.usecase.tag import ListTagsUseCase
from stackit.application.usecase.user import GetUserProfileUseCase
from stackit.application.usecase.vote import CastVoteUseCase
from stackit.domain.service import (
    CommentService,
    JWTService,
    NotificationService,
    PostService,
    TagService,
    UserService,
    VoteLedger,
)
from stackit.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider."""

    scope = Scope.REQUEST

    # Auth use cases
    @provide
    def get_current_user_use_case(
        self, jwt_service: JWTService, user_service: UserService
    ) -> GetCurrentUserUseCase:
        """Provide get current user use case."""
        return GetCurrentUserUseCase(jwt_service=jwt_service, user_service=user_service)

    # Question use cases
    @provide
    def get_create_question_use_case(
        self,
        post_service: PostService,
        tag_service: TagService,
        user_service: UserService,
    ) -> CreateQuestionUseCase:
        """Provide create question use case."""
        return CreateQuestionUseCase(
            post_service=post_service,
            tag_service=tag_service,
            user_service=user_service,
        )

    @provide
    def get_get_question_use_case(
        self, post_service: PostService, comment_service: CommentService
    ) -> GetQuestionUseCase:
        """Provide get question use case."""
        return GetQuestionUseCase(
            post_service=post_service, comment_service=comment_service
        )

    @provide
    def get_list_questions_use_case(
        self, post_service: PostService
    ) -> ListQuestionsUseCase:
        """Provide list questions use case."""
        return ListQuestionsUseCase(post_service=post_service)

    @provide
    def get_update_question_use_case(
        self,
        post_service: PostService,
        tag_service: TagService,
        user_service: UserService,
    ) -> UpdateQuestionUseCase:
        """Provide update question use case."""
        return UpdateQuestionUseCase(
            post_service=post_service,
            tag_service=tag_service,
            user_service=user_service,
        )

    @provide
    def get_delete_question_use_case(
        self,
        post_service: PostService,
        tag_service: TagService,
        user_service: UserService,
    ) -> DeleteQuestionUseCase:
        """Provide delete question use case."""
        return DeleteQuestionUseCase(
            post_service=post_service,
            tag_service=tag_service,
            user_service=user_service,
        )

    # Answer use cases
    @provide
    def get_create_answer_use_case(
        self, post_service: PostService, user_service: UserService
    ) -> CreateAnswerUseCase:
        """Provide create answer use case."""
        return CreateAnswerUseCase(post_service=post_service, user_service=user_service)

    @provide
    def get_update_answer_use_case(
        self, post_service: PostService, user_service: UserService
    ) -> UpdateAnswerUseCase:
        """Provide update answer use case."""
        return UpdateAnswerUseCase(post_service=post_service, user_service=user_service)

    @provide
    def get_delete_answer_use_case(
        self, post_service: PostService, user_service: UserService
    ) -> DeleteAnswerUseCase:
        """Provide delete answer use case."""
        return DeleteAnswerUseCase(post_service=post_service, user_service=user_service)

    @provide
    def get_accept_answer_use_case(self, vote_ledger: VoteLedger) -> AcceptAnswerUseCase:
        """Provide accept answer use case."""
        return AcceptAnswerUseCase(vote_ledger=vote_ledger)

    # Comment use cases
    @provide
    def get_add_comment_use_case(
        self, comment_service: CommentService, user_service: UserService
    ) -> AddCommentUseCase:
        """Provide add comment use case."""
        return AddCommentUseCase(
            comment_service=comment_service, user_service=user_service
        )

    @provide
    def get_delete_comment_use_case(
        self, comment_service: CommentService, user_service: UserService
    ) -> DeleteCommentUseCase:
        """Provide delete comment use case."""
        return DeleteCommentUseCase(
            comment_service=comment_service, user_service=user_service
        )

    # Vote use cases
    @provide
    def get_cast_vote_use_case(self, vote_ledger: VoteLedger) -> CastVoteUseCase:
        """Provide cast vote use case."""
        return CastVoteUseCase(vote_ledger=vote_ledger)

    # Tag use cases
    @provide
    def get_list_tags_use_case(self, tag_service: TagService) -> ListTagsUseCase:
        """Provide list tags use case."""
        return ListTagsUseCase(tag_service=tag_service)

    # User use cases
    @provide
    def get_user_profile_use_case(
        self, user_service: UserService, post_service: PostService
    ) -> GetUserProfileUseCase:
        """Provide get user profile use case."""
        return GetUserProfileUseCase(
            user_service=user_service, post_service=post_service
        )

    # Notification use cases
    @provide
    def get_list_notifications_use_case(
        self, notification_service: NotificationService
    ) -> ListNotificationsUseCase:
        """Provide list notifications use case."""
        return ListNotificationsUseCase(notification_service=notification_service)

    @provide
    def get_mark_read_use_case(
        self, notification_service: NotificationService
    ) -> MarkReadUseCase:
        """Provide mark read use case."""
        return MarkReadUseCase(notification_service=notification_service)
