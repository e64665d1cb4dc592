"""Comment domain service."""

from collections import defaultdict
from uuid import uuid4

import logfire

from stackit.domain.error import NotAuthorizedError, NotFoundError
from stackit.domain.model import Answer, Comment, CommentAdded, User
from stackit.domain.repository import CommentRepository, PostRepository
from stackit.domain.value import CommentId, PostId

from .base import Service
from .notifier import Notifier


class CommentService(Service):
    """Domain service for comments on answers."""

    def __init__(
        self,
        comment_repository: CommentRepository,
        post_repository: PostRepository,
        notifier: Notifier,
    ) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
            post_repository: Post repository, to check the answer is visible
            notifier: Receiver of CommentAdded events
        """
        self.comment_repository = comment_repository
        self.post_repository = post_repository
        self.notifier = notifier

    async def add_comment(
        self, answer_id: PostId, author: User, content: str
    ) -> Comment:
        """Comment on an active answer.

        The answer author is notified unless they commented themselves.

        Args:
            answer_id: Answer being commented on
            author: Commenting user
            content: Comment text, 1-500 characters

        Returns:
            Saved comment

        Raises:
            NotFoundError: If the answer is missing or inactive
        """
        with logfire.span(
            "comment_service.add_comment",
            answer_id=str(answer_id),
            author_id=str(author.id),
        ):
            answer = await self._get_active_answer(answer_id)

            comment = Comment(
                id=CommentId(uuid4()),
                answer_id=answer.id,
                question_id=answer.question_id,
                author_id=author.id,
                author_handle=author.handle,
                content=content,
            )
            saved = await self.comment_repository.save(comment)
            logfire.info(
                "Comment added", comment_id=str(saved.id), answer_id=str(answer_id)
            )

            await self.notifier.publish(
                CommentAdded(
                    post_id=answer.id,
                    actor_id=author.id,
                    recipient_id=answer.author_id,
                    question_id=answer.question_id,
                )
            )
            return saved

    async def delete_comment(
        self, answer_id: PostId, comment_id: CommentId, actor: User
    ) -> None:
        """Delete a comment. Only its author or an admin may.

        Raises:
            NotFoundError: If the answer or the comment is missing
            NotAuthorizedError: If the actor may not delete the comment
        """
        with logfire.span(
            "comment_service.delete_comment",
            answer_id=str(answer_id),
            comment_id=str(comment_id),
            actor_id=str(actor.id),
        ):
            await self._get_active_answer(answer_id)

            comment = await self.comment_repository.find_by_id(comment_id)
            if comment is None or comment.answer_id != answer_id:
                logfire.warn("Comment not found", comment_id=str(comment_id))
                raise NotFoundError("Comment", str(comment_id))

            if comment.author_id != actor.id and not actor.is_admin:
                logfire.warn(
                    "Comment deletion denied",
                    comment_id=str(comment_id),
                    actor_id=str(actor.id),
                )
                raise NotAuthorizedError(
                    "delete", "comment", str(comment_id), str(actor.id)
                )

            await self.comment_repository.delete(comment_id)
            logfire.info("Comment deleted", comment_id=str(comment_id))

    async def comments_by_answer(
        self, answer_ids: list[PostId]
    ) -> dict[PostId, list[Comment]]:
        """Group the comments on the given answers by answer, oldest first."""
        if not answer_ids:
            return {}

        comments = await self.comment_repository.find_by_answers(answer_ids)
        grouped: dict[PostId, list[Comment]] = defaultdict(list)
        for comment in comments:
            grouped[comment.answer_id].append(comment)
        return grouped

    async def _get_active_answer(self, answer_id: PostId) -> Answer:
        post = await self.post_repository.find_by_id(answer_id)
        if not isinstance(post, Answer) or not post.is_active:
            logfire.warn("Answer not found or inactive", post_id=str(answer_id))
            raise NotFoundError("Answer", str(answer_id))
        return post
