"""Post domain service."""

from datetime import datetime
from typing import Optional
from uuid import uuid4

import logfire

from stackit.config import ConsistencySettings
from stackit.domain.error import NotAuthorizedError, NotFoundError
from stackit.domain.model import Answer, AnswerPosted, AnyPost, Question, User
from stackit.domain.model.common import DomainModel
from stackit.domain.repository import PostRepository, QuestionSortOrder
from stackit.domain.value import PostId, PostKind, TagName, UserId

from .base import Service
from .concurrency import retry_on_conflict
from .notifier import Notifier


class AuthorStats(DomainModel):
    """Counts shown on a user's profile."""

    questions_count: int
    answers_count: int
    accepted_answers_count: int


class PostService(Service):
    """Domain service for the question and answer lifecycle.

    Votes and acceptance are owned by VoteLedger; this service covers
    creation, reads, edits, soft-deletes and view counting.
    """

    def __init__(
        self,
        post_repository: PostRepository,
        notifier: Notifier,
        consistency_settings: ConsistencySettings,
    ) -> None:
        """Initialize post service.

        Args:
            post_repository: Post repository
            notifier: Receiver of AnswerPosted events
            consistency_settings: Retry policy for version conflicts
        """
        self.post_repository = post_repository
        self.notifier = notifier
        self.consistency_settings = consistency_settings

    async def create_question(
        self, author: User, title: str, body: str, tags: list[TagName]
    ) -> Question:
        """Create a new question.

        Args:
            author: Asking user
            title: Question title
            body: Question body
            tags: 1-5 tag names, duplicates are dropped

        Returns:
            Saved question
        """
        with logfire.span(
            "post_service.create_question",
            author_id=str(author.id),
            title=title,
            tags=[t.root for t in tags],
        ):
            question = Question(
                id=PostId(uuid4()),
                author_id=author.id,
                author_handle=author.handle,
                title=title,
                body=body,
                tags=list(dict.fromkeys(tags)),
            )
            saved = await self.post_repository.save(question, expected_version=None)
            logfire.info("Question created", question_id=str(saved.id))
            return saved

    async def create_answer(
        self, question_id: PostId, author: User, body: str
    ) -> Answer:
        """Post an answer to an active question.

        The question author is notified unless they answered themselves.

        Args:
            question_id: Question being answered
            author: Answering user
            body: Answer body

        Returns:
            Saved answer

        Raises:
            NotFoundError: If the question is missing or inactive
        """
        with logfire.span(
            "post_service.create_answer",
            question_id=str(question_id),
            author_id=str(author.id),
        ):
            question = await self.get_active_question(question_id)

            answer = Answer(
                id=PostId(uuid4()),
                author_id=author.id,
                author_handle=author.handle,
                body=body,
                question_id=question.id,
            )
            saved = await self.post_repository.save(answer, expected_version=None)
            logfire.info(
                "Answer created", answer_id=str(saved.id), question_id=str(question_id)
            )

            if question.author_id != author.id:
                await self.notifier.publish(
                    AnswerPosted(
                        post_id=saved.id,
                        actor_id=author.id,
                        recipient_id=question.author_id,
                        question_id=question.id,
                    )
                )

            return saved

    async def get_active_question(self, question_id: PostId) -> Question:
        """Get a visible question.

        Raises:
            NotFoundError: If the question is missing or inactive
        """
        with logfire.span(
            "post_service.get_active_question", question_id=str(question_id)
        ):
            post = await self.post_repository.find_by_id(question_id)
            if not isinstance(post, Question) or not post.is_active:
                logfire.warn(
                    "Question not found or inactive", post_id=str(question_id)
                )
                raise NotFoundError("Question", str(question_id))
            return post

    async def get_active_answer(self, answer_id: PostId) -> Answer:
        """Get a visible answer.

        Raises:
            NotFoundError: If the answer is missing or inactive
        """
        with logfire.span("post_service.get_active_answer", answer_id=str(answer_id)):
            post = await self.post_repository.find_by_id(answer_id)
            if not isinstance(post, Answer) or not post.is_active:
                logfire.warn("Answer not found or inactive", post_id=str(answer_id))
                raise NotFoundError("Answer", str(answer_id))
            return post

    async def list_questions(
        self,
        sort: QuestionSortOrder = QuestionSortOrder.RECENT,
        tag: Optional[TagName] = None,
        search: Optional[str] = None,
        limit: int = 20,
        offset: int = 0,
    ) -> tuple[list[Question], int]:
        """List active questions.

        Returns:
            Page of questions and the total number of matches
        """
        with logfire.span(
            "post_service.list_questions",
            sort=sort.value,
            tag=tag.root if tag else None,
            search=search,
            limit=limit,
            offset=offset,
        ):
            questions = await self.post_repository.find_questions(
                sort=sort, tag=tag, search=search, limit=limit, offset=offset
            )
            total = await self.post_repository.count_questions(tag=tag, search=search)
            logfire.info("Questions listed", count=len(questions), total=total)
            return questions, total

    async def list_answers(self, question_id: PostId) -> list[Answer]:
        """List active answers to a question, best first."""
        with logfire.span("post_service.list_answers", question_id=str(question_id)):
            answers = await self.post_repository.find_answers(question_id)
            logfire.info(
                "Answers listed", question_id=str(question_id), count=len(answers)
            )
            return answers

    async def count_answers(self, question_id: PostId) -> int:
        """Count active answers to a question."""
        return await self.post_repository.count_answers(question_id)

    async def list_by_author(
        self, author_id: UserId, limit: int = 10
    ) -> tuple[list[Question], list[Answer]]:
        """A user's most recent active questions and answers."""
        with logfire.span(
            "post_service.list_by_author", author_id=str(author_id), limit=limit
        ):
            questions = await self.post_repository.find_by_author(
                author_id, PostKind.QUESTION, limit=limit
            )
            answers = await self.post_repository.find_by_author(
                author_id, PostKind.ANSWER, limit=limit
            )
            return (
                [q for q in questions if isinstance(q, Question)],
                [a for a in answers if isinstance(a, Answer)],
            )

    async def author_stats(self, author_id: UserId) -> AuthorStats:
        """Count a user's active questions, answers and accepted answers."""
        return AuthorStats(
            questions_count=await self.post_repository.count_by_author(
                author_id, PostKind.QUESTION
            ),
            answers_count=await self.post_repository.count_by_author(
                author_id, PostKind.ANSWER
            ),
            accepted_answers_count=await self.post_repository.count_by_author(
                author_id, PostKind.ANSWER, accepted_only=True
            ),
        )

    async def question_titles(
        self, question_ids: list[PostId]
    ) -> dict[PostId, str]:
        """Titles of the given questions, skipping unknown IDs."""
        titles: dict[PostId, str] = {}
        for question_id in dict.fromkeys(question_ids):
            post = await self.post_repository.find_by_id(question_id)
            if isinstance(post, Question):
                titles[question_id] = post.title
        return titles

    async def record_view(self, question: Question, viewer_id: UserId | None) -> bool:
        """Count a view of a question unless the viewer is its author.

        Returns:
            Whether the view was counted
        """
        if viewer_id == question.author_id:
            return False

        with logfire.span("post_service.record_view", question_id=str(question.id)):
            await self.post_repository.increment_views(question.id)
            return True

    async def update_question(
        self,
        question_id: PostId,
        actor: User,
        title: Optional[str] = None,
        body: Optional[str] = None,
        tags: Optional[list[TagName]] = None,
    ) -> tuple[Question, list[TagName]]:
        """Edit a question's title, body or tags.

        Args:
            question_id: Question to edit
            actor: Editing user, must be the author or an admin
            title: New title, None to keep
            body: New body, None to keep
            tags: New tags, None to keep

        Returns:
            The updated question and the tags it carried before the edit

        Raises:
            NotFoundError: If the question is missing or inactive
            NotAuthorizedError: If the actor may not edit the question
            VersionConflictError: If concurrent writers kept winning
        """

        async def attempt() -> tuple[Question, list[TagName]]:
            question = await self.get_active_question(question_id)
            self._ensure_can_modify(question, actor, "edit")

            update: dict = {"updated_at": datetime.now()}
            if title is not None:
                update["title"] = title
            if body is not None:
                update["body"] = body
            if tags is not None:
                update["tags"] = list(dict.fromkeys(tags))

            # model_copy skips validation
            updated = Question.model_validate(
                {**question.model_dump(exclude={"vote_score"}), **update}
            )
            saved = await self.post_repository.save(
                updated, expected_version=question.version
            )
            return saved, question.tags

        with logfire.span(
            "post_service.update_question",
            question_id=str(question_id),
            actor_id=str(actor.id),
        ):
            result = await retry_on_conflict(
                attempt,
                self.consistency_settings,
                "update_question",
                question_id=str(question_id),
            )
            logfire.info("Question updated", question_id=str(question_id))
            return result

    async def delete_question(self, question_id: PostId, actor: User) -> Question:
        """Soft-delete a question.

        Returns:
            The deactivated question

        Raises:
            NotFoundError: If the question is missing or inactive
            NotAuthorizedError: If the actor may not delete the question
            VersionConflictError: If concurrent writers kept winning
        """

        async def attempt() -> Question:
            question = await self.get_active_question(question_id)
            self._ensure_can_modify(question, actor, "delete")
            saved = await self.post_repository.save(
                question.model_copy(update={"is_active": False}),
                expected_version=question.version,
            )
            return saved

        with logfire.span(
            "post_service.delete_question",
            question_id=str(question_id),
            actor_id=str(actor.id),
        ):
            deleted = await retry_on_conflict(
                attempt,
                self.consistency_settings,
                "delete_question",
                question_id=str(question_id),
            )
            logfire.info("Question deleted", question_id=str(question_id))
            return deleted

    async def update_answer(self, answer_id: PostId, actor: User, body: str) -> Answer:
        """Edit an answer's body.

        Raises:
            NotFoundError: If the answer is missing or inactive
            NotAuthorizedError: If the actor may not edit the answer
            VersionConflictError: If concurrent writers kept winning
        """

        async def attempt() -> Answer:
            answer = await self.get_active_answer(answer_id)
            self._ensure_can_modify(answer, actor, "edit")
            updated = Answer.model_validate(
                {
                    **answer.model_dump(exclude={"vote_score"}),
                    "body": body,
                    "updated_at": datetime.now(),
                }
            )
            saved = await self.post_repository.save(
                updated, expected_version=answer.version
            )
            return saved

        with logfire.span(
            "post_service.update_answer",
            answer_id=str(answer_id),
            actor_id=str(actor.id),
        ):
            result = await retry_on_conflict(
                attempt,
                self.consistency_settings,
                "update_answer",
                answer_id=str(answer_id),
            )
            logfire.info("Answer updated", answer_id=str(answer_id))
            return result

    async def delete_answer(self, answer_id: PostId, actor: User) -> Answer:
        """Soft-delete an answer.

        If it is the question's accepted answer, the acceptance is cleared
        first so the question never points at an invisible answer.

        Raises:
            NotFoundError: If the answer is missing or inactive
            NotAuthorizedError: If the actor may not delete the answer
            VersionConflictError: If concurrent writers kept winning
        """

        async def attempt() -> Answer:
            answer = await self.get_active_answer(answer_id)
            self._ensure_can_modify(answer, actor, "delete")

            question = await self.post_repository.find_by_id(answer.question_id)
            if isinstance(question, Question) and question.accepted_answer_id == answer.id:
                await self.post_repository.clear_accepted_answer(
                    question.id, expected_version=question.version
                )
                logfire.info(
                    "Accepted answer cleared",
                    question_id=str(question.id),
                    answer_id=str(answer_id),
                )
                # The flag change bumped the answer's version
                answer = await self.get_active_answer(answer_id)

            return await self.post_repository.save(
                answer.model_copy(update={"is_active": False}),
                expected_version=answer.version,
            )

        with logfire.span(
            "post_service.delete_answer",
            answer_id=str(answer_id),
            actor_id=str(actor.id),
        ):
            deleted = await retry_on_conflict(
                attempt,
                self.consistency_settings,
                "delete_answer",
                answer_id=str(answer_id),
            )
            logfire.info("Answer deleted", answer_id=str(answer_id))
            return deleted

    @staticmethod
    def _ensure_can_modify(post: AnyPost, actor: User, action: str) -> None:
        """Allow the post's author or an admin."""
        if post.author_id == actor.id or actor.is_admin:
            return
        logfire.warn(
            "Modification denied",
            post_id=str(post.id),
            actor_id=str(actor.id),
            action=action,
        )
        raise NotAuthorizedError(action, post.kind.value, str(post.id), str(actor.id))
