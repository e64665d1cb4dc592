"""Vote ledger domain service.

Applies vote intents and answer acceptance to posts. Every mutation is a
read-modify-write guarded by the post's version token; a lost race re-runs
the whole operation from a fresh read (see ``retry_on_conflict``).
"""

from typing import Optional

import logfire

from stackit.config import ConsistencySettings
from stackit.domain.error import (
    MismatchError,
    NotAuthorizedError,
    NotFoundError,
    SelfVoteForbiddenError,
)
from stackit.domain.model.common import DomainModel
from stackit.domain.model.event import AnswerAccepted, DomainEvent, VoteAdded
from stackit.domain.model.post import AnyPost, Answer, Question
from stackit.domain.repository import PostRepository
from stackit.domain.value import PostId, PostKind, UserId, VoteDirection, VoteState

from .base import Service
from .concurrency import retry_on_conflict
from .notifier import Notifier


class VoteResult(DomainModel):
    """Outcome of a vote intent."""

    post_id: PostId
    vote_score: int
    user_vote: VoteState


class VoteLedger(Service):
    """Domain service owning vote sets and accepted-answer state.

    Invariants maintained:
    - a voter is in at most one of a post's voter sets
    - at most one answer per question is accepted, and it is the one the
      question points at
    """

    def __init__(
        self,
        post_repository: PostRepository,
        notifier: Notifier,
        consistency_settings: ConsistencySettings,
    ) -> None:
        """Initialize vote ledger.

        Args:
            post_repository: Post repository
            notifier: Receiver of VoteAdded and AnswerAccepted events
            consistency_settings: Retry policy for version conflicts
        """
        self.post_repository = post_repository
        self.notifier = notifier
        self.consistency_settings = consistency_settings

    async def cast_vote(
        self,
        post_id: PostId,
        voter_id: UserId,
        direction: VoteDirection,
        kind: Optional[PostKind] = None,
    ) -> VoteResult:
        """Apply a vote intent with toggle semantics.

        - a vote in the opposite direction is removed
        - a vote in the same direction is retracted
        - otherwise the vote is added

        Args:
            post_id: Question or answer ID
            voter_id: Voting user
            direction: Up or down
            kind: If given, the post must be of this kind

        Returns:
            New score and the voter's resulting vote

        Raises:
            NotFoundError: If the post is missing, inactive or of another kind
            SelfVoteForbiddenError: If the voter authored the post
            VersionConflictError: If concurrent writers kept winning
        """
        with logfire.span(
            "vote_ledger.cast_vote",
            post_id=str(post_id),
            voter_id=str(voter_id),
            direction=direction.value,
        ):
            result, event = await retry_on_conflict(
                lambda: self._apply_vote(post_id, voter_id, direction, kind),
                self.consistency_settings,
                "cast_vote",
                post_id=str(post_id),
            )

            logfire.info(
                "Vote applied",
                post_id=str(post_id),
                voter_id=str(voter_id),
                vote_score=result.vote_score,
                user_vote=result.user_vote.value,
            )

            if event is not None:
                await self.notifier.publish(event)

            return result

    async def accept_answer(
        self, question_id: PostId, answer_id: PostId, actor_id: UserId
    ) -> Answer:
        """Mark an answer as the accepted solution to its question.

        The question is claimed by version first, then the previously
        accepted answer, if any, is unset before the new one is set. All of
        it is one atomic repository step, so no reader or crash ever sees
        two accepted answers.

        Args:
            question_id: Question ID
            answer_id: Answer to accept
            actor_id: Acting user, must be the question author

        Returns:
            The accepted answer

        Raises:
            NotFoundError: If question or answer is missing or inactive
            MismatchError: If the answer belongs to another question
            NotAuthorizedError: If the actor is not the question author
            VersionConflictError: If concurrent writers kept winning
        """
        with logfire.span(
            "vote_ledger.accept_answer",
            question_id=str(question_id),
            answer_id=str(answer_id),
            actor_id=str(actor_id),
        ):
            answer, event = await retry_on_conflict(
                lambda: self._apply_acceptance(question_id, answer_id, actor_id),
                self.consistency_settings,
                "accept_answer",
                question_id=str(question_id),
                answer_id=str(answer_id),
            )

            logfire.info(
                "Answer accepted",
                question_id=str(question_id),
                answer_id=str(answer_id),
            )

            if event is not None:
                await self.notifier.publish(event)

            return answer

    async def _apply_vote(
        self,
        post_id: PostId,
        voter_id: UserId,
        direction: VoteDirection,
        kind: Optional[PostKind],
    ) -> tuple[VoteResult, Optional[DomainEvent]]:
        post = await self._get_active_post(post_id, kind)

        if post.author_id == voter_id:
            logfire.warn("Self-vote attempt", post_id=str(post_id))
            raise SelfVoteForbiddenError(str(post_id))

        upvoters = set(post.upvoters)
        downvoters = set(post.downvoters)
        if direction == VoteDirection.UP:
            target, opposite = upvoters, downvoters
        else:
            target, opposite = downvoters, upvoters

        opposite.discard(voter_id)
        if voter_id in target:
            target.discard(voter_id)
            user_vote = VoteState.NONE
        else:
            target.add(voter_id)
            user_vote = VoteState(direction.value)

        # Votes don't update timestamps
        updated = post.model_copy(
            update={
                "upvoters": frozenset(upvoters),
                "downvoters": frozenset(downvoters),
            }
        )
        saved = await self.post_repository.save(updated, expected_version=post.version)

        event: Optional[DomainEvent] = None
        if user_vote == VoteState.UP:
            event = VoteAdded(
                post_id=post.id,
                actor_id=voter_id,
                recipient_id=post.author_id,
                question_id=_thread_of(post),
            )

        return (
            VoteResult(post_id=saved.id, vote_score=saved.vote_score, user_vote=user_vote),
            event,
        )

    async def _apply_acceptance(
        self, question_id: PostId, answer_id: PostId, actor_id: UserId
    ) -> tuple[Answer, Optional[DomainEvent]]:
        question = await self._get_active_question(question_id)
        answer = await self._get_active_answer(answer_id)

        if answer.question_id != question.id:
            raise MismatchError(str(answer_id), str(question_id))

        if actor_id != question.author_id:
            logfire.warn(
                "Non-owner attempted to accept answer",
                question_id=str(question_id),
                actor_id=str(actor_id),
            )
            raise NotAuthorizedError(
                "accept answers on", "question", str(question_id), str(actor_id)
            )

        if question.accepted_answer_id == answer.id and answer.is_accepted:
            logfire.info("Answer already accepted", answer_id=str(answer_id))
            return answer, None

        # One atomic, question-versioned step: a competing acceptance fails
        # on the question before any answer flag moves
        accepted = await self.post_repository.set_accepted_answer(
            question.id, answer.id, expected_version=question.version
        )
        logfire.info(
            "Acceptance moved",
            question_id=str(question_id),
            previous_answer_id=(
                str(question.accepted_answer_id) if question.accepted_answer_id else None
            ),
            answer_id=str(answer_id),
        )

        event: Optional[DomainEvent] = None
        if actor_id != answer.author_id:
            event = AnswerAccepted(
                post_id=answer.id,
                actor_id=actor_id,
                recipient_id=answer.author_id,
                question_id=question.id,
            )

        return accepted, event

    async def _get_active_post(
        self, post_id: PostId, kind: Optional[PostKind]
    ) -> AnyPost:
        post = await self.post_repository.find_by_id(post_id)
        if post is None or not post.is_active or (kind is not None and post.kind != kind):
            resource = kind.value if kind else "post"
            logfire.warn("Post not found or inactive", post_id=str(post_id), kind=resource)
            raise NotFoundError(resource.capitalize(), str(post_id))
        return post

    async def _get_active_question(self, question_id: PostId) -> Question:
        post = await self.post_repository.find_by_id(question_id)
        if not isinstance(post, Question) or not post.is_active:
            logfire.warn("Question not found or inactive", post_id=str(question_id))
            raise NotFoundError("Question", str(question_id))
        return post

    async def _get_active_answer(self, answer_id: PostId) -> Answer:
        post = await self.post_repository.find_by_id(answer_id)
        if not isinstance(post, Answer) or not post.is_active:
            logfire.warn("Answer not found or inactive", post_id=str(answer_id))
            raise NotFoundError("Answer", str(answer_id))
        return post


def _thread_of(post: AnyPost) -> PostId:
    """Question ID a post belongs to."""
    if isinstance(post, Answer):
        return post.question_id
    return post.id
