"""Domain events emitted for the notifier.

Events are facts about committed state changes. Delivery, ordering and
retries are the notifier's concern.
"""

from datetime import datetime
from typing import Literal

from pydantic import Field

from stackit.domain.model.common import DomainModel
from stackit.domain.value import EventType, PostId, UserId


class DomainEvent(DomainModel):
    """Base domain event.

    ``post_id`` is the post the event is about; ``question_id`` is the
    question thread it belongs to (equal to ``post_id`` for questions).
    """

    type: EventType
    post_id: PostId
    actor_id: UserId
    recipient_id: UserId
    question_id: PostId
    occurred_at: datetime = Field(default_factory=datetime.now)

    @property
    def is_about_question(self) -> bool:
        """Whether the event concerns the question itself rather than an answer."""
        return self.post_id == self.question_id


class VoteAdded(DomainEvent):
    """A voter was newly added to a post's upvoters."""

    type: Literal[EventType.VOTE_ADDED] = EventType.VOTE_ADDED


class AnswerAccepted(DomainEvent):
    """The question author accepted an answer."""

    type: Literal[EventType.ANSWER_ACCEPTED] = EventType.ANSWER_ACCEPTED


class AnswerPosted(DomainEvent):
    """A new answer was posted on a question."""

    type: Literal[EventType.ANSWER_POSTED] = EventType.ANSWER_POSTED


class CommentAdded(DomainEvent):
    """Someone commented on an answer."""

    type: Literal[EventType.COMMENT_ADDED] = EventType.COMMENT_ADDED
