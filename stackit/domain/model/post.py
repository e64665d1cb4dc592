"""Post aggregates: questions and answers.

Both kinds carry authorship, a pair of disjoint voter sets and a version
token. The vote score is derived from the voter sets and cannot be set.
"""

from datetime import datetime
from typing import Literal, Optional, Union

from pydantic import Field, computed_field, model_validator

from stackit.domain.model.common import DomainModel
from stackit.domain.value import Handle, PostId, PostKind, TagName, UserId, VoteState


class Post(DomainModel):
    """Base aggregate for questions and answers.

    Invariants:
    - ``upvoters`` and ``downvoters`` are disjoint
    - ``vote_score`` is always ``len(upvoters) - len(downvoters)``
    - ``version`` is 0 until first saved and is bumped by the repository on
      every successful save
    """

    id: PostId
    kind: PostKind
    author_id: UserId
    author_handle: Handle
    body: str = Field(min_length=1, max_length=30000)
    upvoters: frozenset[UserId] = frozenset()
    downvoters: frozenset[UserId] = frozenset()
    is_active: bool = True
    version: int = Field(default=0, ge=0)
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def vote_score(self) -> int:
        """Net score derived from the voter sets."""
        return len(self.upvoters) - len(self.downvoters)

    @model_validator(mode="after")
    def validate_vote_sets_disjoint(self) -> "Post":
        """Reject posts where a voter appears in both sets."""
        overlap = self.upvoters & self.downvoters
        if overlap:
            raise ValueError(
                f"Voters cannot be in both upvoters and downvoters: {sorted(map(str, overlap))}"
            )
        return self

    def vote_state_of(self, user_id: UserId | None) -> VoteState:
        """Return the given user's current vote on this post."""
        if user_id is None:
            return VoteState.NONE
        if user_id in self.upvoters:
            return VoteState.UP
        if user_id in self.downvoters:
            return VoteState.DOWN
        return VoteState.NONE


class Question(Post):
    """Question aggregate.

    ``accepted_answer_id`` points at the single answer whose
    ``is_accepted`` flag is set, if any.
    """

    kind: Literal[PostKind.QUESTION] = PostKind.QUESTION
    title: str = Field(min_length=1, max_length=200)
    tags: list[TagName] = Field(min_length=1, max_length=5)
    views: int = Field(default=0, ge=0)
    accepted_answer_id: Optional[PostId] = None


class Answer(Post):
    """Answer aggregate, owned by exactly one question."""

    kind: Literal[PostKind.ANSWER] = PostKind.ANSWER
    question_id: PostId
    is_accepted: bool = False


AnyPost = Union[Question, Answer]
