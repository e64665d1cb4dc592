"""Domain value objects for StackIt.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

import re
from enum import Enum

from pydantic import field_validator

from stackit.domain.value.common import RootValueObject


class PostKind(str, Enum):
    """Concrete kind of a post."""

    QUESTION = "question"
    ANSWER = "answer"


class VoteDirection(str, Enum):
    """Direction of a vote intent."""

    UP = "up"
    DOWN = "down"


class VoteState(str, Enum):
    """A voter's resulting vote on a post."""

    UP = "up"
    DOWN = "down"
    NONE = "none"


class UserRole(str, Enum):
    """Role resolved by the identity service."""

    USER = "user"
    ADMIN = "admin"


class EventType(str, Enum):
    """Domain event types consumed by the notifier."""

    VOTE_ADDED = "vote_added"
    ANSWER_ACCEPTED = "answer_accepted"
    ANSWER_POSTED = "answer_posted"
    COMMENT_ADDED = "comment_added"


class NotificationType(str, Enum):
    """Type of an in-app notification."""

    ANSWER = "answer"
    VOTE = "vote"
    ACCEPT = "accept"
    COMMENT = "comment"


class TagName(RootValueObject[str]):
    """Tag name for categorizing questions.

    Tags are normalised to lowercase and trimmed before validation.
    Must be 2-20 characters: letters, digits and ``+ # . -``.
    Examples: 'python', 'c++', 'node.js', 'react-hooks'
    """

    @field_validator("root", mode="before")
    @classmethod
    def normalize_tag_name(cls, v: str) -> str:
        """Lowercase and trim raw tag input."""
        if isinstance(v, str):
            return v.strip().lower()
        return v

    @field_validator("root")
    @classmethod
    def validate_tag_name(cls, v: str) -> str:
        """Validate tag name format."""
        if not re.match(r"^[a-z0-9][a-z0-9+#.-]{1,19}$", v):
            raise ValueError(
                "Tag name must be 2-20 characters: lowercase letters, digits, '+', '#', '.', '-'"
            )
        return v


class Handle(RootValueObject[str]):
    """Public username of a user.

    3-30 characters: letters, digits and underscores.
    """

    @field_validator("root")
    @classmethod
    def validate_handle_format(cls, v: str) -> str:
        """Validate handle format."""
        if not re.match(r"^[A-Za-z0-9_]{3,30}$", v):
            raise ValueError(
                "Handle must be 3-30 characters of letters, numbers and underscores"
            )
        return v
