"""Domain model entities for StackIt."""

from stackit.domain.model.comment import Comment
from stackit.domain.model.event import (
    AnswerAccepted,
    AnswerPosted,
    CommentAdded,
    DomainEvent,
    VoteAdded,
)
from stackit.domain.model.notification import Notification
from stackit.domain.model.post import AnyPost, Answer, Post, Question
from stackit.domain.model.tag import Tag
from stackit.domain.model.user import User

__all__ = [
    "User",
    "Post",
    "Question",
    "Answer",
    "AnyPost",
    "Tag",
    "Notification",
    "Comment",
    "DomainEvent",
    "VoteAdded",
    "AnswerAccepted",
    "AnswerPosted",
    "CommentAdded",
]
