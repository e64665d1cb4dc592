"""Test configuration and fixtures."""

from datetime import datetime
from uuid import uuid4

import logfire

from stackit.domain.model import Answer, DomainEvent, Question, User
from stackit.domain.service import Notifier
from stackit.domain.value import Handle, PostId, TagName, UserId, UserRole

# Keep telemetry local: no cloud export, no console noise
logfire.configure(send_to_logfire=False, console=False)


def make_user(handle: str = "alice", role: UserRole = UserRole.USER) -> User:
    """Build a user with a fresh ID."""
    return User(
        id=UserId(uuid4()),
        handle=Handle(handle),
        email=f"{handle}@example.com",
        role=role,
    )


def make_question(
    author: User,
    title: str = "How do I reverse a list in Python?",
    body: str = "I have a list and want it in reverse order without copying it.",
    tags: list[str] | None = None,
    created_at: datetime | None = None,
) -> Question:
    """Build an unsaved question by ``author``."""
    return Question(
        id=PostId(uuid4()),
        author_id=author.id,
        author_handle=author.handle,
        title=title,
        body=body,
        tags=[TagName(t) for t in (tags if tags is not None else ["python"])],
        created_at=created_at or datetime.now(),
    )


def make_answer(
    question: Question,
    author: User,
    body: str = "Use list.reverse() to reverse it in place.",
    created_at: datetime | None = None,
) -> Answer:
    """Build an unsaved answer to ``question`` by ``author``."""
    return Answer(
        id=PostId(uuid4()),
        author_id=author.id,
        author_handle=author.handle,
        body=body,
        question_id=question.id,
        created_at=created_at or datetime.now(),
    )


class RecordingNotifier(Notifier):
    """Notifier that keeps published events in memory."""

    def __init__(self) -> None:
        self.events: list[DomainEvent] = []

    async def publish(self, event: DomainEvent) -> None:
        self.events.append(event)
