"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error."""

    pass


class NotFoundError(DomainError):
    """Raised when a requested resource is missing or soft-deleted."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class NotAuthorizedError(DomainError):
    """Raised when an ownership or role check fails."""

    def __init__(self, action: str, resource: str, resource_id: str, user_id: str):
        self.action = action
        self.resource = resource
        self.resource_id = resource_id
        self.user_id = user_id
        super().__init__(
            f"User {user_id} is not authorized to {action} {resource} {resource_id}"
        )


class SelfVoteForbiddenError(DomainError):
    """Raised when an author votes on their own post."""

    def __init__(self, post_id: str):
        self.post_id = post_id
        super().__init__(f"Cannot vote on your own post {post_id}")


class MismatchError(DomainError):
    """Raised when an answer does not belong to the given question."""

    def __init__(self, answer_id: str, question_id: str):
        self.answer_id = answer_id
        self.question_id = question_id
        super().__init__(f"Answer {answer_id} does not belong to question {question_id}")


class VersionConflictError(DomainError):
    """Raised when a version-checked save loses a race with another writer.

    Transient: the caller may retry the whole operation. ``attempts`` is set
    when a bounded retry loop gave up.
    """

    transient = True

    def __init__(
        self,
        resource: str,
        resource_id: str,
        expected_version: int | None = None,
        attempts: int | None = None,
    ):
        self.resource = resource
        self.resource_id = resource_id
        self.expected_version = expected_version
        self.attempts = attempts

        if attempts is not None:
            message = (
                f"Concurrent modification of {resource} {resource_id}; "
                f"gave up after {attempts} attempts"
            )
        else:
            message = (
                f"Version conflict on {resource} {resource_id} "
                f"(expected version {expected_version})"
            )
        super().__init__(message)
