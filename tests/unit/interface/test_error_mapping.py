"""Unit tests for mapping domain errors to HTTP responses."""

import pytest
from fastapi import HTTPException

from stackit.domain.error import (
    MismatchError,
    NotAuthorizedError,
    NotFoundError,
    SelfVoteForbiddenError,
    ValidationError,
    VersionConflictError,
)
from stackit.interface.error import RETRY_AFTER_SECONDS, to_http_exception


@pytest.mark.parametrize(
    ("error", "status_code"),
    [
        (NotFoundError("Question", "q1"), 404),
        (NotAuthorizedError("edit", "question", "q1", "u1"), 403),
        (SelfVoteForbiddenError("q1"), 400),
        (MismatchError("a1", "q1"), 400),
        (ValidationError("bad input"), 400),
        (ValueError("badly formed hexadecimal UUID string"), 400),
        (RuntimeError("database exploded"), 500),
    ],
)
def test_status_codes(error, status_code):
    exc = to_http_exception(error, "do something")

    assert exc.status_code == status_code


def test_version_conflict_is_retryable():
    """Conflicts map to 409 with a Retry-After hint."""
    exc = to_http_exception(
        VersionConflictError("post", "p1", attempts=3), "vote on question"
    )

    assert exc.status_code == 409
    assert exc.headers == {"Retry-After": str(RETRY_AFTER_SECONDS)}
    assert "3 attempts" in exc.detail


def test_unexpected_errors_hide_details():
    exc = to_http_exception(RuntimeError("secret"), "vote on question")

    assert exc.detail == "Failed to vote on question"


def test_http_exceptions_pass_through():
    original = HTTPException(status_code=401, detail="Authentication required")

    assert to_http_exception(original, "anything") is original
