"""Bounded retry for optimistic-concurrency conflicts."""

import asyncio
from typing import Any, Awaitable, Callable, TypeVar

import logfire

from stackit.config import ConsistencySettings
from stackit.domain.error import VersionConflictError

T = TypeVar("T")


async def retry_on_conflict(
    operation: Callable[[], Awaitable[T]],
    settings: ConsistencySettings,
    name: str,
    **attributes: Any,
) -> T:
    """Run a read-modify-write operation, re-running it on version conflicts.

    ``operation`` must do its own reads: every attempt starts from fresh
    state. Any error other than VersionConflictError propagates immediately.

    Args:
        operation: Zero-argument coroutine factory performing one attempt
        settings: Attempt limit and backoff
        name: Operation name for logs
        **attributes: Extra structured log attributes

    Returns:
        Result of the first successful attempt

    Raises:
        VersionConflictError: With ``attempts`` set, once all attempts conflicted
    """
    last_conflict: VersionConflictError | None = None

    for attempt in range(1, settings.max_attempts + 1):
        try:
            return await operation()
        except VersionConflictError as e:
            last_conflict = e
            logfire.warn(
                "Version conflict",
                operation=name,
                attempt=attempt,
                max_attempts=settings.max_attempts,
                resource=e.resource,
                resource_id=e.resource_id,
                **attributes,
            )
            if attempt < settings.max_attempts and settings.backoff_seconds > 0:
                await asyncio.sleep(settings.backoff_seconds * attempt)

    assert last_conflict is not None
    logfire.error(
        "Giving up after repeated version conflicts",
        operation=name,
        attempts=settings.max_attempts,
        **attributes,
    )
    raise VersionConflictError(
        last_conflict.resource,
        last_conflict.resource_id,
        expected_version=last_conflict.expected_version,
        attempts=settings.max_attempts,
    ) from last_conflict
