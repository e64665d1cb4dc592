"""Cookie authentication helpers for routes."""

from fastapi import HTTPException, status

from stackit.application.usecase.auth import (
    GetCurrentUserRequest,
    GetCurrentUserResponse,
    GetCurrentUserUseCase,
)
from stackit.domain.error import NotFoundError
from stackit.util.jwt import JWTError


async def require_user(
    get_current_user_use_case: GetCurrentUserUseCase, auth_token: str | None
) -> GetCurrentUserResponse:
    """Resolve the authenticated user or fail with 401.

    Args:
        get_current_user_use_case: Get current user use case
        auth_token: JWT token from the ``auth_token`` cookie

    Returns:
        The authenticated user

    Raises:
        HTTPException: 401 if the token is missing, invalid or expired, or
            the user is unknown or inactive
    """
    if not auth_token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required",
        )

    try:
        return await get_current_user_use_case.execute(
            GetCurrentUserRequest(token=auth_token)
        )
    except (JWTError, NotFoundError) as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(e),
        )


async def optional_user_id(
    get_current_user_use_case: GetCurrentUserUseCase, auth_token: str | None
) -> str | None:
    """Resolve the authenticated user's ID, or None for anonymous readers.

    An invalid token is treated as unauthenticated.
    """
    if not auth_token:
        return None

    try:
        user = await get_current_user_use_case.execute(
            GetCurrentUserRequest(token=auth_token)
        )
        return user.user_id
    except (JWTError, NotFoundError):
        return None
