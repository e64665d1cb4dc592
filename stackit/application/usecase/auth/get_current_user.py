"""Get current user use case."""

from datetime import datetime
from uuid import UUID

import logfire
from pydantic import BaseModel

from stackit.domain.error import NotFoundError
from stackit.domain.service import JWTService, UserService
from stackit.domain.value import Handle, UserId, UserRole


class GetCurrentUserRequest(BaseModel):
    """Get current user request."""

    token: str  # JWT token


class GetCurrentUserResponse(BaseModel):
    """Get current user response."""

    user_id: str
    handle: Handle
    email: str | None
    role: UserRole
    created_at: datetime


class GetCurrentUserUseCase:
    """Use case for resolving the authenticated user from a token."""

    def __init__(self, jwt_service: JWTService, user_service: UserService) -> None:
        """Initialize get current user use case.

        Args:
            jwt_service: JWT token domain service
            user_service: User domain service
        """
        self.jwt_service = jwt_service
        self.user_service = user_service

    async def execute(self, request: GetCurrentUserRequest) -> GetCurrentUserResponse:
        """Execute get current user flow.

        Args:
            request: Request with JWT token

        Returns:
            User information if token is valid and the user is active

        Raises:
            JWTError: If token is invalid or expired
            NotFoundError: If the user is unknown or deactivated
        """
        payload = self.jwt_service.verify_token(request.token)

        user = await self.user_service.get_by_id(UserId(UUID(payload.user_id)))
        if not user.is_active:
            logfire.warn("Inactive user presented a token", user_id=payload.user_id)
            raise NotFoundError("User", payload.user_id)

        return GetCurrentUserResponse(
            user_id=str(user.id),
            handle=user.handle,
            email=user.email,
            role=user.role,
            created_at=user.created_at,
        )
