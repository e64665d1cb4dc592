"""User domain service."""

import logfire

from stackit.domain.error import NotFoundError
from stackit.domain.model import User
from stackit.domain.repository import UserRepository
from stackit.domain.value import Handle, UserId


class UserService:
    """Domain service for user lookups."""

    def __init__(self, user_repository: UserRepository) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
        """
        self.user_repository = user_repository

    async def get_by_id(self, user_id: UserId) -> User:
        """Get user by ID.

        Args:
            user_id: User ID

        Returns:
            User entity

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("user_service.get_by_id", user_id=str(user_id)):
            user = await self.user_repository.find_by_id(user_id)
            if not user:
                logfire.warn("User not found", user_id=str(user_id))
                raise NotFoundError("User", str(user_id))
            logfire.info("User found", user_id=str(user_id), handle=user.handle.root)
            return user

    async def get_user_by_handle(self, handle: Handle) -> User | None:
        """Get user by handle.

        Args:
            handle: User handle

        Returns:
            User if found, None otherwise
        """
        with logfire.span("user_service.get_user_by_handle", handle=handle.root):
            user = await self.user_repository.find_by_handle(handle)
            if not user:
                logfire.warn("User not found", handle=handle.root)
            return user

    async def save(self, user: User) -> User:
        """Save user (create or update)."""
        with logfire.span(
            "user_service.save", user_id=str(user.id), handle=user.handle.root
        ):
            saved = await self.user_repository.save(user)
            logfire.info("User saved", user_id=str(saved.id))
            return saved
