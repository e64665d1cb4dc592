"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from stackit.domain.model.user import User
from stackit.domain.value import Handle, UserId


class UserRepository(ABC):
    """Repository for users mirrored from the identity service."""

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        pass

    @abstractmethod
    async def find_by_handle(self, handle: Handle) -> Optional[User]:
        """Find a user by handle."""
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Save a user (create or update)."""
        pass
