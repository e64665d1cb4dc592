"""In-memory user repository for testing."""

from typing import Optional

from stackit.domain.model import User
from stackit.domain.repository import UserRepository
from stackit.domain.value import Handle, UserId


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self) -> None:
        self._users: dict[UserId, User] = {}

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        return self._users.get(user_id)

    async def find_by_handle(self, handle: Handle) -> Optional[User]:
        """Find a user by handle."""
        for user in self._users.values():
            if user.handle == handle:
                return user
        return None

    async def save(self, user: User) -> User:
        """Save a user."""
        self._users[user.id] = user
        return user
