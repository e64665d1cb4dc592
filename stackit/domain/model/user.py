"""User entity.

Users are owned by the upstream identity service; StackIt keeps the subset
needed for ownership checks and display.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from stackit.domain.model.common import DomainModel
from stackit.domain.value import Handle, UserId, UserRole


class User(DomainModel):
    """User known to the Q&A platform."""

    id: UserId
    handle: Handle
    email: Optional[str] = None
    role: UserRole = UserRole.USER
    is_active: bool = True
    created_at: datetime = Field(default_factory=datetime.now)

    @property
    def is_admin(self) -> bool:
        """Whether the user holds the elevated admin role."""
        return self.role == UserRole.ADMIN
