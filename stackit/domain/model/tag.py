"""Tag entity for categorizing questions."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from stackit.domain.model.common import DomainModel
from stackit.domain.value import TagId, TagName


class Tag(DomainModel):
    """Tag entity.

    Tags are created on first use by a question. ``questions_count`` is a
    denormalised counter that is always recomputed from the store by
    TagService, never incremented in place.
    """

    id: TagId
    name: TagName
    description: Optional[str] = Field(default=None, max_length=200)
    color: str = Field(default="#3B82F6", pattern=r"^#[0-9A-Fa-f]{6}$")
    questions_count: int = Field(default=0, ge=0)
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
