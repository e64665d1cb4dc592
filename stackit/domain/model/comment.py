"""Comment entity.

Comments are short, flat remarks on an answer. They are not versioned and
not voted on: a comment is created once and may be deleted by its author or
an admin.
"""

from datetime import datetime

from pydantic import Field

from stackit.domain.model.common import DomainModel
from stackit.domain.value import CommentId, Handle, PostId, UserId


class Comment(DomainModel):
    """Comment on an answer."""

    id: CommentId
    answer_id: PostId
    question_id: PostId  # Thread the answer belongs to
    author_id: UserId
    author_handle: Handle
    content: str = Field(min_length=1, max_length=500)
    created_at: datetime = Field(default_factory=datetime.now)
