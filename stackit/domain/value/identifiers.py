"""Strongly typed identifiers for StackIt domain entities.

Questions and answers share one identifier space (``PostId``) because they
live in the same store and the vote ledger addresses either by id.
"""

from typing import NewType
from uuid import UUID

UserId = NewType("UserId", UUID)
PostId = NewType("PostId", UUID)
TagId = NewType("TagId", UUID)
NotificationId = NewType("NotificationId", UUID)
CommentId = NewType("CommentId", UUID)
