"""Answer comment use cases."""

from .add_comment import AddCommentRequest, AddCommentResponse, AddCommentUseCase
from .delete_comment import DeleteCommentRequest, DeleteCommentUseCase

__all__ = [
    "AddCommentRequest",
    "AddCommentResponse",
    "AddCommentUseCase",
    "DeleteCommentRequest",
    "DeleteCommentUseCase",
]
