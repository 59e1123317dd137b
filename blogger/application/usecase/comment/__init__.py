"""Comment use cases."""

from .create_comment import CommentInput, CreateCommentRequest, CreateCommentUseCase
from .delete_comment import DeleteCommentRequest, DeleteCommentUseCase
from .get_comment import GetCommentRequest, GetCommentUseCase
from .list_comments import ListCommentsRequest, ListCommentsUseCase
from .update_comment import UpdateCommentRequest, UpdateCommentUseCase

__all__ = [
    "CommentInput",
    "CreateCommentRequest",
    "CreateCommentUseCase",
    "DeleteCommentRequest",
    "DeleteCommentUseCase",
    "GetCommentRequest",
    "GetCommentUseCase",
    "ListCommentsRequest",
    "ListCommentsUseCase",
    "UpdateCommentRequest",
    "UpdateCommentUseCase",
]
