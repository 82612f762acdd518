"""Comment use cases."""

from .common import AuthorItem, CommentItem, CommentNodeItem
from .create_comment import CreateCommentRequest, CreateCommentUseCase
from .get_comments import GetCommentsRequest, GetCommentsResponse, GetCommentsUseCase

__all__ = [
    "AuthorItem",
    "CommentItem",
    "CommentNodeItem",
    "CreateCommentRequest",
    "CreateCommentUseCase",
    "GetCommentsRequest",
    "GetCommentsResponse",
    "GetCommentsUseCase",
]
