"""Comment use cases."""

from .common import CommentItem, CommentResponse, CommentUser
from .create_comment import (
    CreateCommentRequest,
    CreateCommentResponse,
    CreateCommentUseCase,
)
from .like_comment import LikeCommentRequest, LikeCommentUseCase, UnlikeCommentUseCase
from .list_comments import ListCommentsRequest, ListCommentsResponse, ListCommentsUseCase

__all__ = [
    "CommentItem",
    "CommentResponse",
    "CommentUser",
    "CreateCommentRequest",
    "CreateCommentResponse",
    "CreateCommentUseCase",
    "LikeCommentRequest",
    "LikeCommentUseCase",
    "ListCommentsRequest",
    "ListCommentsResponse",
    "ListCommentsUseCase",
    "UnlikeCommentUseCase",
]
