"""Domain services."""

from .base import Service
from .comment_service import CommentNode, CommentService, build_thread
from .jwt_service import JWTService
from .post_service import PostService
from .relation_service import RelationService, RelationToggle
from .user_service import UserService

__all__ = [
    "CommentNode",
    "CommentService",
    "JWTService",
    "PostService",
    "RelationService",
    "RelationToggle",
    "Service",
    "UserService",
    "build_thread",
]
