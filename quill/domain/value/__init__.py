"""Domain value objects for Quill."""

from quill.domain.value.identifiers import (
    CommentId,
    PostId,
    RelationId,
    UserId,
)
from quill.domain.value.types import (
    Handle,
    RelationKind,
    Slug,
    TargetType,
)

__all__ = [
    # Identifiers
    "UserId",
    "PostId",
    "CommentId",
    "RelationId",
    # Types
    "Handle",
    "RelationKind",
    "Slug",
    "TargetType",
]
