"""Domain model entities for Quill."""

from quill.domain.model.comment import Comment
from quill.domain.model.post import Post
from quill.domain.model.relation import Relation, RelationStatus
from quill.domain.model.user import AuthorSummary, User

__all__ = [
    "AuthorSummary",
    "Comment",
    "Post",
    "Relation",
    "RelationStatus",
    "User",
]
