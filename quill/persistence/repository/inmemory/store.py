"""Shared state behind the in-memory repositories.

One store stands in for one database: repositories created per request all
read and write the same store, so state survives across requests.
"""

from dataclasses import dataclass, field

from quill.domain.model import Comment, Post, Relation, User
from quill.domain.value import CommentId, PostId, UserId


@dataclass
class InMemoryStore:
    """Tables of the in-memory database."""

    users: dict[UserId, User] = field(default_factory=dict)
    posts: dict[PostId, Post] = field(default_factory=dict)
    comments: dict[CommentId, Comment] = field(default_factory=dict)
    relations: list[Relation] = field(default_factory=list)
