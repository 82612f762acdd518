"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict
from uuid import UUID

from quill.domain.model import AuthorSummary, Comment, Post, Relation, User
from quill.domain.value import (
    CommentId,
    PostId,
    RelationId,
    RelationKind,
    UserId,
)
from quill.domain.value.types import Handle, Slug


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model."""
    return User(
        id=UserId(_uuid(row["id"])),
        handle=Handle(row["handle"]),
        display_name=row.get("display_name"),
        avatar_url=row.get("avatar_url"),
        created_at=row["created_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict."""
    return {
        "id": user.id,
        "handle": user.handle.root,
        "display_name": user.display_name,
        "avatar_url": user.avatar_url,
        "created_at": user.created_at,
    }


def row_to_post(row: Dict[str, Any]) -> Post:
    """Convert database row to Post domain model."""
    return Post(
        id=PostId(_uuid(row["id"])),
        slug=Slug(row["slug"]),
        title=row["title"],
        author_id=UserId(_uuid(row["author_id"])),
        created_at=row["created_at"],
    )


def post_to_dict(post: Post) -> Dict[str, Any]:
    """Convert Post domain model to database dict."""
    return {
        "id": post.id,
        "slug": post.slug.root,
        "title": post.title,
        "author_id": post.author_id,
        "created_at": post.created_at,
    }


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert a comment row joined with its author to a Comment.

    The row must carry the author columns labelled ``author_handle``,
    ``author_display_name`` and ``author_avatar_url``.
    """
    author_id = UserId(_uuid(row["author_id"]))
    return Comment(
        id=CommentId(_uuid(row["id"])),
        post_id=PostId(_uuid(row["post_id"])),
        author_id=author_id,
        author=AuthorSummary(
            id=author_id,
            handle=Handle(row["author_handle"]),
            display_name=row.get("author_display_name"),
            avatar_url=row.get("author_avatar_url"),
        ),
        content=row["content"],
        parent_id=CommentId(_uuid(row["parent_id"])) if row.get("parent_id") else None,
        created_at=row["created_at"],
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert Comment domain model to database dict (author excluded)."""
    return {
        "id": comment.id,
        "post_id": comment.post_id,
        "author_id": comment.author_id,
        "parent_id": comment.parent_id,
        "content": comment.content,
        "created_at": comment.created_at,
    }


def row_to_relation(row: Dict[str, Any]) -> Relation:
    """Convert database row to Relation domain model."""
    return Relation(
        id=RelationId(_uuid(row["id"])),
        source_id=UserId(_uuid(row["source_id"])),
        target_id=_uuid(row["target_id"]),
        kind=RelationKind(row["kind"]),
        created_at=row["created_at"],
    )


def relation_to_dict(relation: Relation) -> Dict[str, Any]:
    """Convert Relation domain model to database dict."""
    return {
        "id": relation.id,
        "source_id": relation.source_id,
        "target_id": relation.target_id,
        "kind": relation.kind.value,
        "created_at": relation.created_at,
    }
