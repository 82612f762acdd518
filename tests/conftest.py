"""Test configuration and fixtures."""

import re
from datetime import datetime, timezone
from uuid import UUID, uuid4

import logfire

from quill.config import AuthSettings
from quill.domain.model import Comment, Post, User
from quill.domain.value import CommentId, PostId, UserId
from quill.domain.value.types import Handle, Slug
from quill.domain.service import JWTService

# Keep spans and logs local during tests
logfire.configure(send_to_logfire=False, console=False)


def make_slug(title: str, post_id: UUID | str | None = None) -> Slug:
    """Helper function to generate slugs for test posts.

    Args:
        title: Post title to generate slug from
        post_id: Optional post ID (UUID or str) for fallback slug generation

    Returns:
        Valid Slug value object
    """
    # Convert to lowercase and replace non-alphanumeric with hyphens
    slug_str = re.sub(r"[^a-z0-9]+", "-", title.lower())
    slug_str = re.sub(r"-+", "-", slug_str)
    slug_str = slug_str.strip("-")[:100]

    if not slug_str and post_id:
        slug_str = f"post-{str(post_id)[:8]}"
    elif not slug_str:
        slug_str = "test-post"

    return Slug(slug_str)


def make_user(handle: str, display_name: str | None = None) -> User:
    """Build a user with a fresh ID."""
    return User(
        id=UserId(uuid4()),
        handle=Handle(root=handle),
        display_name=display_name,
    )


def make_post(author: User, title: str = "Test Post") -> Post:
    """Build a post with a fresh ID and a slug unique to it."""
    post_id = PostId(uuid4())
    return Post(
        id=post_id,
        slug=make_slug(f"{title} {str(post_id)[:8]}"),
        title=title,
        author_id=author.id,
    )


def make_comment(
    post: Post,
    author: User,
    content: str,
    created_at: datetime,
    parent: Comment | None = None,
) -> Comment:
    """Build a comment with an explicit timestamp (for ordering tests)."""
    return Comment(
        id=CommentId(uuid4()),
        post_id=post.id,
        author_id=author.id,
        author=author.summary(),
        content=content,
        parent_id=parent.id if parent else None,
        created_at=created_at,
    )


def at(minute: int) -> datetime:
    """Fixed timestamp ``minute`` minutes into a test day."""
    return datetime(2025, 1, 1, 12, minute, tzinfo=timezone.utc)


def make_token(user: User, settings: AuthSettings | None = None) -> str:
    """Session token for a user, signed with the (default) test settings."""
    jwt_service = JWTService(settings or AuthSettings())
    return jwt_service.create_token(str(user.id), user.handle.root)
