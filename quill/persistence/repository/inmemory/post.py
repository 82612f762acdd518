"""In-memory post repository for testing."""

from typing import Optional

from quill.domain.error import ConflictError
from quill.domain.model import Post
from quill.domain.repository import PostRepository
from quill.domain.value import PostId

from .store import InMemoryStore


class InMemoryPostRepository(PostRepository):
    """In-memory implementation of PostRepository for testing."""

    def __init__(self, store: InMemoryStore | None = None) -> None:
        self._store = store if store is not None else InMemoryStore()

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        return self._store.posts.get(post_id)

    async def save(self, post: Post) -> Post:
        """Insert a post.

        Raises:
            ConflictError: If the ID or slug is taken
        """
        if post.id in self._store.posts or any(
            p.slug == post.slug for p in self._store.posts.values()
        ):
            raise ConflictError(f"Duplicate post: {post.slug.root}")
        self._store.posts[post.id] = post
        return post
