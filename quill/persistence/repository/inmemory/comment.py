"""In-memory comment repository for testing."""

from typing import List, Optional

from quill.domain.error import ConflictError
from quill.domain.model import Comment
from quill.domain.repository import CommentRepository
from quill.domain.value import CommentId, PostId

from .store import InMemoryStore


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self, store: InMemoryStore | None = None) -> None:
        self._store = store if store is not None else InMemoryStore()

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        return self._store.comments.get(comment_id)

    async def find_by_post(self, post_id: PostId) -> List[Comment]:
        """Find all comments for a post, oldest first."""
        comments = [c for c in self._store.comments.values() if c.post_id == post_id]
        return sorted(comments, key=lambda c: c.created_at)

    async def save(self, comment: Comment) -> Comment:
        """Insert a comment."""
        if comment.id in self._store.comments:
            raise ConflictError(f"Duplicate comment: {comment.id}")
        self._store.comments[comment.id] = comment
        return comment

    async def count_by_post(self, post_id: PostId) -> int:
        """Count comments for a post, replies included."""
        return sum(1 for c in self._store.comments.values() if c.post_id == post_id)
