"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from quill.domain.model.comment import Comment
from quill.domain.value import CommentId, PostId


class CommentRepository(ABC):
    """Repository for Comment entity.

    Defines the contract for comment persistence operations.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment (with author summary) if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_post(self, post_id: PostId) -> List[Comment]:
        """Find all comments for a post, oldest first.

        Top-level comments and replies are returned together in one flat list;
        callers group them by parent_id.

        Args:
            post_id: The post ID

        Returns:
            List of comments ordered by created_at ascending
        """
        pass

    @abstractmethod
    async def save(self, comment: Comment) -> Comment:
        """Persist a new comment.

        Args:
            comment: The comment to save

        Returns:
            The saved comment

        Raises:
            TransientStoreError: If the store is unreachable
        """
        pass

    @abstractmethod
    async def count_by_post(self, post_id: PostId) -> int:
        """Count comments for a post, replies included.

        Args:
            post_id: The post ID

        Returns:
            Number of comments
        """
        pass
