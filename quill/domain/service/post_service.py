"""Post domain service."""

import logfire

from quill.domain.error import NotFoundError
from quill.domain.model.post import Post
from quill.domain.repository import PostRepository
from quill.domain.value import PostId
from quill.util.retry import RetryPolicy

from .base import Service


class PostService(Service):
    """Domain service for post lookups."""

    def __init__(
        self,
        post_repository: PostRepository,
        retry_policy: RetryPolicy | None = None,
    ) -> None:
        """Initialize post service.

        Args:
            post_repository: Post repository
            retry_policy: Retry policy for transient store errors
        """
        self.post_repository = post_repository
        if retry_policy is not None:
            self.retry_policy = retry_policy

    async def get_post_by_id(self, post_id: PostId) -> Post:
        """Get a post by ID.

        Args:
            post_id: Post ID

        Returns:
            The post

        Raises:
            NotFoundError: If post not found
        """
        with logfire.span("post_service.get_post_by_id", post_id=str(post_id)):
            post = await self._with_retry(
                "post_service.get_post_by_id",
                lambda: self.post_repository.find_by_id(post_id),
            )

            if not post:
                logfire.warn("Post not found", post_id=str(post_id))
                raise NotFoundError("Post", str(post_id))

            logfire.info("Post found", post_id=str(post_id), slug=post.slug.root)
            return post

    async def exists(self, post_id: PostId) -> bool:
        """Whether a post with this ID exists."""
        post = await self.post_repository.find_by_id(post_id)
        return post is not None
