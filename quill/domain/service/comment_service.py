"""Comment domain service."""

from collections import defaultdict
from dataclasses import dataclass, field
from datetime import datetime, timezone
from uuid import uuid4

import logfire

from quill.domain.error import InvalidOperationError, UnauthorizedError
from quill.domain.model.comment import MAX_COMMENT_LENGTH, Comment
from quill.domain.repository import CommentRepository
from quill.domain.value import CommentId, PostId, UserId
from quill.util.retry import RetryPolicy

from .base import Service
from .post_service import PostService
from .user_service import UserService


@dataclass
class CommentNode:
    """Top-level comment with its direct replies.

    Threads are two tiers only, so ``replies`` never have replies.
    """

    comment: Comment
    replies: list[Comment] = field(default_factory=list)


class CommentService(Service):
    """Domain service for comment threads."""

    def __init__(
        self,
        comment_repository: CommentRepository,
        post_service: PostService,
        user_service: UserService,
        retry_policy: RetryPolicy | None = None,
    ) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
            post_service: Post domain service
            user_service: User domain service (author summaries)
            retry_policy: Retry policy for transient store errors
        """
        self.comment_repository = comment_repository
        self.post_service = post_service
        self.user_service = user_service
        if retry_policy is not None:
            self.retry_policy = retry_policy

    async def create_comment(
        self,
        actor_id: UserId | None,
        post_id: PostId,
        content: str,
        parent_id: CommentId | None = None,
    ) -> Comment:
        """Create a top-level comment or a reply to a top-level comment.

        Args:
            actor_id: Authenticated actor (None for anonymous)
            post_id: Post ID
            content: Comment text, trimmed before storing
            parent_id: Top-level comment being replied to (None for top-level)

        Returns:
            Created comment with author summary attached

        Raises:
            UnauthorizedError: If actor is anonymous
            InvalidOperationError: If content is blank or too long, or the
                parent is missing, a reply, or on another post
            NotFoundError: If post not found
        """
        if actor_id is None:
            raise UnauthorizedError("Authentication required to comment")

        text = content.strip()
        if not text:
            raise InvalidOperationError("Comment content cannot be empty")
        if len(text) > MAX_COMMENT_LENGTH:
            raise InvalidOperationError(
                f"Comment content exceeds {MAX_COMMENT_LENGTH} characters"
            )

        with logfire.span(
            "comment_service.create_comment",
            post_id=str(post_id),
            author_id=str(actor_id),
            parent_id=str(parent_id) if parent_id else None,
        ):
            await self.post_service.get_post_by_id(post_id)
            author = await self.user_service.get_by_id(actor_id)

            if parent_id is not None:
                await self._check_parent(post_id, parent_id)

            comment = Comment(
                id=CommentId(uuid4()),
                post_id=post_id,
                author_id=actor_id,
                author=author.summary(),
                content=text,
                parent_id=parent_id,
                created_at=datetime.now(timezone.utc),
            )

            saved = await self._with_retry(
                "comment_service.create_comment",
                lambda: self.comment_repository.save(comment),
            )
            logfire.info(
                "Comment created",
                comment_id=str(saved.id),
                post_id=str(post_id),
                author_handle=author.handle.root,
                is_reply=saved.is_reply,
            )
            return saved

    async def _check_parent(self, post_id: PostId, parent_id: CommentId) -> None:
        parent = await self._with_retry(
            "comment_service.find_parent",
            lambda: self.comment_repository.find_by_id(parent_id),
        )

        if parent is None:
            logfire.warn("Parent comment not found", parent_id=str(parent_id))
            raise InvalidOperationError("Parent comment not found")
        if parent.post_id != post_id:
            logfire.warn(
                "Parent comment does not belong to post",
                parent_id=str(parent_id),
                parent_post_id=str(parent.post_id),
                target_post_id=str(post_id),
            )
            raise InvalidOperationError("Parent comment does not belong to this post")
        if parent.is_reply:
            logfire.warn("Reply to a reply rejected", parent_id=str(parent_id))
            raise InvalidOperationError("Cannot reply to a reply")

    async def get_thread(self, post_id: PostId) -> list[CommentNode]:
        """Get a post's comments as a two-tier thread.

        Top-level comments are newest first; replies under each are oldest
        first.

        Raises:
            NotFoundError: If post not found
        """
        with logfire.span("comment_service.get_thread", post_id=str(post_id)):
            await self.post_service.get_post_by_id(post_id)

            comments = await self._with_retry(
                "comment_service.get_thread",
                lambda: self.comment_repository.find_by_post(post_id),
            )
            thread = build_thread(comments)

            logfire.info(
                "Comment thread assembled",
                post_id=str(post_id),
                top_level=len(thread),
                total=len(comments),
            )
            return thread

    async def count_for_post(self, post_id: PostId) -> int:
        """Number of comments on a post, replies included."""
        return await self._with_retry(
            "comment_service.count_for_post",
            lambda: self.comment_repository.count_by_post(post_id),
        )


def build_thread(comments: list[Comment]) -> list[CommentNode]:
    """Group a flat comment list into top-level nodes with replies.

    Single pass by parent_id. Replies whose parent is not a top-level comment
    in the list are dropped rather than nested deeper.
    """
    replies: dict[CommentId, list[Comment]] = defaultdict(list)
    roots: list[Comment] = []

    for comment in comments:
        if comment.parent_id is None:
            roots.append(comment)
        else:
            replies[comment.parent_id].append(comment)

    roots.sort(key=lambda c: c.created_at, reverse=True)
    return [
        CommentNode(
            comment=root,
            replies=sorted(replies.get(root.id, []), key=lambda c: c.created_at),
        )
        for root in roots
    ]
