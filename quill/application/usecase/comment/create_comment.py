"""Create comment use case."""

from uuid import UUID

from pydantic import BaseModel

from quill.domain.error import InvalidOperationError, NotFoundError, UnauthorizedError
from quill.domain.service import CommentService, JWTService
from quill.domain.value import CommentId, PostId

from .common import CommentItem


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    post_id: str  # UUID string
    content: str
    parent_id: str | None = None  # Top-level comment ID for replies
    auth_token: str | None = None


class CreateCommentUseCase:
    """Use case for commenting on a post or replying to a top-level comment."""

    def __init__(
        self,
        comment_service: CommentService,
        jwt_service: JWTService,
    ) -> None:
        """Initialize create comment use case.

        Args:
            comment_service: Comment domain service
            jwt_service: JWT service for resolving the actor
        """
        self.comment_service = comment_service
        self.jwt_service = jwt_service

    async def execute(self, request: CreateCommentRequest) -> CommentItem:
        """Execute create comment flow.

        Args:
            request: Create comment request

        Returns:
            The created comment with its author summary

        Raises:
            UnauthorizedError: If no valid actor
            NotFoundError: If post not found
            InvalidOperationError: If content is blank or parent is invalid
        """
        actor_id = self.jwt_service.resolve_actor(request.auth_token)
        if actor_id is None:
            raise UnauthorizedError("Authentication required to comment")

        try:
            post_id = PostId(UUID(request.post_id))
        except ValueError:
            raise NotFoundError("Post", request.post_id)

        parent_id = None
        if request.parent_id:
            try:
                parent_id = CommentId(UUID(request.parent_id))
            except ValueError:
                raise InvalidOperationError("Parent comment not found")

        comment = await self.comment_service.create_comment(
            actor_id=actor_id,
            post_id=post_id,
            content=request.content,
            parent_id=parent_id,
        )
        return CommentItem.from_domain(comment)
