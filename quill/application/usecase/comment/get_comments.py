"""Get comments use case."""

from uuid import UUID

from pydantic import BaseModel

from quill.domain.error import NotFoundError
from quill.domain.service import CommentService
from quill.domain.value import PostId

from .common import CommentNodeItem


class GetCommentsRequest(BaseModel):
    """Get comments request."""

    post_id: str  # UUID string


class GetCommentsResponse(BaseModel):
    """Get comments response."""

    post_id: str
    comments: list[CommentNodeItem]
    total: int  # Comments including replies


class GetCommentsUseCase:
    """Use case for reading a post's comment thread."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize get comments use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: GetCommentsRequest) -> GetCommentsResponse:
        """Execute get comments flow.

        Raises:
            NotFoundError: If post not found
        """
        try:
            post_id = PostId(UUID(request.post_id))
        except ValueError:
            raise NotFoundError("Post", request.post_id)

        thread = await self.comment_service.get_thread(post_id)

        return GetCommentsResponse(
            post_id=str(post_id),
            comments=[CommentNodeItem.from_domain(node) for node in thread],
            total=sum(1 + len(node.replies) for node in thread),
        )
