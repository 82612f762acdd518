"""Get post engagement use case."""

from uuid import UUID

from pydantic import BaseModel

from quill.application.usecase.relation import RelationStatusResponse
from quill.domain.error import NotFoundError
from quill.domain.service import (
    CommentService,
    JWTService,
    PostService,
    RelationService,
)
from quill.domain.value import PostId, RelationKind


class GetPostEngagementRequest(BaseModel):
    """Get post engagement request."""

    post_id: str  # UUID string
    auth_token: str | None = None


class GetPostEngagementResponse(BaseModel):
    """Everything a post page needs to seed its engagement widgets."""

    post_id: str
    like: RelationStatusResponse
    bookmark: RelationStatusResponse
    comment_count: int


class GetPostEngagementUseCase:
    """Use case for a post's like, bookmark and comment state in one call."""

    def __init__(
        self,
        post_service: PostService,
        relation_service: RelationService,
        comment_service: CommentService,
        jwt_service: JWTService,
    ) -> None:
        self.post_service = post_service
        self.relation_service = relation_service
        self.comment_service = comment_service
        self.jwt_service = jwt_service

    async def execute(
        self, request: GetPostEngagementRequest
    ) -> GetPostEngagementResponse:
        """Execute get post engagement flow.

        Raises:
            NotFoundError: If post not found
        """
        try:
            post_id = PostId(UUID(request.post_id))
        except ValueError:
            raise NotFoundError("Post", request.post_id)

        post = await self.post_service.get_post_by_id(post_id)
        viewer_id = self.jwt_service.resolve_actor(request.auth_token)

        like = await self.relation_service.get_status(
            RelationKind.LIKE, viewer_id, post.id
        )
        bookmark = await self.relation_service.get_status(
            RelationKind.BOOKMARK, viewer_id, post.id
        )
        comment_count = await self.comment_service.count_for_post(post.id)

        return GetPostEngagementResponse(
            post_id=str(post.id),
            like=RelationStatusResponse.from_domain(like),
            bookmark=RelationStatusResponse.from_domain(bookmark),
            comment_count=comment_count,
        )
