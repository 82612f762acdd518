"""Get follow stats use case."""

from pydantic import BaseModel

from quill.domain.service import JWTService, RelationService, UserService
from quill.domain.value import RelationKind
from quill.domain.value.types import Handle


class GetFollowStatsRequest(BaseModel):
    """Get follow stats request."""

    handle: Handle
    auth_token: str | None = None


class GetFollowStatsResponse(BaseModel):
    """Follower counts for a profile, plus whether the viewer follows it."""

    handle: str
    followers: int
    following: int
    is_following: bool


class GetFollowStatsUseCase:
    """Use case for a profile's follower and following counts."""

    def __init__(
        self,
        user_service: UserService,
        relation_service: RelationService,
        jwt_service: JWTService,
    ) -> None:
        """Initialize get follow stats use case.

        Args:
            user_service: User domain service
            relation_service: Relation domain service
            jwt_service: JWT service for resolving the viewer
        """
        self.user_service = user_service
        self.relation_service = relation_service
        self.jwt_service = jwt_service

    async def execute(self, request: GetFollowStatsRequest) -> GetFollowStatsResponse:
        """Execute get follow stats flow.

        Raises:
            NotFoundError: If no user has this handle
        """
        user = await self.user_service.get_by_handle(request.handle)
        viewer_id = self.jwt_service.resolve_actor(request.auth_token)

        status = await self.relation_service.get_status(
            RelationKind.FOLLOW, viewer_id, user.id
        )
        following = await self.relation_service.count_following(user.id)

        return GetFollowStatsResponse(
            handle=user.handle.root,
            followers=status.count,
            following=following,
            is_following=status.active,
        )
