"""Get relation status use case."""

from pydantic import BaseModel

from quill.application.usecase.base import BaseUseCase
from quill.domain.error import NotFoundError
from quill.domain.service import JWTService, RelationService
from quill.domain.value import RelationKind

from .common import RelationStatusResponse, TargetResolver


class GetRelationStatusRequest(BaseModel):
    """Get relation status request."""

    kind: RelationKind
    target: str  # Post UUID, or user handle for follow
    auth_token: str | None = None


class GetRelationStatusUseCase(BaseUseCase):
    """Use case for reading whether the actor holds a relation to a target."""

    def __init__(
        self,
        relation_service: RelationService,
        target_resolver: TargetResolver,
        jwt_service: JWTService,
    ) -> None:
        """Initialize get relation status use case.

        Args:
            relation_service: Relation domain service
            target_resolver: Resolves post IDs and user handles
            jwt_service: JWT service for resolving the actor
        """
        self.relation_service = relation_service
        self.target_resolver = target_resolver
        self.jwt_service = jwt_service

    async def execute(
        self, request: GetRelationStatusRequest
    ) -> RelationStatusResponse:
        """Execute get relation status flow.

        Anonymous callers never get an error: an unknown target simply
        reports ``active=False, count=0``.

        Raises:
            NotFoundError: If an authenticated actor names an unknown target
        """
        actor_id = self.jwt_service.resolve_actor(request.auth_token)

        try:
            target_id = await self.target_resolver.resolve(request.kind, request.target)
        except NotFoundError:
            if actor_id is None:
                return RelationStatusResponse(active=False, count=0)
            raise

        status = await self.relation_service.get_status(
            request.kind, actor_id, target_id
        )
        return RelationStatusResponse.from_domain(status)
