"""Set relation use case (idempotent add/remove)."""

from pydantic import BaseModel

from quill.application.usecase.base import BaseUseCase
from quill.domain.error import UnauthorizedError
from quill.domain.service import JWTService, RelationService
from quill.domain.value import RelationKind

from .common import RelationStatusResponse, TargetResolver


class SetRelationRequest(BaseModel):
    """Set relation request."""

    kind: RelationKind
    target: str
    active: bool  # True to add the edge, False to remove it
    auth_token: str | None = None


class SetRelationUseCase(BaseUseCase):
    """Use case for adding or removing a relation edge."""

    def __init__(
        self,
        relation_service: RelationService,
        target_resolver: TargetResolver,
        jwt_service: JWTService,
    ) -> None:
        self.relation_service = relation_service
        self.target_resolver = target_resolver
        self.jwt_service = jwt_service

    async def execute(self, request: SetRelationRequest) -> RelationStatusResponse:
        """Execute set relation flow.

        Repeating the same request is a no-op that reports current state.

        Raises:
            UnauthorizedError: If no valid actor
            NotFoundError: If target not found
            InvalidOperationError: If following yourself
        """
        actor_id = self.jwt_service.resolve_actor(request.auth_token)
        if actor_id is None:
            raise UnauthorizedError(
                f"Authentication required to {request.kind.value}"
            )

        target_id = await self.target_resolver.resolve(request.kind, request.target)
        status = await self.relation_service.set_active(
            request.kind, actor_id, target_id, request.active
        )
        return RelationStatusResponse.from_domain(status)
