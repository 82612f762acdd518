"""Toggle relation use case."""

from pydantic import BaseModel

from quill.application.usecase.base import BaseUseCase
from quill.domain.error import UnauthorizedError
from quill.domain.service import JWTService, RelationService
from quill.domain.value import RelationKind

from .common import RelationStatusResponse, TargetResolver


class ToggleRelationRequest(BaseModel):
    """Toggle relation request."""

    kind: RelationKind
    target: str
    auth_token: str | None = None


class ToggleRelationUseCase(BaseUseCase):
    """Use case for flipping a relation edge."""

    def __init__(
        self,
        relation_service: RelationService,
        target_resolver: TargetResolver,
        jwt_service: JWTService,
    ) -> None:
        self.relation_service = relation_service
        self.target_resolver = target_resolver
        self.jwt_service = jwt_service

    async def execute(self, request: ToggleRelationRequest) -> RelationStatusResponse:
        """Execute toggle flow.

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
        status = await self.relation_service.toggle(request.kind, actor_id, target_id)
        return RelationStatusResponse.from_domain(status)
