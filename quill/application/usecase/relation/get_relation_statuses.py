"""Batch relation status use case."""

from uuid import UUID

from pydantic import BaseModel, Field

from quill.application.usecase.base import BaseUseCase
from quill.domain.error import NotFoundError
from quill.domain.service import JWTService, RelationService
from quill.domain.value import RelationKind

from .common import RelationStatusResponse, TargetResolver

MAX_BATCH_TARGETS = 100


class GetRelationStatusesRequest(BaseModel):
    """Batch relation status request."""

    kind: RelationKind
    targets: list[str] = Field(max_length=MAX_BATCH_TARGETS)
    auth_token: str | None = None


class GetRelationStatusesResponse(BaseModel):
    """Batch relation status response, keyed by the requested identifier."""

    kind: RelationKind
    statuses: dict[str, RelationStatusResponse]


class GetRelationStatusesUseCase(BaseUseCase):
    """Use case for reading relation state of many targets (e.g. a post list)."""

    def __init__(
        self,
        relation_service: RelationService,
        target_resolver: TargetResolver,
        jwt_service: JWTService,
    ) -> None:
        self.relation_service = relation_service
        self.target_resolver = target_resolver
        self.jwt_service = jwt_service

    async def execute(
        self, request: GetRelationStatusesRequest
    ) -> GetRelationStatusesResponse:
        """Execute batch status flow.

        Unknown or malformed targets report ``active=False, count=0`` instead
        of failing the whole batch.
        """
        actor_id = self.jwt_service.resolve_actor(request.auth_token)

        resolved: dict[str, UUID] = {}
        for target in dict.fromkeys(request.targets):
            try:
                resolved[target] = await self.target_resolver.resolve(
                    request.kind, target
                )
            except NotFoundError:
                continue

        statuses = await self.relation_service.get_statuses(
            request.kind, actor_id, list(resolved.values())
        )

        empty = RelationStatusResponse(active=False, count=0)
        return GetRelationStatusesResponse(
            kind=request.kind,
            statuses={
                target: (
                    RelationStatusResponse.from_domain(statuses[resolved[target]])
                    if target in resolved
                    else empty
                )
                for target in request.targets
            },
        )
