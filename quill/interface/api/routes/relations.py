"""Relation routes (like, bookmark, follow)."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie
from pydantic import BaseModel, Field

from quill.application.usecase.relation import (
    GetRelationStatusesRequest,
    GetRelationStatusesResponse,
    GetRelationStatusesUseCase,
    GetRelationStatusRequest,
    GetRelationStatusUseCase,
    RelationStatusResponse,
    SetRelationRequest,
    SetRelationUseCase,
    ToggleRelationRequest,
    ToggleRelationUseCase,
)
from quill.application.usecase.relation.get_relation_statuses import MAX_BATCH_TARGETS
from quill.domain.error import DomainError
from quill.domain.value import RelationKind
from quill.interface.error import to_http_exception

router = APIRouter(prefix="/relations", tags=["relations"], route_class=DishkaRoute)


class RelationStatusesAPIRequest(BaseModel):
    """API request for batch relation status."""

    targets: list[str] = Field(max_length=MAX_BATCH_TARGETS)


@router.post("/{kind}/statuses", response_model=GetRelationStatusesResponse)
async def get_relation_statuses(
    kind: RelationKind,
    request: RelationStatusesAPIRequest,
    use_case: FromDishka[GetRelationStatusesUseCase],
    auth_token: str | None = Cookie(default=None),
) -> GetRelationStatusesResponse:
    """Relation status for many targets at once.

    Unknown targets report ``{"active": false, "count": 0}``.

    Example:
        POST /relations/like/statuses
        {"targets": ["7c9e6679-7425-40de-944b-e07fc1f90ae7"]}
    """
    try:
        return await use_case.execute(
            GetRelationStatusesRequest(
                kind=kind, targets=request.targets, auth_token=auth_token
            )
        )
    except DomainError as e:
        raise to_http_exception(e)


@router.get("/{kind}/{target}", response_model=RelationStatusResponse)
async def get_relation_status(
    kind: RelationKind,
    target: str,
    use_case: FromDishka[GetRelationStatusUseCase],
    auth_token: str | None = Cookie(default=None),
) -> RelationStatusResponse:
    """Whether the current user holds this relation, and its live count.

    Never requires authentication; anonymous callers get ``active: false``.

    Args:
        kind: like, bookmark or follow
        target: Post UUID, or user handle for follow
        use_case: Get relation status use case from DI
        auth_token: JWT token from cookie (optional)
    """
    try:
        return await use_case.execute(
            GetRelationStatusRequest(kind=kind, target=target, auth_token=auth_token)
        )
    except DomainError as e:
        raise to_http_exception(e)


@router.post("/{kind}/{target}", response_model=RelationStatusResponse)
async def add_relation(
    kind: RelationKind,
    target: str,
    use_case: FromDishka[SetRelationUseCase],
    auth_token: str | None = Cookie(default=None),
) -> RelationStatusResponse:
    """Create the relation if absent. Idempotent.

    Raises:
        HTTPException: 401 anonymous, 404 unknown target, 400 self-follow
    """
    try:
        return await use_case.execute(
            SetRelationRequest(
                kind=kind, target=target, active=True, auth_token=auth_token
            )
        )
    except DomainError as e:
        raise to_http_exception(e)


@router.delete("/{kind}/{target}", response_model=RelationStatusResponse)
async def remove_relation(
    kind: RelationKind,
    target: str,
    use_case: FromDishka[SetRelationUseCase],
    auth_token: str | None = Cookie(default=None),
) -> RelationStatusResponse:
    """Remove the relation if present. Idempotent.

    Raises:
        HTTPException: 401 anonymous, 404 unknown target, 400 self-follow
    """
    try:
        return await use_case.execute(
            SetRelationRequest(
                kind=kind, target=target, active=False, auth_token=auth_token
            )
        )
    except DomainError as e:
        raise to_http_exception(e)


@router.post("/{kind}/{target}/toggle", response_model=RelationStatusResponse)
async def toggle_relation(
    kind: RelationKind,
    target: str,
    use_case: FromDishka[ToggleRelationUseCase],
    auth_token: str | None = Cookie(default=None),
) -> RelationStatusResponse:
    """Flip the relation and return the authoritative state.

    Raises:
        HTTPException: 401 anonymous, 404 unknown target, 400 self-follow
    """
    try:
        return await use_case.execute(
            ToggleRelationRequest(kind=kind, target=target, auth_token=auth_token)
        )
    except DomainError as e:
        raise to_http_exception(e)
