"""Relation (like, bookmark, follow) use cases."""

from .common import RelationStatusResponse, TargetResolver
from .get_relation_status import GetRelationStatusRequest, GetRelationStatusUseCase
from .get_relation_statuses import (
    GetRelationStatusesRequest,
    GetRelationStatusesResponse,
    GetRelationStatusesUseCase,
)
from .set_relation import SetRelationRequest, SetRelationUseCase
from .toggle_relation import ToggleRelationRequest, ToggleRelationUseCase

__all__ = [
    "GetRelationStatusRequest",
    "GetRelationStatusUseCase",
    "GetRelationStatusesRequest",
    "GetRelationStatusesResponse",
    "GetRelationStatusesUseCase",
    "RelationStatusResponse",
    "SetRelationRequest",
    "SetRelationUseCase",
    "TargetResolver",
    "ToggleRelationRequest",
    "ToggleRelationUseCase",
]
