"""Relation entity.

A relation is a directed edge from an actor to a target: a like or bookmark
on a post, or a follow of another user. At most one edge exists per
(source, kind, target), enforced by a unique constraint in the store.
"""

from datetime import datetime, timezone
from uuid import UUID

from pydantic import Field

from quill.domain.model.common import DomainModel
from quill.domain.value import RelationId, RelationKind, UserId


class Relation(DomainModel):
    """Relation edge.

    Business rules:
    - One edge per (source_id, kind, target_id)
    - Follow edges never point at their own source
    - Created by toggle-on, deleted by toggle-off, never updated
    """

    id: RelationId
    source_id: UserId
    target_id: UUID  # PostId for like/bookmark, UserId for follow
    kind: RelationKind
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


class RelationStatus(DomainModel):
    """Authoritative relation state for one actor and target.

    ``count`` is the live number of edges of this kind on the target.
    """

    active: bool
    count: int = Field(ge=0)
