"""In-memory relation repository for testing."""

from typing import List, Optional, Sequence
from uuid import UUID

from quill.domain.error import ConflictError
from quill.domain.model import Relation
from quill.domain.repository import RelationRepository
from quill.domain.value import RelationKind, UserId

from .store import InMemoryStore


class InMemoryRelationRepository(RelationRepository):
    """In-memory implementation of RelationRepository for testing.

    ``save`` checks and appends without suspending, which makes it atomic on
    the event loop, mirroring the store's unique constraint.
    """

    def __init__(self, store: InMemoryStore | None = None) -> None:
        self._store = store if store is not None else InMemoryStore()

    def _index_of(
        self, source_id: UserId, kind: RelationKind, target_id: UUID
    ) -> int | None:
        for i, relation in enumerate(self._store.relations):
            if (
                relation.source_id == source_id
                and relation.kind == kind
                and relation.target_id == target_id
            ):
                return i
        return None

    async def find(
        self,
        source_id: UserId,
        kind: RelationKind,
        target_id: UUID,
    ) -> Optional[Relation]:
        """Find the edge from a source to a target."""
        i = self._index_of(source_id, kind, target_id)
        return self._store.relations[i] if i is not None else None

    async def find_by_source_and_targets(
        self,
        source_id: UserId,
        kind: RelationKind,
        target_ids: Sequence[UUID],
    ) -> List[Relation]:
        """Find a user's edges to several targets (batch query)."""
        if not target_ids:
            return []

        targets = set(target_ids)
        return [
            r
            for r in self._store.relations
            if r.source_id == source_id and r.kind == kind and r.target_id in targets
        ]

    async def save(self, relation: Relation) -> Relation:
        """Insert an edge.

        Raises:
            ConflictError: If the edge already exists
        """
        existing = self._index_of(relation.source_id, relation.kind, relation.target_id)
        if existing is not None:
            raise ConflictError("Duplicate relation")
        self._store.relations.append(relation)
        return relation

    async def delete(
        self,
        source_id: UserId,
        kind: RelationKind,
        target_id: UUID,
    ) -> bool:
        """Delete the edge from a source to a target."""
        i = self._index_of(source_id, kind, target_id)
        if i is None:
            return False
        self._store.relations.pop(i)
        return True

    async def count_by_target(self, kind: RelationKind, target_id: UUID) -> int:
        """Count edges of a kind pointing at a target."""
        return sum(
            1
            for r in self._store.relations
            if r.kind == kind and r.target_id == target_id
        )

    async def count_by_targets(
        self, kind: RelationKind, target_ids: Sequence[UUID]
    ) -> dict[UUID, int]:
        """Count edges of a kind for several targets (batch query)."""
        counts = {target_id: 0 for target_id in target_ids}
        for relation in self._store.relations:
            if relation.kind == kind and relation.target_id in counts:
                counts[relation.target_id] += 1
        return counts

    async def count_by_source(self, source_id: UserId, kind: RelationKind) -> int:
        """Count edges of a kind leaving a source."""
        return sum(
            1
            for r in self._store.relations
            if r.kind == kind and r.source_id == source_id
        )
