"""Relation repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence
from uuid import UUID

from quill.domain.model.relation import Relation
from quill.domain.value import RelationKind, UserId


class RelationRepository(ABC):
    """Repository for like, bookmark and follow edges.

    The store enforces one edge per (source_id, kind, target_id). That
    constraint is the only cross-request coordination primitive: concurrent
    inserts of the same edge race, and all but one are rejected.
    """

    @abstractmethod
    async def find(
        self,
        source_id: UserId,
        kind: RelationKind,
        target_id: UUID,
    ) -> Optional[Relation]:
        """Find the edge from a source to a target.

        Args:
            source_id: The acting user's ID
            kind: Relation kind
            target_id: Post ID or user ID, depending on kind

        Returns:
            The relation if it exists, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_source_and_targets(
        self,
        source_id: UserId,
        kind: RelationKind,
        target_ids: Sequence[UUID],
    ) -> List[Relation]:
        """Find a user's edges to several targets (batch query).

        Args:
            source_id: The acting user's ID
            kind: Relation kind
            target_ids: Targets to check

        Returns:
            Existing edges among the given targets
        """
        pass

    @abstractmethod
    async def save(self, relation: Relation) -> Relation:
        """Insert a new edge.

        Args:
            relation: The relation to insert

        Returns:
            The saved relation

        Raises:
            ConflictError: If the edge already exists (unique constraint)
            TransientStoreError: If the store is unreachable
        """
        pass

    @abstractmethod
    async def delete(
        self,
        source_id: UserId,
        kind: RelationKind,
        target_id: UUID,
    ) -> bool:
        """Delete the edge from a source to a target.

        Args:
            source_id: The acting user's ID
            kind: Relation kind
            target_id: Post ID or user ID, depending on kind

        Returns:
            True if an edge was deleted, False if none existed
        """
        pass

    @abstractmethod
    async def count_by_target(self, kind: RelationKind, target_id: UUID) -> int:
        """Count edges of a kind pointing at a target.

        Likes on a post, bookmarks on a post, or followers of a user.
        """
        pass

    @abstractmethod
    async def count_by_targets(
        self, kind: RelationKind, target_ids: Sequence[UUID]
    ) -> dict[UUID, int]:
        """Count edges of a kind for several targets (batch query).

        Returns:
            Mapping of target ID to count; targets without edges map to 0
        """
        pass

    @abstractmethod
    async def count_by_source(self, source_id: UserId, kind: RelationKind) -> int:
        """Count edges of a kind leaving a source.

        Used for following counts.
        """
        pass
