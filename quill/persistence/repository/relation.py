"""PostgreSQL implementation of Relation repository."""

from typing import List, Optional, Sequence
from uuid import UUID

from sqlalchemy import and_, delete, func, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from quill.domain.model import Relation
from quill.domain.repository import RelationRepository
from quill.domain.value import RelationKind, UserId
from quill.persistence.errors import store_errors
from quill.persistence.mappers import relation_to_dict, row_to_relation
from quill.persistence.tables import relations_table


class PostgresRelationRepository(RelationRepository):
    """PostgreSQL implementation of RelationRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    def _edge(self, source_id: UserId, kind: RelationKind, target_id: UUID):
        return and_(
            relations_table.c.source_id == source_id,
            relations_table.c.kind == kind.value,
            relations_table.c.target_id == target_id,
        )

    async def find(
        self,
        source_id: UserId,
        kind: RelationKind,
        target_id: UUID,
    ) -> Optional[Relation]:
        """Find the edge from a source to a target."""
        stmt = select(relations_table).where(self._edge(source_id, kind, target_id))
        async with store_errors(self.session, "relation.find"):
            result = await self.session.execute(stmt)
            row = result.fetchone()
        return row_to_relation(row._asdict()) if row else None

    async def find_by_source_and_targets(
        self,
        source_id: UserId,
        kind: RelationKind,
        target_ids: Sequence[UUID],
    ) -> List[Relation]:
        """Find a user's edges to several targets (batch query)."""
        if not target_ids:
            return []

        stmt = select(relations_table).where(
            and_(
                relations_table.c.source_id == source_id,
                relations_table.c.kind == kind.value,
                relations_table.c.target_id.in_(target_ids),
            )
        )
        async with store_errors(self.session, "relation.find_by_source_and_targets"):
            result = await self.session.execute(stmt)
            rows = result.fetchall()
        return [row_to_relation(row._asdict()) for row in rows]

    async def save(self, relation: Relation) -> Relation:
        """Insert a new edge.

        Runs in a SAVEPOINT so a unique violation leaves the surrounding
        transaction usable for the follow-up read.
        """
        stmt = insert(relations_table).values(**relation_to_dict(relation))
        async with store_errors(self.session, "relation.save"):
            async with self.session.begin_nested():
                await self.session.execute(stmt)
        return relation

    async def delete(
        self,
        source_id: UserId,
        kind: RelationKind,
        target_id: UUID,
    ) -> bool:
        """Delete the edge from a source to a target."""
        stmt = delete(relations_table).where(self._edge(source_id, kind, target_id))
        async with store_errors(self.session, "relation.delete"):
            result = await self.session.execute(stmt)
        return result.rowcount > 0  # type: ignore[attr-defined]

    async def count_by_target(self, kind: RelationKind, target_id: UUID) -> int:
        """Count edges of a kind pointing at a target."""
        stmt = (
            select(func.count())
            .select_from(relations_table)
            .where(
                and_(
                    relations_table.c.kind == kind.value,
                    relations_table.c.target_id == target_id,
                )
            )
        )
        async with store_errors(self.session, "relation.count_by_target"):
            result = await self.session.execute(stmt)
            return result.scalar_one()

    async def count_by_targets(
        self, kind: RelationKind, target_ids: Sequence[UUID]
    ) -> dict[UUID, int]:
        """Count edges of a kind for several targets (batch query)."""
        if not target_ids:
            return {}

        stmt = (
            select(relations_table.c.target_id, func.count())
            .where(
                and_(
                    relations_table.c.kind == kind.value,
                    relations_table.c.target_id.in_(target_ids),
                )
            )
            .group_by(relations_table.c.target_id)
        )
        async with store_errors(self.session, "relation.count_by_targets"):
            result = await self.session.execute(stmt)
            counts = {target_id: count for target_id, count in result.fetchall()}
        return {target_id: counts.get(target_id, 0) for target_id in target_ids}

    async def count_by_source(self, source_id: UserId, kind: RelationKind) -> int:
        """Count edges of a kind leaving a source."""
        stmt = (
            select(func.count())
            .select_from(relations_table)
            .where(
                and_(
                    relations_table.c.source_id == source_id,
                    relations_table.c.kind == kind.value,
                )
            )
        )
        async with store_errors(self.session, "relation.count_by_source"):
            result = await self.session.execute(stmt)
            return result.scalar_one()
