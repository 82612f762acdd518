"""Relation domain service.

Like, Bookmark and Follow are one contract: an actor toggles the existence of
a single edge to a target. ``RelationToggle`` implements that contract once,
parameterized by relation kind and a target-existence check, so idempotence
and uniqueness are enforced identically for every kind.
"""

from collections.abc import Awaitable, Callable, Sequence
from datetime import datetime, timezone
from uuid import UUID, uuid4

import logfire

from quill.domain.error import (
    ConflictError,
    InvalidOperationError,
    NotFoundError,
    UnauthorizedError,
)
from quill.domain.model.relation import Relation, RelationStatus
from quill.domain.repository import RelationRepository
from quill.domain.value import PostId, RelationId, RelationKind, UserId
from quill.util.retry import RetryPolicy

from .base import Service
from .post_service import PostService
from .user_service import UserService

TargetExists = Callable[[UUID], Awaitable[bool]]


class RelationToggle:
    """Toggle engine for one relation kind.

    The existence check and the write are not locked together. Instead the
    store's unique constraint arbitrates concurrent writers: an insert that
    loses the race raises ConflictError, and the engine re-reads the edge and
    reports whatever the store now holds. A delete that finds nothing simply
    reports inactive. ``count`` is always recounted from the store after the
    write, never adjusted in memory.
    """

    def __init__(
        self,
        kind: RelationKind,
        relation_repository: RelationRepository,
        target_exists: TargetExists,
    ) -> None:
        """Initialize the toggle.

        Args:
            kind: Relation kind handled by this toggle
            relation_repository: Relation repository
            target_exists: Async check that the target exists
        """
        self.kind = kind
        self.relation_repository = relation_repository
        self.target_exists = target_exists

    async def status(self, actor_id: UserId | None, target_id: UUID) -> RelationStatus:
        """Current relation state for an actor and target.

        Anonymous callers always get ``active=False`` with the live count and
        are never refused, even for targets that do not exist.

        Raises:
            NotFoundError: If an authenticated actor asks about a missing target
        """
        if actor_id is None:
            return await self._status(False, target_id)

        await self._require_target(target_id)
        edge = await self.relation_repository.find(actor_id, self.kind, target_id)
        return await self._status(edge is not None, target_id)

    async def toggle(self, actor_id: UserId | None, target_id: UUID) -> RelationStatus:
        """Flip the edge between actor and target.

        Raises:
            UnauthorizedError: If actor is anonymous
            NotFoundError: If target does not exist
            InvalidOperationError: If the kind forbids self-targeting
        """
        actor = await self._check_write(actor_id, target_id)

        edge = await self.relation_repository.find(actor, self.kind, target_id)
        if edge is not None:
            active = await self._remove(actor, target_id)
        else:
            active = await self._add(actor, target_id)

        return await self._status(active, target_id)

    async def set_active(
        self, actor_id: UserId | None, target_id: UUID, active: bool
    ) -> RelationStatus:
        """Ensure the edge is present (``active=True``) or absent.

        Idempotent: adding an existing edge or removing a missing one succeeds
        and reports the authoritative state.

        Raises:
            UnauthorizedError: If actor is anonymous
            NotFoundError: If target does not exist
            InvalidOperationError: If the kind forbids self-targeting
        """
        actor = await self._check_write(actor_id, target_id)

        if active:
            now_active = await self._add(actor, target_id)
        else:
            now_active = await self._remove(actor, target_id)

        return await self._status(now_active, target_id)

    async def _check_write(self, actor_id: UserId | None, target_id: UUID) -> UserId:
        if actor_id is None:
            raise UnauthorizedError(f"Authentication required to {self.kind.value}")

        await self._require_target(target_id)

        if not self.kind.allows_self and actor_id == target_id:
            raise InvalidOperationError(f"Cannot {self.kind.value} yourself")

        return actor_id

    async def _require_target(self, target_id: UUID) -> None:
        if not await self.target_exists(target_id):
            raise NotFoundError(self.kind.target_type.value.capitalize(), str(target_id))

    async def _add(self, actor_id: UserId, target_id: UUID) -> bool:
        """Insert the edge; returns whether it is active afterwards."""
        relation = Relation(
            id=RelationId(uuid4()),
            source_id=actor_id,
            target_id=target_id,
            kind=self.kind,
            created_at=datetime.now(timezone.utc),
        )

        try:
            await self.relation_repository.save(relation)
        except ConflictError:
            # A concurrent request inserted the same edge first
            edge = await self.relation_repository.find(actor_id, self.kind, target_id)
            logfire.warn(
                "Concurrent relation insert, using stored state",
                kind=self.kind.value,
                actor_id=str(actor_id),
                target_id=str(target_id),
                active=edge is not None,
            )
            return edge is not None

        logfire.info(
            "Relation created",
            kind=self.kind.value,
            actor_id=str(actor_id),
            target_id=str(target_id),
        )
        return True

    async def _remove(self, actor_id: UserId, target_id: UUID) -> bool:
        """Delete the edge; returns whether it is active afterwards (never)."""
        deleted = await self.relation_repository.delete(actor_id, self.kind, target_id)
        if deleted:
            logfire.info(
                "Relation removed",
                kind=self.kind.value,
                actor_id=str(actor_id),
                target_id=str(target_id),
            )
        else:
            logfire.info(
                "Relation already absent",
                kind=self.kind.value,
                actor_id=str(actor_id),
                target_id=str(target_id),
            )
        return False

    async def _status(self, active: bool, target_id: UUID) -> RelationStatus:
        count = await self.relation_repository.count_by_target(self.kind, target_id)
        return RelationStatus(active=active, count=count)


class RelationService(Service):
    """Domain service for like, bookmark and follow relations."""

    def __init__(
        self,
        relation_repository: RelationRepository,
        post_service: PostService,
        user_service: UserService,
        retry_policy: RetryPolicy | None = None,
    ) -> None:
        """Initialize relation service.

        Args:
            relation_repository: Relation repository
            post_service: Post domain service (like/bookmark targets)
            user_service: User domain service (follow targets)
            retry_policy: Retry policy for transient store errors
        """
        self.relation_repository = relation_repository
        self.post_service = post_service
        self.user_service = user_service
        if retry_policy is not None:
            self.retry_policy = retry_policy

        self.toggles: dict[RelationKind, RelationToggle] = {
            kind: RelationToggle(kind, relation_repository, self._exists_check(kind))
            for kind in RelationKind
        }

    def _exists_check(self, kind: RelationKind) -> TargetExists:
        if kind is RelationKind.FOLLOW:
            return lambda target_id: self.user_service.exists(UserId(target_id))
        return lambda target_id: self.post_service.exists(PostId(target_id))

    async def get_status(
        self, kind: RelationKind, actor_id: UserId | None, target_id: UUID
    ) -> RelationStatus:
        """Get relation status (see RelationToggle.status)."""
        with logfire.span(
            "relation_service.get_status",
            kind=kind.value,
            actor_id=str(actor_id) if actor_id else None,
            target_id=str(target_id),
        ):
            return await self._with_retry(
                "relation_service.get_status",
                lambda: self.toggles[kind].status(actor_id, target_id),
            )

    async def toggle(
        self, kind: RelationKind, actor_id: UserId | None, target_id: UUID
    ) -> RelationStatus:
        """Flip a relation (see RelationToggle.toggle)."""
        with logfire.span(
            "relation_service.toggle",
            kind=kind.value,
            actor_id=str(actor_id) if actor_id else None,
            target_id=str(target_id),
        ):
            status = await self._with_retry(
                "relation_service.toggle",
                lambda: self.toggles[kind].toggle(actor_id, target_id),
            )
            logfire.info(
                "Relation toggled",
                kind=kind.value,
                target_id=str(target_id),
                active=status.active,
                count=status.count,
            )
            return status

    async def set_active(
        self,
        kind: RelationKind,
        actor_id: UserId | None,
        target_id: UUID,
        active: bool,
    ) -> RelationStatus:
        """Ensure a relation is present or absent (see RelationToggle.set_active)."""
        with logfire.span(
            "relation_service.set_active",
            kind=kind.value,
            actor_id=str(actor_id) if actor_id else None,
            target_id=str(target_id),
            active=active,
        ):
            return await self._with_retry(
                "relation_service.set_active",
                lambda: self.toggles[kind].set_active(actor_id, target_id, active),
            )

    async def get_statuses(
        self,
        kind: RelationKind,
        actor_id: UserId | None,
        target_ids: Sequence[UUID],
    ) -> dict[UUID, RelationStatus]:
        """Relation status for many targets at once (e.g. a feed of posts).

        Uses two batch queries regardless of the number of targets. Unknown
        targets report ``active=False, count=0``.
        """
        if not target_ids:
            return {}

        async def _load() -> dict[UUID, RelationStatus]:
            counts = await self.relation_repository.count_by_targets(kind, target_ids)

            active_ids: set[UUID] = set()
            if actor_id is not None:
                edges = await self.relation_repository.find_by_source_and_targets(
                    actor_id, kind, target_ids
                )
                active_ids = {edge.target_id for edge in edges}

            return {
                target_id: RelationStatus(
                    active=target_id in active_ids,
                    count=counts.get(target_id, 0),
                )
                for target_id in target_ids
            }

        with logfire.span(
            "relation_service.get_statuses",
            kind=kind.value,
            target_count=len(target_ids),
        ):
            return await self._with_retry("relation_service.get_statuses", _load)

    async def count_followers(self, user_id: UserId) -> int:
        """Number of users following this user."""
        return await self._with_retry(
            "relation_service.count_followers",
            lambda: self.relation_repository.count_by_target(
                RelationKind.FOLLOW, user_id
            ),
        )

    async def count_following(self, user_id: UserId) -> int:
        """Number of users this user follows."""
        return await self._with_retry(
            "relation_service.count_following",
            lambda: self.relation_repository.count_by_source(
                user_id, RelationKind.FOLLOW
            ),
        )
