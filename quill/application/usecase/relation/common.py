"""Shared pieces of the relation use cases."""

from uuid import UUID

from pydantic import BaseModel

from quill.domain.error import NotFoundError
from quill.domain.model import RelationStatus
from quill.domain.service import UserService
from quill.domain.value import RelationKind, TargetType
from quill.domain.value.types import Handle


class RelationStatusResponse(BaseModel):
    """Authoritative relation state as returned to clients."""

    active: bool
    count: int

    @classmethod
    def from_domain(cls, status: RelationStatus) -> "RelationStatusResponse":
        return cls(active=status.active, count=status.count)


class TargetResolver:
    """Resolves a public target identifier to a target ID.

    Posts are addressed by UUID; users (follow targets) by handle.
    """

    def __init__(self, user_service: UserService) -> None:
        self.user_service = user_service

    async def resolve(self, kind: RelationKind, target: str) -> UUID:
        """Resolve ``target`` for a relation of ``kind``.

        Raises:
            NotFoundError: If the identifier is malformed or names no user
        """
        if kind.target_type is TargetType.USER:
            try:
                handle = Handle(target)
            except ValueError:
                raise NotFoundError("User", target)
            user = await self.user_service.get_by_handle(handle)
            return user.id

        try:
            return UUID(target)
        except ValueError:
            raise NotFoundError("Post", target)
