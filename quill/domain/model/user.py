"""User entity.

Users are owned by the identity system. The engagement layer references them
as actors and follow targets but never mutates them.
"""

from datetime import datetime, timezone
from typing import Optional

from pydantic import Field

from quill.domain.model.common import DomainModel
from quill.domain.value import UserId
from quill.domain.value.types import Handle


class User(DomainModel):
    """User (actor) entity."""

    id: UserId
    handle: Handle
    display_name: Optional[str] = None
    avatar_url: Optional[str] = None
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    def summary(self) -> "AuthorSummary":
        """Public summary attached to content this user authored."""
        return AuthorSummary(
            id=self.id,
            handle=self.handle,
            display_name=self.display_name,
            avatar_url=self.avatar_url,
        )


class AuthorSummary(DomainModel):
    """Author details shown next to a comment."""

    id: UserId
    handle: Handle
    display_name: Optional[str] = None
    avatar_url: Optional[str] = None
