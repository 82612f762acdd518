"""Post entity.

Posts are authored and edited elsewhere on the platform; here they are
targets for likes, bookmarks and comments. Engagement counters are not stored
on the post: they are always derived by counting relation and comment rows.
"""

from datetime import datetime, timezone

from pydantic import Field

from quill.domain.model.common import DomainModel
from quill.domain.value import PostId, UserId
from quill.domain.value.types import Slug


class Post(DomainModel):
    """Post entity."""

    id: PostId
    slug: Slug
    title: str = Field(min_length=1, max_length=300)
    author_id: UserId
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
