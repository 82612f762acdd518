"""Comment entity.

Comments are threaded exactly one level deep: a comment is either top-level
(no parent) or a reply whose parent is a top-level comment on the same post.
Because replies never point at replies, a post's thread can be assembled with
a single grouping pass by parent_id.
"""

from datetime import datetime, timezone
from typing import Optional

from pydantic import Field

from quill.domain.model.common import DomainModel
from quill.domain.model.user import AuthorSummary
from quill.domain.value import CommentId, PostId, UserId

MAX_COMMENT_LENGTH = 10000


class Comment(DomainModel):
    """Comment entity.

    Immutable once created: no edit or delete is modeled in this layer.
    """

    id: CommentId
    post_id: PostId
    author_id: UserId
    author: AuthorSummary
    content: str = Field(min_length=1, max_length=MAX_COMMENT_LENGTH)
    parent_id: Optional[CommentId] = None
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def is_reply(self) -> bool:
        """Whether this comment replies to another comment."""
        return self.parent_id is not None
