"""Comment response models shared by the comment use cases."""

from datetime import datetime

from pydantic import BaseModel

from quill.domain.model import AuthorSummary, Comment
from quill.domain.service import CommentNode


class AuthorItem(BaseModel):
    """Author summary attached to a comment."""

    id: str
    handle: str
    display_name: str | None
    avatar_url: str | None

    @classmethod
    def from_domain(cls, author: AuthorSummary) -> "AuthorItem":
        return cls(
            id=str(author.id),
            handle=author.handle.root,
            display_name=author.display_name,
            avatar_url=author.avatar_url,
        )


class CommentItem(BaseModel):
    """Comment as returned to clients."""

    id: str
    post_id: str
    author: AuthorItem
    content: str
    parent_id: str | None
    created_at: datetime

    @classmethod
    def from_domain(cls, comment: Comment) -> "CommentItem":
        return cls(
            id=str(comment.id),
            post_id=str(comment.post_id),
            author=AuthorItem.from_domain(comment.author),
            content=comment.content,
            parent_id=str(comment.parent_id) if comment.parent_id else None,
            created_at=comment.created_at,
        )


class CommentNodeItem(BaseModel):
    """Top-level comment with its replies."""

    comment: CommentItem
    replies: list[CommentItem]

    @classmethod
    def from_domain(cls, node: CommentNode) -> "CommentNodeItem":
        """Convert a domain CommentNode to a response model.

        Args:
            node: Domain comment node

        Returns:
            API response model with replies converted
        """
        return cls(
            comment=CommentItem.from_domain(node.comment),
            replies=[CommentItem.from_domain(reply) for reply in node.replies],
        )
