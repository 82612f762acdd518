"""PostgreSQL implementation of Comment repository."""

from typing import List, Optional

from sqlalchemy import func, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from quill.domain.model import Comment
from quill.domain.repository import CommentRepository
from quill.domain.value import CommentId, PostId
from quill.persistence.errors import store_errors
from quill.persistence.mappers import comment_to_dict, row_to_comment
from quill.persistence.tables import comments_table, users_table


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository.

    Comments are read joined with their author so every returned Comment
    carries its author summary.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    def _select_with_author(self):
        return select(
            comments_table,
            users_table.c.handle.label("author_handle"),
            users_table.c.display_name.label("author_display_name"),
            users_table.c.avatar_url.label("author_avatar_url"),
        ).join(users_table, users_table.c.id == comments_table.c.author_id)

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        stmt = self._select_with_author().where(comments_table.c.id == comment_id)
        async with store_errors(self.session, "comment.find_by_id"):
            result = await self.session.execute(stmt)
            row = result.fetchone()
        return row_to_comment(row._asdict()) if row else None

    async def find_by_post(self, post_id: PostId) -> List[Comment]:
        """Find all comments for a post, oldest first."""
        stmt = (
            self._select_with_author()
            .where(comments_table.c.post_id == post_id)
            .order_by(comments_table.c.created_at, comments_table.c.id)
        )
        async with store_errors(self.session, "comment.find_by_post"):
            result = await self.session.execute(stmt)
            rows = result.fetchall()
        return [row_to_comment(row._asdict()) for row in rows]

    async def save(self, comment: Comment) -> Comment:
        """Insert a new comment."""
        stmt = insert(comments_table).values(**comment_to_dict(comment))
        async with store_errors(self.session, "comment.save"):
            await self.session.execute(stmt)
            await self.session.flush()
        return comment

    async def count_by_post(self, post_id: PostId) -> int:
        """Count comments for a post, replies included."""
        stmt = (
            select(func.count())
            .select_from(comments_table)
            .where(comments_table.c.post_id == post_id)
        )
        async with store_errors(self.session, "comment.count_by_post"):
            result = await self.session.execute(stmt)
            return result.scalar_one()
