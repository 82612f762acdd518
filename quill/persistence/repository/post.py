"""PostgreSQL implementation of Post repository."""

from typing import Optional

from sqlalchemy import insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from quill.domain.model import Post
from quill.domain.repository import PostRepository
from quill.domain.value import PostId
from quill.persistence.errors import store_errors
from quill.persistence.mappers import post_to_dict, row_to_post
from quill.persistence.tables import posts_table


class PostgresPostRepository(PostRepository):
    """PostgreSQL implementation of PostRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        stmt = select(posts_table).where(posts_table.c.id == post_id)
        async with store_errors(self.session, "post.find_by_id"):
            result = await self.session.execute(stmt)
            row = result.fetchone()
        return row_to_post(row._asdict()) if row else None

    async def save(self, post: Post) -> Post:
        """Insert a new post."""
        stmt = insert(posts_table).values(**post_to_dict(post))
        async with store_errors(self.session, "post.save"):
            await self.session.execute(stmt)
            await self.session.flush()
        return post
