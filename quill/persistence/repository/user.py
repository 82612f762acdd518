"""PostgreSQL implementation of User repository."""

from typing import Optional

from sqlalchemy import insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from quill.domain.model import User
from quill.domain.repository import UserRepository
from quill.domain.value import UserId
from quill.domain.value.types import Handle
from quill.persistence.errors import store_errors
from quill.persistence.mappers import row_to_user, user_to_dict
from quill.persistence.tables import users_table


class PostgresUserRepository(UserRepository):
    """PostgreSQL implementation of UserRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        stmt = select(users_table).where(users_table.c.id == user_id)
        async with store_errors(self.session, "user.find_by_id"):
            result = await self.session.execute(stmt)
            row = result.fetchone()
        return row_to_user(row._asdict()) if row else None

    async def find_by_handle(self, handle: Handle) -> Optional[User]:
        """Find a user by handle."""
        stmt = select(users_table).where(users_table.c.handle == handle.root)
        async with store_errors(self.session, "user.find_by_handle"):
            result = await self.session.execute(stmt)
            row = result.fetchone()
        return row_to_user(row._asdict()) if row else None

    async def save(self, user: User) -> User:
        """Insert a new user."""
        stmt = insert(users_table).values(**user_to_dict(user))
        async with store_errors(self.session, "user.save"):
            await self.session.execute(stmt)
            await self.session.flush()
        return user
