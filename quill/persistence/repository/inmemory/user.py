"""In-memory user repository for testing."""

from typing import Optional

from quill.domain.error import ConflictError
from quill.domain.model import User
from quill.domain.repository import UserRepository
from quill.domain.value import UserId
from quill.domain.value.types import Handle

from .store import InMemoryStore


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self, store: InMemoryStore | None = None) -> None:
        self._store = store if store is not None else InMemoryStore()

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        return self._store.users.get(user_id)

    async def find_by_handle(self, handle: Handle) -> Optional[User]:
        """Find a user by handle."""
        for user in self._store.users.values():
            if user.handle == handle:
                return user
        return None

    async def save(self, user: User) -> User:
        """Insert a user.

        Raises:
            ConflictError: If the ID or handle is taken
        """
        if user.id in self._store.users or await self.find_by_handle(user.handle):
            raise ConflictError(f"Duplicate user: {user.handle.root}")
        self._store.users[user.id] = user
        return user
