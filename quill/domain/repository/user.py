"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from quill.domain.model.user import User
from quill.domain.value import UserId
from quill.domain.value.types import Handle


class UserRepository(ABC):
    """Read access to users owned by the identity system."""

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: The user's unique identifier

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_handle(self, handle: Handle) -> Optional[User]:
        """Find a user by handle.

        Args:
            handle: The user's handle

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Save a user (create or update).

        Only used by seeding and tests; the engagement layer never writes users.
        """
        pass
