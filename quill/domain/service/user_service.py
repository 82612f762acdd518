"""User domain service."""

import logfire

from quill.domain.error import NotFoundError
from quill.domain.model import User
from quill.domain.repository import UserRepository
from quill.domain.value import UserId
from quill.domain.value.types import Handle
from quill.util.retry import RetryPolicy

from .base import Service


class UserService(Service):
    """Domain service for user lookups."""

    def __init__(
        self,
        user_repository: UserRepository,
        retry_policy: RetryPolicy | None = None,
    ) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
            retry_policy: Retry policy for transient store errors
        """
        self.user_repository = user_repository
        if retry_policy is not None:
            self.retry_policy = retry_policy

    async def get_by_id(self, user_id: UserId) -> User:
        """Get user by ID.

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("user_service.get_by_id", user_id=str(user_id)):
            user = await self._with_retry(
                "user_service.get_by_id",
                lambda: self.user_repository.find_by_id(user_id),
            )
            if not user:
                logfire.warn("User not found", user_id=str(user_id))
                raise NotFoundError("User", str(user_id))
            return user

    async def get_by_handle(self, handle: Handle) -> User:
        """Get user by handle.

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("user_service.get_by_handle", handle=handle.root):
            user = await self._with_retry(
                "user_service.get_by_handle",
                lambda: self.user_repository.find_by_handle(handle),
            )
            if not user:
                logfire.warn("User not found", handle=handle.root)
                raise NotFoundError("User", handle.root)
            logfire.info("User found", handle=handle.root, user_id=str(user.id))
            return user

    async def exists(self, user_id: UserId) -> bool:
        """Whether a user with this ID exists."""
        user = await self.user_repository.find_by_id(user_id)
        return user is not None
