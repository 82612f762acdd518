"""Base service class for domain services."""

from collections.abc import Awaitable, Callable
from typing import TypeVar

from quill.util.retry import RetryPolicy, retry_transient

T = TypeVar("T")


class Service:
    """Base class for all domain services.

    Domain services contain business logic that doesn't naturally belong
    to a single entity or spans multiple entities/aggregates.

    Services that touch the store run each public operation through
    ``_with_retry`` so transient store failures are retried uniformly.
    """

    retry_policy: RetryPolicy = RetryPolicy()

    async def _with_retry(self, name: str, operation: Callable[[], Awaitable[T]]) -> T:
        return await retry_transient(operation, self.retry_policy, name)
