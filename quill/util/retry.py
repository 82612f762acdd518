"""Bounded retry for transient store failures.

Repositories raise TransientStoreError (after rolling back their session)
when the database connection drops. Domain services wrap each whole operation
so a retry replays it from the start in a fresh transaction.
"""

import asyncio
from collections.abc import Awaitable, Callable
from typing import TypeVar

import logfire
from pydantic import BaseModel, Field

from quill.config import DatabaseSettings
from quill.domain.error import TransientStoreError

T = TypeVar("T")


class RetryPolicy(BaseModel):
    """How often and how patiently to retry a transient failure."""

    attempts: int = Field(default=3, ge=1)
    base_delay: float = Field(default=1.0, ge=0)

    @classmethod
    def from_settings(cls, settings: DatabaseSettings) -> "RetryPolicy":
        """Build the policy from database settings."""
        return cls(
            attempts=settings.retry_attempts,
            base_delay=settings.retry_base_delay,
        )

    def delay_for(self, attempt: int) -> float:
        """Delay before the retry following ``attempt`` (1-based)."""
        return self.base_delay * attempt


async def retry_transient(
    operation: Callable[[], Awaitable[T]],
    policy: RetryPolicy,
    name: str,
) -> T:
    """Run an operation, retrying transient store errors.

    Only TransientStoreError is retried; every other error propagates
    immediately.

    Args:
        operation: Zero-argument coroutine factory
        policy: Retry policy
        name: Operation name for logs

    Returns:
        The operation's result

    Raises:
        TransientStoreError: If every attempt failed
    """
    attempt = 1
    while True:
        try:
            return await operation()
        except TransientStoreError as e:
            if attempt >= policy.attempts:
                logfire.error(
                    "Store operation failed after retries",
                    operation=name,
                    attempts=attempt,
                    error=str(e),
                )
                raise

            delay = policy.delay_for(attempt)
            logfire.warn(
                "Transient store error, retrying",
                operation=name,
                attempt=attempt,
                delay=delay,
                error=str(e),
            )
            await asyncio.sleep(delay)
            attempt += 1
