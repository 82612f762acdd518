"""Engagement widget controller.

Drives one ``EngagementState`` against the server: optimistic toggles,
mount-time status sync, and teardown.
"""

from collections.abc import Callable

import logfire

from quill.adapter.engagement.client import EngagementClient
from quill.adapter.engagement.state import (
    EngagementEvent,
    EngagementState,
    transition,
)
from quill.adapter.error import (
    EngagementClosedError,
    ToggleInProgressError,
)
from quill.domain.value import RelationKind


class EngagementToggle:
    """Like/bookmark/follow button state for one target.

    Instances are independent; there is no lock shared across targets or
    kinds. The pending phase is entered before the first await, so a second
    ``toggle()`` on the same instance fails fast with ToggleInProgressError.
    """

    def __init__(
        self,
        client: EngagementClient,
        kind: RelationKind,
        target: str,
        active: bool = False,
        count: int = 0,
        on_error: Callable[[str], None] | None = None,
    ) -> None:
        """Initialize the toggle.

        Args:
            client: Engagement API client
            kind: Relation kind
            target: Post UUID, or user handle for follow
            active: Initially displayed state (e.g. server-rendered)
            count: Initially displayed count
            on_error: Called with a message whenever a toggle fails
        """
        self.client = client
        self.kind = kind
        self.target = target
        self.on_error = on_error
        self._state = EngagementState.idle(active, count)
        self._alive = True

    @property
    def state(self) -> EngagementState:
        return self._state

    @property
    def active(self) -> bool:
        return self._state.active

    @property
    def count(self) -> int:
        return self._state.count

    @property
    def alive(self) -> bool:
        return self._alive

    def close(self) -> None:
        """Tear down; responses arriving afterwards are discarded."""
        self._alive = False

    async def refresh(self) -> EngagementState:
        """Sync with the server's current status (mount-time fetch).

        A response that arrives after ``close()`` or while a toggle is in
        flight is discarded.

        Raises:
            EngagementRequestError: If the status request fails
        """
        if not self._alive:
            return self._state

        status = await self.client.get_status(self.kind, self.target)

        if not self._alive:
            logfire.debug("Discarding status for closed toggle", target=self.target)
            return self._state
        if self._state.pending:
            logfire.debug("Discarding status during pending toggle", target=self.target)
            return self._state

        self._state = transition(self._state, EngagementEvent.SYNC, status)
        return self._state

    async def toggle(self) -> EngagementState:
        """Flip the relation optimistically and reconcile with the server.

        Returns:
            The reconciled state

        Raises:
            EngagementClosedError: If the toggle was closed
            ToggleInProgressError: If a toggle is already in flight
            EngagementRequestError: If the request failed (state reverted)
        """
        if not self._alive:
            raise EngagementClosedError(f"{self.kind.value} toggle is closed")
        if self._state.pending:
            raise ToggleInProgressError(
                f"{self.kind.value} on {self.target} is already in progress"
            )

        self._state = transition(self._state, EngagementEvent.TOGGLE)
        desired = self._state.active

        try:
            status = await self.client.set_active(self.kind, self.target, desired)
        except Exception as e:
            self._revert(str(e) or type(e).__name__)
            raise
        except BaseException:
            # Cancelled: roll back the display without notifying
            self._revert(None)
            raise

        if self._alive:
            self._state = transition(self._state, EngagementEvent.SUCCEED, status)
        return self._state

    def _revert(self, message: str | None) -> None:
        """Return to the pre-action state and report ``message`` if given."""
        if not self._alive:
            return

        self._state = transition(self._state, EngagementEvent.FAIL)
        logfire.warn(
            "Engagement toggle reverted",
            kind=self.kind.value,
            target=self.target,
            error=message,
        )
        if message is not None and self.on_error is not None:
            self.on_error(message)
