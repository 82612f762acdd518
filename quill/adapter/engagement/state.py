"""Optimistic engagement state machine.

One machine per displayed relation instance (kind + target). The display
flips immediately on toggle, then either snaps to the server's answer or
reverts to the exact pre-action state. Transitions are a lookup table keyed
by ``(phase, event)``; pairs missing from the table are illegal, which makes
a second toggle while one is in flight unrepresentable.
"""

from collections.abc import Callable
from dataclasses import dataclass, replace
from enum import Enum

from quill.adapter.engagement.client import RemoteStatus


class EngagementPhase(str, Enum):
    """Where the instance is in its request cycle."""

    IDLE_INACTIVE = "idle_inactive"
    IDLE_ACTIVE = "idle_active"
    PENDING = "pending"

    @classmethod
    def idle(cls, active: bool) -> "EngagementPhase":
        return cls.IDLE_ACTIVE if active else cls.IDLE_INACTIVE


class EngagementEvent(str, Enum):
    """Inputs to the state machine."""

    TOGGLE = "toggle"  # user action
    SUCCEED = "succeed"  # server confirmed a toggle
    FAIL = "fail"  # toggle request failed
    SYNC = "sync"  # status fetched on mount/refresh


@dataclass(frozen=True)
class EngagementState:
    """Displayed state of one relation instance.

    While pending, ``previous`` holds the pre-action state to revert to.
    """

    phase: EngagementPhase
    active: bool
    count: int
    previous: "EngagementState | None" = None

    @classmethod
    def idle(cls, active: bool, count: int) -> "EngagementState":
        return cls(phase=EngagementPhase.idle(active), active=active, count=count)

    @property
    def pending(self) -> bool:
        return self.phase is EngagementPhase.PENDING


class InvalidTransitionError(Exception):
    """Event not allowed in the current phase."""

    def __init__(self, phase: EngagementPhase, event: EngagementEvent):
        self.phase = phase
        self.event = event
        super().__init__(f"Cannot {event.value} while {phase.value}")


Transition = Callable[[EngagementState, RemoteStatus | None], EngagementState]


def _optimistic_flip(state: EngagementState, _: RemoteStatus | None) -> EngagementState:
    active = not state.active
    # Provisional estimate only; replaced by the server count on success
    count = state.count + 1 if active else max(state.count - 1, 0)
    return EngagementState(
        phase=EngagementPhase.PENDING, active=active, count=count, previous=state
    )


def _confirm(state: EngagementState, server: RemoteStatus | None) -> EngagementState:
    if server is None:
        raise ValueError("Confirming a state requires a server status")
    return EngagementState.idle(server.active, server.count)


def _revert(state: EngagementState, _: RemoteStatus | None) -> EngagementState:
    if state.previous is None:
        raise InvalidTransitionError(state.phase, EngagementEvent.FAIL)
    return replace(state.previous, previous=None)


TRANSITIONS: dict[tuple[EngagementPhase, EngagementEvent], Transition] = {
    (EngagementPhase.IDLE_INACTIVE, EngagementEvent.TOGGLE): _optimistic_flip,
    (EngagementPhase.IDLE_ACTIVE, EngagementEvent.TOGGLE): _optimistic_flip,
    (EngagementPhase.IDLE_INACTIVE, EngagementEvent.SYNC): _confirm,
    (EngagementPhase.IDLE_ACTIVE, EngagementEvent.SYNC): _confirm,
    (EngagementPhase.PENDING, EngagementEvent.SUCCEED): _confirm,
    (EngagementPhase.PENDING, EngagementEvent.FAIL): _revert,
}


def transition(
    state: EngagementState,
    event: EngagementEvent,
    server: RemoteStatus | None = None,
) -> EngagementState:
    """Apply an event to a state.

    Args:
        state: Current state
        event: Event to apply
        server: Server-reported status (required for SUCCEED and SYNC)

    Returns:
        The next state

    Raises:
        InvalidTransitionError: If the event is not allowed in this phase
        ValueError: If SUCCEED or SYNC arrives without a server status
    """
    step = TRANSITIONS.get((state.phase, event))
    if step is None:
        raise InvalidTransitionError(state.phase, event)
    return step(state, server)
