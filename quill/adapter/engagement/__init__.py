"""Client-side engagement: HTTP client and optimistic toggle state."""

from .client import EngagementClient, RemoteStatus
from .state import (
    EngagementEvent,
    EngagementPhase,
    EngagementState,
    InvalidTransitionError,
    transition,
)
from .toggle import EngagementToggle

__all__ = [
    "EngagementClient",
    "EngagementEvent",
    "EngagementPhase",
    "EngagementState",
    "EngagementToggle",
    "InvalidTransitionError",
    "RemoteStatus",
    "transition",
]
