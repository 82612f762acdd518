"""User use cases."""

from .get_follow_stats import (
    GetFollowStatsRequest,
    GetFollowStatsResponse,
    GetFollowStatsUseCase,
)

__all__ = ["GetFollowStatsRequest", "GetFollowStatsResponse", "GetFollowStatsUseCase"]
