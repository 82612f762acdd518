"""Post use cases."""

from .get_post_engagement import (
    GetPostEngagementRequest,
    GetPostEngagementResponse,
    GetPostEngagementUseCase,
)

__all__ = [
    "GetPostEngagementRequest",
    "GetPostEngagementResponse",
    "GetPostEngagementUseCase",
]
