"""User routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie

from quill.application.usecase.user import (
    GetFollowStatsRequest,
    GetFollowStatsResponse,
    GetFollowStatsUseCase,
)
from quill.domain.error import DomainError, NotFoundError
from quill.domain.value.types import Handle
from quill.interface.error import to_http_exception

router = APIRouter(prefix="/users", tags=["users"], route_class=DishkaRoute)


@router.get("/{handle}/follow-stats", response_model=GetFollowStatsResponse)
async def get_follow_stats(
    handle: str,
    use_case: FromDishka[GetFollowStatsUseCase],
    auth_token: str | None = Cookie(default=None),
) -> GetFollowStatsResponse:
    """Follower and following counts for a profile.

    ``is_following`` reflects the current user, false when anonymous.

    Example:
        GET /users/alice/follow-stats

        Response:
        {"handle": "alice", "followers": 12, "following": 3, "is_following": true}
    """
    try:
        validated = Handle(handle)
    except ValueError:
        raise to_http_exception(NotFoundError("User", handle))

    try:
        return await use_case.execute(
            GetFollowStatsRequest(handle=validated, auth_token=auth_token)
        )
    except DomainError as e:
        raise to_http_exception(e)
