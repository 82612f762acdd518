"""Post routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie

from quill.application.usecase.post import (
    GetPostEngagementRequest,
    GetPostEngagementResponse,
    GetPostEngagementUseCase,
)
from quill.domain.error import DomainError
from quill.interface.error import to_http_exception

router = APIRouter(prefix="/posts", tags=["posts"], route_class=DishkaRoute)


@router.get("/{post_id}/engagement", response_model=GetPostEngagementResponse)
async def get_post_engagement(
    post_id: str,
    use_case: FromDishka[GetPostEngagementUseCase],
    auth_token: str | None = Cookie(default=None),
) -> GetPostEngagementResponse:
    """Like, bookmark and comment state of a post in one request.

    Used by post pages to seed their engagement widgets on mount.
    """
    try:
        return await use_case.execute(
            GetPostEngagementRequest(post_id=post_id, auth_token=auth_token)
        )
    except DomainError as e:
        raise to_http_exception(e)
