"""Comment routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Query, status
from pydantic import AliasChoices, BaseModel, Field

from quill.application.usecase.comment import (
    CommentItem,
    CreateCommentRequest,
    CreateCommentUseCase,
    GetCommentsRequest,
    GetCommentsResponse,
    GetCommentsUseCase,
)
from quill.domain.error import DomainError
from quill.interface.error import to_http_exception

router = APIRouter(prefix="/comments", tags=["comments"], route_class=DishkaRoute)


class CreateCommentAPIRequest(BaseModel):
    """API request for creating a comment.

    Accepts camelCase (``postId``) as sent by the web client, or snake_case.
    """

    post_id: str = Field(validation_alias=AliasChoices("postId", "post_id"))
    content: str
    parent_id: str | None = Field(
        default=None, validation_alias=AliasChoices("parentId", "parent_id")
    )


@router.get("", response_model=GetCommentsResponse)
async def get_comments(
    get_comments_use_case: FromDishka[GetCommentsUseCase],
    post_id: str = Query(alias="postId"),
) -> GetCommentsResponse:
    """Get a post's comments as a two-tier thread.

    Top-level comments newest first, replies under each oldest first.

    Raises:
        HTTPException: 404 if the post does not exist
    """
    try:
        return await get_comments_use_case.execute(GetCommentsRequest(post_id=post_id))
    except DomainError as e:
        raise to_http_exception(e)


@router.post("", response_model=CommentItem, status_code=status.HTTP_201_CREATED)
async def create_comment(
    request: CreateCommentAPIRequest,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
    auth_token: str | None = Cookie(default=None),
) -> CommentItem:
    """Comment on a post, or reply to a top-level comment.

    Requires authentication.

    Raises:
        HTTPException: 401 anonymous, 404 unknown post, 400 blank content or
            invalid parent
    """
    try:
        return await create_comment_use_case.execute(
            CreateCommentRequest(
                post_id=request.post_id,
                content=request.content,
                parent_id=request.parent_id,
                auth_token=auth_token,
            )
        )
    except DomainError as e:
        raise to_http_exception(e)
