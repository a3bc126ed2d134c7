"""Post routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Header

from discuss.application.usecase.post import (
    GetPostRequest,
    GetPostSummaryRequest,
    GetPostSummaryUseCase,
    GetPostUseCase,
    PostDetailResponse,
)
from discuss.domain.error import DomainError
from discuss.domain.service import JWTService
from discuss.interface.api.auth import optional_viewer
from discuss.interface.error import to_http_exception

router = APIRouter(prefix="/posts", tags=["posts"], route_class=DishkaRoute)


@router.get("/{post_id}", response_model=PostDetailResponse)
async def get_post(
    post_id: str,
    get_post_use_case: FromDishka[GetPostUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
    auth_token: str | None = Cookie(default=None),
) -> PostDetailResponse:
    """Get a post with its vote count and full comment tree.

    If authenticated, includes the caller's vote on the post and its comments.

    Args:
        post_id: Post ID
        get_post_use_case: Get post use case from DI
        jwt_service: JWT service for token verification (injected)
        authorization: Bearer token header (optional)
        auth_token: JWT token from cookie (optional)

    Returns:
        Post details

    Raises:
        HTTPException: If the ID is invalid or the post doesn't exist
    """
    viewer_id = optional_viewer(jwt_service, authorization, auth_token)

    try:
        request = GetPostRequest(post_id=post_id, viewer_id=viewer_id)
        return await get_post_use_case.execute(request)
    except DomainError as e:
        raise to_http_exception(e, "load post")


@router.get("/{post_id}/summary", response_model=PostDetailResponse)
async def get_post_summary(
    post_id: str,
    get_post_summary_use_case: FromDishka[GetPostSummaryUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
    auth_token: str | None = Cookie(default=None),
) -> PostDetailResponse:
    """Get a post with an up-to-date AI summary of its discussion.

    The summary is regenerated when it is missing, older than a day, or
    enough comments were added since it was written. Generation failures
    fall back to the stored summary.
    """
    viewer_id = optional_viewer(jwt_service, authorization, auth_token)

    try:
        request = GetPostSummaryRequest(post_id=post_id, viewer_id=viewer_id)
        return await get_post_summary_use_case.execute(request)
    except DomainError as e:
        raise to_http_exception(e, "load post summary")
