"""Comment routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Header, Query, status
from pydantic import BaseModel, Field

from discuss.application.usecase.comment import (
    CommentNodeItem,
    CreateCommentRequest,
    CreateCommentResponse,
    CreateCommentUseCase,
    DeleteCommentRequest,
    DeleteCommentResponse,
    DeleteCommentUseCase,
    GetCommentRequest,
    GetCommentTreeRequest,
    GetCommentTreeResponse,
    GetCommentTreeUseCase,
    GetCommentUseCase,
    SearchCommentsRequest,
    SearchCommentsResponse,
    SearchCommentsUseCase,
    UpdateCommentRequest,
    UpdateCommentResponse,
    UpdateCommentUseCase,
)
from discuss.domain.error import DomainError
from discuss.domain.service import JWTService
from discuss.interface.api.auth import optional_viewer, require_user
from discuss.interface.error import to_http_exception

router = APIRouter(prefix="/posts", tags=["comments"], route_class=DishkaRoute)

# Single comment threads live outside the post prefix
comment_router = APIRouter(prefix="/comments", tags=["comments"], route_class=DishkaRoute)


class CreateCommentAPIRequest(BaseModel):
    """API request for creating a comment."""

    body: str = Field(min_length=1, max_length=10000)
    parent_comment_id: int | str | None = None  # Parent comment ID for replies


@router.post(
    "/{post_id}/comments",
    response_model=CreateCommentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_comment(
    post_id: str,
    request: CreateCommentAPIRequest,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
    auth_token: str | None = Cookie(default=None),
) -> CreateCommentResponse:
    """Create a comment on a post or reply to another comment.

    Requires authentication.

    Args:
        post_id: Post ID
        request: Comment creation data
        create_comment_use_case: Create comment use case from DI
        jwt_service: JWT service for token verification (injected)
        authorization: Bearer token header
        auth_token: JWT token from cookie

    Returns:
        Created comment details

    Raises:
        HTTPException: If not authenticated or validation fails
    """
    payload = require_user(jwt_service, authorization, auth_token, "create comments")

    try:
        use_case_request = CreateCommentRequest(
            post_id=post_id,
            body=request.body,
            author_id=payload.user_id,
            author_username=payload.username,
            parent_comment_id=request.parent_comment_id,
        )
        return await create_comment_use_case.execute(use_case_request)
    except DomainError as e:
        raise to_http_exception(e, "create comment")


@router.get("/{post_id}/comments", response_model=GetCommentTreeResponse)
async def get_comments(
    post_id: str,
    get_comment_tree_use_case: FromDishka[GetCommentTreeUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
    auth_token: str | None = Cookie(default=None),
) -> GetCommentTreeResponse:
    """Get the newest top-level comments of a post with their direct replies.

    If authenticated, includes the caller's vote on each comment.

    Args:
        post_id: Post ID
        get_comment_tree_use_case: Comment tree use case from DI
        jwt_service: JWT service for token verification (injected)
        authorization: Bearer token header (optional)
        auth_token: JWT token from cookie (optional)

    Returns:
        Comment forest, newest thread first
    """
    viewer_id = optional_viewer(jwt_service, authorization, auth_token)

    try:
        request = GetCommentTreeRequest(post_id=post_id, viewer_id=viewer_id)
        return await get_comment_tree_use_case.execute(request)
    except DomainError as e:
        raise to_http_exception(e, "load comments")


class UpdateCommentAPIRequest(BaseModel):
    """API request for updating a comment."""

    body: str = Field(min_length=1, max_length=10000)


@router.patch("/{post_id}/comments/{comment_id}", response_model=UpdateCommentResponse)
async def update_comment(
    post_id: str,
    comment_id: str,
    request: UpdateCommentAPIRequest,
    update_comment_use_case: FromDishka[UpdateCommentUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
    auth_token: str | None = Cookie(default=None),
) -> UpdateCommentResponse:
    """Update a comment's body.

    Only the comment author can edit.

    Args:
        post_id: Post ID
        comment_id: Comment ID
        request: Update data (new body)
        update_comment_use_case: Update comment use case from DI
        jwt_service: JWT service for token verification (injected)
        authorization: Bearer token header
        auth_token: JWT token from cookie

    Returns:
        Updated comment details

    Raises:
        HTTPException: If not authenticated, not authorized, or validation fails
    """
    payload = require_user(jwt_service, authorization, auth_token, "edit comments")

    try:
        use_case_request = UpdateCommentRequest(
            comment_id=comment_id,
            post_id=post_id,
            user_id=payload.user_id,
            body=request.body,
        )
        return await update_comment_use_case.execute(use_case_request)
    except DomainError as e:
        raise to_http_exception(e, "update comment")


@router.delete(
    "/{post_id}/comments/{comment_id}", response_model=DeleteCommentResponse
)
async def delete_comment(
    post_id: str,
    comment_id: str,
    delete_comment_use_case: FromDishka[DeleteCommentUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
    auth_token: str | None = Cookie(default=None),
) -> DeleteCommentResponse:
    """Delete a comment and all of its replies.

    Only the comment author can delete.
    """
    payload = require_user(jwt_service, authorization, auth_token, "delete comments")

    try:
        use_case_request = DeleteCommentRequest(
            comment_id=comment_id,
            post_id=post_id,
            user_id=payload.user_id,
        )
        result = await delete_comment_use_case.execute(use_case_request)
        logfire.info("Comment deleted", comment_id=comment_id, post_id=post_id)
        return result
    except DomainError as e:
        raise to_http_exception(e, "delete comment")


@comment_router.get("/search", response_model=SearchCommentsResponse)
async def search_comments(
    search_comments_use_case: FromDishka[SearchCommentsUseCase],
    jwt_service: FromDishka[JWTService],
    q: str = Query(default=""),
    page: int = Query(default=1, ge=1),
    limit: int | None = Query(default=None, ge=1),
    authorization: str | None = Header(default=None),
    auth_token: str | None = Cookie(default=None),
) -> SearchCommentsResponse:
    """Search comment bodies across all posts, newest first.

    If authenticated, includes the caller's vote on each match.

    Args:
        search_comments_use_case: Search use case from DI
        jwt_service: JWT service for token verification (injected)
        q: Text to search for (case-insensitive)
        page: 1-based page number
        limit: Page size (capped by configuration)
        authorization: Bearer token header (optional)
        auth_token: JWT token from cookie (optional)

    Returns:
        Matching comments and pagination info
    """
    viewer_id = optional_viewer(jwt_service, authorization, auth_token)

    try:
        request = SearchCommentsRequest(
            query=q, page=page, limit=limit, viewer_id=viewer_id
        )
        return await search_comments_use_case.execute(request)
    except DomainError as e:
        raise to_http_exception(e, "search comments")


@comment_router.get("/{comment_id}", response_model=CommentNodeItem)
async def get_comment(
    comment_id: str,
    get_comment_use_case: FromDishka[GetCommentUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
    auth_token: str | None = Cookie(default=None),
) -> CommentNodeItem:
    """Get a single comment with its direct replies."""
    viewer_id = optional_viewer(jwt_service, authorization, auth_token)

    try:
        request = GetCommentRequest(comment_id=comment_id, viewer_id=viewer_id)
        return await get_comment_use_case.execute(request)
    except DomainError as e:
        raise to_http_exception(e, "load comment")
