"""Vote routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Header
from pydantic import BaseModel

from discuss.application.usecase.vote import (
    CallerVoteResponse,
    CastVoteRequest,
    CastVoteResponse,
    CastVoteUseCase,
    GetCallerVoteUseCase,
    GetVoteCountUseCase,
    RemoveVoteRequest,
    RemoveVoteResponse,
    RemoveVoteUseCase,
    VoteCountResponse,
    VoteLookupRequest,
)
from discuss.domain.error import DomainError
from discuss.domain.service import JWTService
from discuss.domain.value import VoteTargetType, VoteValue
from discuss.interface.api.auth import optional_viewer, require_user
from discuss.interface.error import to_http_exception

router = APIRouter(prefix="/votes", tags=["votes"], route_class=DishkaRoute)


class CastVoteAPIRequest(BaseModel):
    """API request for casting a vote."""

    target_type: VoteTargetType
    target_id: int | str
    value: VoteValue  # 1 or -1


class RemoveVoteAPIRequest(BaseModel):
    """API request for removing a vote."""

    target_type: VoteTargetType
    target_id: int | str


@router.post("", response_model=CastVoteResponse)
async def cast_vote(
    request: CastVoteAPIRequest,
    cast_vote_use_case: FromDishka[CastVoteUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
    auth_token: str | None = Cookie(default=None),
) -> CastVoteResponse:
    """Vote on a post or comment.

    Voting again replaces the caller's previous vote on the target.
    Requires authentication.

    Args:
        request: Target and vote value
        cast_vote_use_case: Cast vote use case from DI
        jwt_service: JWT service for token verification (injected)
        authorization: Bearer token header
        auth_token: JWT token from cookie

    Returns:
        Stored vote and the target's new vote count

    Raises:
        HTTPException: If not authenticated, the ID is invalid, or the target is missing
    """
    payload = require_user(jwt_service, authorization, auth_token, "vote")

    try:
        use_case_request = CastVoteRequest(
            target_type=request.target_type,
            target_id=request.target_id,
            value=request.value,
            user_id=payload.user_id,
        )
        return await cast_vote_use_case.execute(use_case_request)
    except DomainError as e:
        raise to_http_exception(e, "cast vote")


@router.delete("", response_model=RemoveVoteResponse)
async def remove_vote(
    request: RemoveVoteAPIRequest,
    remove_vote_use_case: FromDishka[RemoveVoteUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
    auth_token: str | None = Cookie(default=None),
) -> RemoveVoteResponse:
    """Remove the caller's vote from a post or comment.

    Requires authentication.
    """
    payload = require_user(jwt_service, authorization, auth_token, "remove votes")

    try:
        use_case_request = RemoveVoteRequest(
            target_type=request.target_type,
            target_id=request.target_id,
            user_id=payload.user_id,
        )
        return await remove_vote_use_case.execute(use_case_request)
    except DomainError as e:
        raise to_http_exception(e, "remove vote")


@router.get("/user/{target_type}/{target_id}", response_model=CallerVoteResponse)
async def get_caller_vote(
    target_type: VoteTargetType,
    target_id: str,
    get_caller_vote_use_case: FromDishka[GetCallerVoteUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
    auth_token: str | None = Cookie(default=None),
) -> CallerVoteResponse:
    """Get the caller's vote on a target, null when anonymous or not voted."""
    viewer_id = optional_viewer(jwt_service, authorization, auth_token)

    try:
        request = VoteLookupRequest(
            target_type=target_type, target_id=target_id, user_id=viewer_id
        )
        return await get_caller_vote_use_case.execute(request)
    except DomainError as e:
        raise to_http_exception(e, "load vote")


@router.get("/{target_type}/{target_id}", response_model=VoteCountResponse)
async def get_vote_count(
    target_type: VoteTargetType,
    target_id: str,
    get_vote_count_use_case: FromDishka[GetVoteCountUseCase],
) -> VoteCountResponse:
    """Get the vote sum of a post or comment."""
    try:
        request = VoteLookupRequest(target_type=target_type, target_id=target_id)
        return await get_vote_count_use_case.execute(request)
    except DomainError as e:
        raise to_http_exception(e, "load vote count")
