"""Vote lookup use cases."""

from pydantic import BaseModel

from discuss.domain.service import VoteAggregator, VoteService
from discuss.domain.value import UserId, VoteTargetType, parse_identifier


class VoteLookupRequest(BaseModel):
    """Vote lookup request for a single target."""

    target_type: VoteTargetType
    target_id: str
    user_id: str | None = None


class VoteCountResponse(BaseModel):
    """Vote sum of a target."""

    vote_count: int


class CallerVoteResponse(BaseModel):
    """The requesting user's vote on a target."""

    vote: int | None  # -1, 1 or null


class GetVoteCountUseCase:
    """Use case for reading the vote sum of a post or comment."""

    def __init__(
        self, vote_service: VoteService, vote_aggregator: VoteAggregator
    ) -> None:
        self.vote_service = vote_service
        self.vote_aggregator = vote_aggregator

    async def execute(self, request: VoteLookupRequest) -> VoteCountResponse:
        """Execute vote count lookup.

        Raises:
            InvalidIdentifierError: If the target ID is not a positive integer
            NotFoundError: If the target doesn't exist
        """
        target_id = parse_identifier(request.target_id, request.target_type.value)
        await self.vote_service.resolve_post_id(request.target_type, target_id)
        vote_counts = await self.vote_aggregator.aggregate_votes(
            request.target_type, [target_id]
        )
        return VoteCountResponse(vote_count=vote_counts.get(target_id, 0))


class GetCallerVoteUseCase:
    """Use case for reading the requesting user's vote on a post or comment."""

    def __init__(self, vote_aggregator: VoteAggregator) -> None:
        self.vote_aggregator = vote_aggregator

    async def execute(self, request: VoteLookupRequest) -> CallerVoteResponse:
        """Execute caller vote lookup.

        Raises:
            InvalidIdentifierError: If the target ID is not a positive integer
        """
        target_id = parse_identifier(request.target_id, request.target_type.value)
        if not request.user_id:
            return CallerVoteResponse(vote=None)
        values = await self.vote_aggregator.caller_votes(
            UserId(request.user_id), request.target_type, [target_id]
        )
        value = values.get(target_id)
        return CallerVoteResponse(vote=int(value) if value is not None else None)
