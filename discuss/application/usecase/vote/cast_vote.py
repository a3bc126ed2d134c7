"""Cast vote use case."""

from datetime import datetime

from pydantic import BaseModel

from discuss.domain.repository import UnitOfWork
from discuss.domain.service import CommentForestService, VoteAggregator, VoteService
from discuss.domain.value import UserId, VoteTargetType, VoteValue, parse_identifier


class CastVoteRequest(BaseModel):
    """Cast vote request."""

    target_type: VoteTargetType
    target_id: str | int
    value: VoteValue
    user_id: str  # User ID from authenticated user


class VoteItem(BaseModel):
    """Stored vote."""

    user_id: str
    target_type: VoteTargetType
    target_id: int
    value: int
    created_at: datetime


class CastVoteResponse(BaseModel):
    """Cast vote response."""

    vote: VoteItem
    vote_count: int


class CastVoteUseCase:
    """Use case for voting on a post or comment.

    Casting again replaces the user's previous vote on the target.
    """

    def __init__(
        self,
        vote_service: VoteService,
        vote_aggregator: VoteAggregator,
        forest_service: CommentForestService,
        unit_of_work: UnitOfWork,
    ) -> None:
        """Initialize cast vote use case.

        Args:
            vote_service: Vote domain service
            vote_aggregator: Reads the new vote sum
            forest_service: Used to invalidate cached forests after comment votes
            unit_of_work: Commits the vote before invalidation
        """
        self.vote_service = vote_service
        self.vote_aggregator = vote_aggregator
        self.forest_service = forest_service
        self.unit_of_work = unit_of_work

    async def execute(self, request: CastVoteRequest) -> CastVoteResponse:
        """Execute cast vote flow.

        Args:
            request: Cast vote request

        Returns:
            Stored vote and the target's new vote sum

        Raises:
            InvalidIdentifierError: If the target ID is not a positive integer
            NotFoundError: If the target doesn't exist
        """
        target_id = parse_identifier(request.target_id, request.target_type.value)
        post_id = await self.vote_service.resolve_post_id(request.target_type, target_id)

        vote = await self.vote_service.cast_vote(
            user_id=UserId(request.user_id),
            target_type=request.target_type,
            target_id=target_id,
            value=request.value,
        )

        await self.unit_of_work.commit()
        if request.target_type == VoteTargetType.COMMENT:
            await self.forest_service.invalidate(post_id)

        vote_counts = await self.vote_aggregator.aggregate_votes(
            request.target_type, [target_id]
        )

        return CastVoteResponse(
            vote=VoteItem(
                user_id=str(vote.user_id),
                target_type=vote.target_type,
                target_id=vote.target_id,
                value=int(vote.value),
                created_at=vote.created_at,
            ),
            vote_count=vote_counts.get(target_id, 0),
        )
