"""Remove vote use case."""

from pydantic import BaseModel

from discuss.domain.repository import UnitOfWork
from discuss.domain.service import CommentForestService, VoteAggregator, VoteService
from discuss.domain.value import UserId, VoteTargetType, parse_identifier


class RemoveVoteRequest(BaseModel):
    """Remove vote request."""

    target_type: VoteTargetType
    target_id: str | int
    user_id: str  # User ID from authenticated user


class RemoveVoteResponse(BaseModel):
    """Remove vote response."""

    success: bool
    vote_count: int


class RemoveVoteUseCase:
    """Use case for removing a vote from a post or comment."""

    def __init__(
        self,
        vote_service: VoteService,
        vote_aggregator: VoteAggregator,
        forest_service: CommentForestService,
        unit_of_work: UnitOfWork,
    ) -> None:
        """Initialize remove vote use case.

        Args:
            vote_service: Vote domain service
            vote_aggregator: Reads the new vote sum
            forest_service: Used to invalidate cached forests after comment votes
            unit_of_work: Commits the removal before invalidation
        """
        self.vote_service = vote_service
        self.vote_aggregator = vote_aggregator
        self.forest_service = forest_service
        self.unit_of_work = unit_of_work

    async def execute(self, request: RemoveVoteRequest) -> RemoveVoteResponse:
        """Execute remove vote flow.

        Args:
            request: Remove vote request

        Returns:
            Whether a vote was removed and the target's new vote sum

        Raises:
            InvalidIdentifierError: If the target ID is not a positive integer
            NotFoundError: If the target doesn't exist
        """
        target_id = parse_identifier(request.target_id, request.target_type.value)
        post_id = await self.vote_service.resolve_post_id(request.target_type, target_id)

        removed = await self.vote_service.remove_vote(
            UserId(request.user_id), request.target_type, target_id
        )

        if removed:
            await self.unit_of_work.commit()
            if request.target_type == VoteTargetType.COMMENT:
                await self.forest_service.invalidate(post_id)

        vote_counts = await self.vote_aggregator.aggregate_votes(
            request.target_type, [target_id]
        )
        return RemoveVoteResponse(
            success=removed, vote_count=vote_counts.get(target_id, 0)
        )
