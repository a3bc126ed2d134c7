"""Update comment use case."""

from datetime import datetime

from pydantic import BaseModel

from discuss.domain.error import NotFoundError
from discuss.domain.repository import UnitOfWork
from discuss.domain.service import CommentForestService, CommentService, VoteAggregator
from discuss.domain.value import CommentId, PostId, UserId, VoteTargetType, parse_identifier


class UpdateCommentRequest(BaseModel):
    """Update comment request."""

    comment_id: str  # Raw path segment
    post_id: str  # Raw path segment (for validation)
    user_id: str  # Current user ID (must be author)
    body: str  # New text content (required, cannot be empty)


class UpdateCommentResponse(BaseModel):
    """Update comment response."""

    id: int
    post_id: int
    author_id: str
    author_username: str
    body: str
    parent_comment_id: int | None
    created_at: datetime
    updated_at: datetime
    vote_count: int
    user_vote: int | None


class UpdateCommentUseCase:
    """Use case for updating a comment's text content."""

    def __init__(
        self,
        comment_service: CommentService,
        vote_aggregator: VoteAggregator,
        forest_service: CommentForestService,
        unit_of_work: UnitOfWork,
    ) -> None:
        """Initialize update comment use case.

        Args:
            comment_service: Comment service
            vote_aggregator: Vote data of the updated comment
            forest_service: Used to invalidate the post's cached forests
            unit_of_work: Commits the edit before invalidation
        """
        self.comment_service = comment_service
        self.vote_aggregator = vote_aggregator
        self.forest_service = forest_service
        self.unit_of_work = unit_of_work

    async def execute(self, request: UpdateCommentRequest) -> UpdateCommentResponse:
        """Execute update comment flow.

        Args:
            request: Comment ID, post ID, user ID and new text

        Returns:
            Updated comment details

        Raises:
            InvalidIdentifierError: If an ID is not a positive integer
            NotFoundError: If the comment doesn't exist on this post
            NotAuthorizedError: If user doesn't own the comment
        """
        comment_id = CommentId(parse_identifier(request.comment_id, "comment"))
        post_id = PostId(parse_identifier(request.post_id, "post"))
        user_id = UserId(request.user_id)

        comment = await self.comment_service.get_comment_by_id(comment_id)
        if comment is None or comment.post_id != post_id:
            raise NotFoundError("Comment", request.comment_id)

        updated = await self.comment_service.update_body(comment_id, user_id, request.body)
        await self.unit_of_work.commit()
        await self.forest_service.invalidate(post_id)

        votes = await self.vote_aggregator.aggregate(
            VoteTargetType.COMMENT, [comment_id], user_id
        )
        user_vote = votes.caller_votes.get(comment_id)

        return UpdateCommentResponse(
            id=updated.id,
            post_id=updated.post_id,
            author_id=str(updated.author_id),
            author_username=updated.author_username.root,
            body=updated.body,
            parent_comment_id=updated.parent_comment_id,
            created_at=updated.created_at,
            updated_at=updated.updated_at,
            vote_count=votes.vote_counts.get(comment_id, 0),
            user_vote=int(user_vote) if user_vote is not None else None,
        )
