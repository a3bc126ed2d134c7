"""Get post use case."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from discuss.application.usecase.comment.node_item import CommentNodeItem, to_items
from discuss.domain.model.post import Post
from discuss.domain.service import (
    CommentForestService,
    CommentService,
    PostService,
    VoteAggregator,
)
from discuss.domain.value import PostId, UserId, VoteTargetType, parse_identifier


class GetPostRequest(BaseModel):
    """Get post request."""

    post_id: str  # Raw path segment
    viewer_id: str | None = None  # Current user ID (if authenticated)


class PostDetailResponse(BaseModel):
    """Post with its vote data, summary and full comment forest."""

    id: int
    title: str
    body: str | None
    post_type: str
    link_url: str | None
    author_id: str
    author_username: str
    created_at: datetime
    updated_at: datetime
    vote_count: int
    user_vote: int | None
    comment_count: int
    ai_summary: str | None
    comments: list[CommentNodeItem]


class GetPostUseCase:
    """Use case for the post detail view."""

    def __init__(
        self,
        post_service: PostService,
        comment_service: CommentService,
        vote_aggregator: VoteAggregator,
        forest_service: CommentForestService,
    ) -> None:
        """Initialize get post use case.

        Args:
            post_service: Post domain service
            comment_service: Comment domain service (comment count)
            vote_aggregator: Post vote sum and caller vote
            forest_service: Cached comment forest loading
        """
        self.post_service = post_service
        self.comment_service = comment_service
        self.vote_aggregator = vote_aggregator
        self.forest_service = forest_service

    async def execute(self, request: GetPostRequest) -> PostDetailResponse:
        """Execute get post flow.

        Args:
            request: Post ID and optional viewer

        Returns:
            Post detail with the stored summary

        Raises:
            InvalidIdentifierError: If the post ID is not a positive integer
            NotFoundError: If the post doesn't exist
            AggregationError: If vote aggregation fails
        """
        post_id = PostId(parse_identifier(request.post_id, "post"))
        viewer_id = UserId(request.viewer_id) if request.viewer_id else None

        post = await self.post_service.get_existing(post_id)
        return await self.build_detail(post, viewer_id)

    async def build_detail(
        self, post: Post, viewer_id: Optional[UserId]
    ) -> PostDetailResponse:
        """Assemble the detail response for an already loaded post."""
        votes = await self.vote_aggregator.aggregate(
            VoteTargetType.POST, [post.id], viewer_id
        )
        user_vote = votes.caller_votes.get(post.id)
        comment_count = await self.comment_service.count_for_post(post.id)
        forest = await self.forest_service.full_forest(post.id, viewer_id)

        return PostDetailResponse(
            id=post.id,
            title=post.title,
            body=post.body,
            post_type=post.post_type.value,
            link_url=post.link_url,
            author_id=str(post.author_id),
            author_username=post.author_username.root,
            created_at=post.created_at,
            updated_at=post.updated_at,
            vote_count=votes.vote_counts.get(post.id, 0),
            user_vote=int(user_vote) if user_vote is not None else None,
            comment_count=comment_count,
            ai_summary=post.ai_summary,
            comments=to_items(forest),
        )
