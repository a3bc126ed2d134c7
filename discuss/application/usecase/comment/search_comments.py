"""Search comments use case."""

import asyncio
import math
from datetime import datetime

from pydantic import BaseModel, Field

from discuss.config import CommentSettings

from discuss.domain.service import CommentService, PostService, VoteAggregator
from discuss.domain.value import PostId, UserId, VoteTargetType


class SearchCommentsRequest(BaseModel):
    """Search comments request."""

    query: str
    page: int = Field(default=1, ge=1)
    limit: int | None = Field(default=None, ge=1)  # None: configured default
    viewer_id: str | None = None


class CommentSearchItem(BaseModel):
    """A matching comment with its post and vote data."""

    id: int
    post_id: int
    post_title: str | None  # None if the post vanished meanwhile
    author_id: str
    author_username: str
    body: str
    parent_comment_id: int | None
    created_at: datetime
    updated_at: datetime
    vote_count: int
    user_vote: int | None
    reply_count: int


class Pagination(BaseModel):
    """Page position within all matches."""

    page: int
    limit: int
    total: int
    total_pages: int


class SearchCommentsResponse(BaseModel):
    """Search comments response."""

    comments: list[CommentSearchItem]
    pagination: Pagination


class SearchCommentsUseCase:
    """Use case for searching comment bodies across all posts."""

    def __init__(
        self,
        comment_service: CommentService,
        post_service: PostService,
        vote_aggregator: VoteAggregator,
        settings: CommentSettings,
    ) -> None:
        """Initialize search comments use case.

        Args:
            comment_service: Comment domain service
            post_service: Post titles of the matches
            vote_aggregator: Vote data of the matches, in one batch
            settings: Default and maximum page size
        """
        self.comment_service = comment_service
        self.post_service = post_service
        self.vote_aggregator = vote_aggregator
        self.settings = settings

    async def execute(self, request: SearchCommentsRequest) -> SearchCommentsResponse:
        """Execute comment search.

        Raises:
            ValidationError: If the query is blank
            AggregationError: If vote aggregation fails
        """
        viewer_id = UserId(request.viewer_id) if request.viewer_id else None
        limit = min(
            request.limit or self.settings.search_page_size,
            self.settings.search_max_page_size,
        )

        comments, total = await self.comment_service.search_comments(
            request.query, request.page, limit
        )
        ids = [c.id for c in comments]

        aggregates, reply_counts = await asyncio.gather(
            self.vote_aggregator.aggregate(VoteTargetType.COMMENT, ids, viewer_id),
            self.comment_service.count_replies(ids),
        )
        posts = await self.post_service.get_posts_by_ids(
            list(dict.fromkeys(PostId(c.post_id) for c in comments))
        )

        items = []
        for comment in comments:
            post = posts.get(comment.post_id)
            user_vote = aggregates.caller_votes.get(comment.id)
            items.append(
                CommentSearchItem(
                    id=comment.id,
                    post_id=comment.post_id,
                    post_title=post.title if post else None,
                    author_id=str(comment.author_id),
                    author_username=comment.author_username.root,
                    body=comment.body,
                    parent_comment_id=comment.parent_comment_id,
                    created_at=comment.created_at,
                    updated_at=comment.updated_at,
                    vote_count=aggregates.vote_counts.get(comment.id, 0),
                    user_vote=int(user_vote) if user_vote is not None else None,
                    reply_count=reply_counts.get(comment.id, 0),
                )
            )

        return SearchCommentsResponse(
            comments=items,
            pagination=Pagination(
                page=request.page,
                limit=limit,
                total=total,
                total_pages=math.ceil(total / limit),
            ),
        )
