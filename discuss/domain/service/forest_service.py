"""Cached comment forest loading.

Loads comments, aggregates their votes in batch, builds the forest and
caches it per (post, viewer, variant). Every read path that returns nested
comments goes through here.
"""

import asyncio
from typing import Awaitable, Callable, Collection, Optional

import logfire

from discuss.config import CacheSettings, CommentSettings
from discuss.domain.model.comment import Comment
from discuss.domain.model.comment_node import CommentNode
from discuss.domain.repository.cache import (
    FULL_VARIANT,
    PAGE_VARIANT,
    CommentTreeCache,
)
from discuss.domain.value import CommentId, PostId, UserId, VoteTargetType

from .base import Service
from .comment_service import CommentService
from .comment_tree import build_forest, count_nodes
from .vote_aggregator import VoteAggregator


class CommentForestService(Service):
    """Builds and caches comment forests."""

    def __init__(
        self,
        comment_service: CommentService,
        vote_aggregator: VoteAggregator,
        cache: CommentTreeCache,
        cache_settings: CacheSettings,
        comment_settings: CommentSettings,
    ) -> None:
        """Initialize forest service.

        Args:
            comment_service: Comment domain service
            vote_aggregator: Batched vote aggregation
            cache: Comment tree cache
            cache_settings: Cache TTLs
            comment_settings: Page size of the comments listing
        """
        self.comment_service = comment_service
        self.vote_aggregator = vote_aggregator
        self.cache = cache
        self.cache_settings = cache_settings
        self.comment_settings = comment_settings

    async def build(
        self,
        comments: list[Comment],
        viewer_id: Optional[UserId],
        root_ids: Optional[Collection[int]] = None,
    ) -> list[CommentNode]:
        """Aggregate votes and reply counts for ``comments`` and link them.

        Both lookups run concurrently.

        Raises:
            AggregationError: If vote aggregation fails
        """
        ids = [c.id for c in comments]
        aggregates, reply_counts = await asyncio.gather(
            self.vote_aggregator.aggregate(VoteTargetType.COMMENT, ids, viewer_id),
            self.comment_service.count_replies(ids),
        )
        return build_forest(
            comments,
            aggregates.vote_counts,
            aggregates.caller_votes,
            root_ids,
            reply_counts=reply_counts,
        )

    async def page_forest(
        self, post_id: PostId, viewer_id: Optional[UserId]
    ) -> list[CommentNode]:
        """Newest top-level comments of a post with their direct replies."""

        async def load() -> list[Comment]:
            return await self.comment_service.get_page(
                post_id, self.comment_settings.top_level_page_size
            )

        return await self._cached(
            post_id, viewer_id, PAGE_VARIANT, self.cache_settings.comments_ttl, load
        )

    async def full_forest(
        self, post_id: PostId, viewer_id: Optional[UserId]
    ) -> list[CommentNode]:
        """Every comment of a post."""

        async def load() -> list[Comment]:
            return await self.comment_service.get_comments_for_post(post_id)

        return await self._cached(
            post_id, viewer_id, FULL_VARIANT, self.cache_settings.post_detail_ttl, load
        )

    async def comment_forest(
        self, comment_id: CommentId, viewer_id: Optional[UserId]
    ) -> list[CommentNode]:
        """A single comment with its direct replies, as a one-tree forest.

        Raises:
            NotFoundError: If the comment doesn't exist
        """
        comments = await self.comment_service.get_with_replies(comment_id)
        return await self.build(comments, viewer_id, root_ids={comment_id})

    async def invalidate(self, post_id: PostId) -> None:
        """Drop every cached forest of a post. Failures are logged only."""
        try:
            removed = await self.cache.invalidate_post(post_id)
            logfire.info(
                "Comment cache invalidated", post_id=str(post_id), removed=removed
            )
        except Exception as e:
            logfire.warn(
                "Comment cache invalidation failed", post_id=str(post_id), error=str(e)
            )

    async def _cached(
        self,
        post_id: PostId,
        viewer_id: Optional[UserId],
        variant: str,
        ttl: float,
        load: Callable[[], Awaitable[list[Comment]]],
    ) -> list[CommentNode]:
        with logfire.span(
            "comment_forest.load", post_id=str(post_id), variant=variant
        ):
            try:
                cached = await self.cache.get(post_id, viewer_id, variant)
            except Exception as e:
                logfire.warn(
                    "Comment cache read failed", post_id=str(post_id), error=str(e)
                )
                cached = None
            if cached is not None:
                logfire.info("Comment cache hit", post_id=str(post_id), variant=variant)
                return cached

            comments = await load()
            forest = await self.build(comments, viewer_id)

            try:
                await self.cache.set(post_id, viewer_id, forest, ttl, variant)
            except Exception as e:
                logfire.warn(
                    "Comment cache write failed", post_id=str(post_id), error=str(e)
                )

            logfire.info(
                "Comment forest built",
                post_id=str(post_id),
                variant=variant,
                fetched=len(comments),
                nodes=count_nodes(forest),
            )
            return forest
