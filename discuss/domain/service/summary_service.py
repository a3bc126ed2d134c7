"""AI summary domain service."""

from datetime import datetime, timezone
from typing import Any, Optional

import logfire

from discuss.domain.model.post import Post
from discuss.domain.repository import CommentRepository, PostRepository
from discuss.domain.value import VoteTargetType

from .base import Service
from .summary_policy import SummaryFreshnessPolicy
from .vote_aggregator import VoteAggregator


class Summarizer:
    """Text summarization client interface."""

    async def summarize(self, payload: dict[str, Any]) -> str:
        """Summarize a discussion.

        Args:
            payload: Post title, body, vote count and its top comments

        Returns:
            Summary text
        """
        raise NotImplementedError


class SummaryService(Service):
    """Keeps the cached AI summary of a post fresh."""

    def __init__(
        self,
        post_repository: PostRepository,
        comment_repository: CommentRepository,
        vote_aggregator: VoteAggregator,
        summarizer: Summarizer,
        policy: SummaryFreshnessPolicy,
        max_comments: int = 10,
    ) -> None:
        """Initialize summary service.

        Args:
            post_repository: Post repository
            comment_repository: Comment repository
            vote_aggregator: Batched vote aggregation
            summarizer: Summarization client
            policy: Freshness policy
            max_comments: Number of top voted comments sent to the summarizer
        """
        self.post_repository = post_repository
        self.comment_repository = comment_repository
        self.vote_aggregator = vote_aggregator
        self.summarizer = summarizer
        self.policy = policy
        self.max_comments = max_comments

    async def get_fresh_summary(
        self,
        post: Post,
        post_vote_count: int,
        now: Optional[datetime] = None,
    ) -> Optional[str]:
        """Return the post's summary, regenerating it when stale.

        Generation and persistence failures are logged and the stored
        summary (possibly None) is returned instead.

        Args:
            post: Post to summarize
            post_vote_count: Current vote sum of the post
            now: Reference time (defaults to the current time)

        Returns:
            Summary text, or None if none exists and generation failed
        """
        now = now or datetime.now(timezone.utc)
        with logfire.span("summary_service.get_fresh_summary", post_id=str(post.id)):
            metadata = post.summary_metadata
            try:
                comment_count = await self.comment_repository.count_by_post(post.id)
            except Exception as e:
                logfire.error(
                    "Comment count failed, keeping stored summary",
                    post_id=str(post.id),
                    error=str(e),
                )
                return metadata.summary

            if not self.policy.needs_regeneration(
                metadata.summary,
                metadata.generated_at,
                metadata.comment_count_at_generation,
                comment_count,
                now,
            ):
                logfire.info("Using cached summary", post_id=str(post.id))
                return metadata.summary

            logfire.info(
                "Regenerating summary",
                post_id=str(post.id),
                has_summary=metadata.summary is not None,
                comment_count=comment_count,
                comment_count_at_generation=metadata.comment_count_at_generation,
            )

            try:
                payload = await self.build_payload(post, post_vote_count)
                summary = await self.summarizer.summarize(payload)
            except Exception as e:
                logfire.error(
                    "Summary generation failed", post_id=str(post.id), error=str(e)
                )
                return metadata.summary

            try:
                await self.post_repository.update_summary(
                    post.id, summary, now, comment_count
                )
            except Exception as e:
                logfire.error(
                    "Failed to store generated summary",
                    post_id=str(post.id),
                    error=str(e),
                )

            logfire.info(
                "Summary generated", post_id=str(post.id), length=len(summary)
            )
            return summary

    async def build_payload(self, post: Post, post_vote_count: int) -> dict[str, Any]:
        """Prepare the summarizer input.

        Comments are ranked by vote count (highest first) and capped at
        ``max_comments``.
        """
        comments = await self.comment_repository.find_by_post(post.id)
        vote_counts = await self.vote_aggregator.aggregate_votes(
            VoteTargetType.COMMENT, [c.id for c in comments]
        )
        ranked = sorted(comments, key=lambda c: vote_counts.get(c.id, 0), reverse=True)

        return {
            "title": post.title,
            "body": post.body,
            "vote_count": post_vote_count,
            "comments": [
                {
                    "body": c.body,
                    "author": str(c.author_username),
                    "vote_count": vote_counts.get(c.id, 0),
                    "created_at": c.created_at.isoformat(),
                }
                for c in ranked[: self.max_comments]
            ],
        }
