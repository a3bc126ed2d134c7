"""Batched vote aggregation.

Every listing (comments page, post detail, summary payload) goes through
this service so that a forest of N comments costs two storage round trips
rather than 2N.
"""

import asyncio
from typing import Optional, Sequence

import logfire

from discuss.domain.error import AggregationError
from discuss.domain.model.comment_node import AggregateMaps
from discuss.domain.repository import VoteRepository
from discuss.domain.value import UserId, VoteTargetType, VoteValue

from .base import Service


class VoteAggregator(Service):
    """Domain service computing vote sums and the caller's votes in batch."""

    def __init__(self, vote_repository: VoteRepository) -> None:
        """Initialize vote aggregator.

        Args:
            vote_repository: Vote repository
        """
        self.vote_repository = vote_repository

    async def aggregate_votes(
        self, target_type: VoteTargetType, target_ids: Sequence[int]
    ) -> dict[int, int]:
        """Sum vote values for each target.

        Args:
            target_type: Type of targets
            target_ids: Target IDs

        Returns:
            Mapping of target ID to vote sum. Unvoted targets are absent.

        Raises:
            AggregationError: If the storage query fails
        """
        ids = _unique(target_ids)
        if not ids:
            return {}

        with logfire.span(
            "vote_aggregator.aggregate_votes",
            target_type=target_type.value,
            target_count=len(ids),
        ):
            try:
                return await self.vote_repository.sum_by_targets(target_type, ids)
            except Exception as e:
                logfire.error(
                    "Vote sum aggregation failed",
                    target_type=target_type.value,
                    error=str(e),
                )
                raise AggregationError(target_type.value, e) from e

    async def caller_votes(
        self,
        viewer_id: Optional[UserId],
        target_type: VoteTargetType,
        target_ids: Sequence[int],
    ) -> dict[int, VoteValue]:
        """Look up the viewer's own vote on each target.

        Args:
            viewer_id: Authenticated viewer, or None for anonymous requests
            target_type: Type of targets
            target_ids: Target IDs

        Returns:
            Mapping of target ID to the viewer's vote. Unvoted targets are absent.

        Raises:
            AggregationError: If the storage query fails
        """
        ids = _unique(target_ids)
        if viewer_id is None or not ids:
            return {}

        with logfire.span(
            "vote_aggregator.caller_votes",
            target_type=target_type.value,
            target_count=len(ids),
        ):
            try:
                return await self.vote_repository.find_values_by_user(
                    viewer_id, target_type, ids
                )
            except Exception as e:
                logfire.error(
                    "Caller vote lookup failed",
                    target_type=target_type.value,
                    error=str(e),
                )
                raise AggregationError(target_type.value, e) from e

    async def aggregate(
        self,
        target_type: VoteTargetType,
        target_ids: Sequence[int],
        viewer_id: Optional[UserId] = None,
    ) -> AggregateMaps:
        """Compute vote sums and caller votes concurrently.

        Either both maps are returned or AggregationError is raised.
        """
        vote_counts, caller_votes = await asyncio.gather(
            self.aggregate_votes(target_type, target_ids),
            self.caller_votes(viewer_id, target_type, target_ids),
        )
        return AggregateMaps(vote_counts=vote_counts, caller_votes=caller_votes)


def _unique(target_ids: Sequence[int]) -> list[int]:
    return list(dict.fromkeys(target_ids))
