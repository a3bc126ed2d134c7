"""In-memory vote repository for testing."""

from collections import defaultdict
from typing import Sequence

from discuss.domain.model.vote import Vote
from discuss.domain.repository.vote import VoteRepository
from discuss.domain.value import UserId, VoteTargetType, VoteValue


class InMemoryVoteRepository(VoteRepository):
    """In-memory implementation of VoteRepository for testing.

    Votes are keyed by (user, target type, target), which gives the same
    one-vote-per-target guarantee as the database unique constraint.
    """

    def __init__(self) -> None:
        self._votes: dict[tuple[UserId, VoteTargetType, int], Vote] = {}

    async def upsert(self, vote: Vote) -> Vote:
        """Insert or overwrite a vote."""
        self._votes[(vote.user_id, vote.target_type, vote.target_id)] = vote
        return vote

    async def delete_by_user_and_target(
        self,
        user_id: UserId,
        target_type: VoteTargetType,
        target_id: int,
    ) -> bool:
        """Delete a user's vote on an item."""
        return self._votes.pop((user_id, target_type, target_id), None) is not None

    async def sum_by_targets(
        self,
        target_type: VoteTargetType,
        target_ids: Sequence[int],
    ) -> dict[int, int]:
        """Sum vote values grouped by target."""
        wanted = set(target_ids)
        sums: dict[int, int] = defaultdict(int)
        for v in self._votes.values():
            if v.target_type == target_type and v.target_id in wanted:
                sums[v.target_id] += int(v.value)
        return dict(sums)

    async def find_values_by_user(
        self,
        user_id: UserId,
        target_type: VoteTargetType,
        target_ids: Sequence[int],
    ) -> dict[int, VoteValue]:
        """Find a user's vote values on several items."""
        values: dict[int, VoteValue] = {}
        for target_id in target_ids:
            vote = self._votes.get((user_id, target_type, target_id))
            if vote:
                values[target_id] = vote.value
        return values
