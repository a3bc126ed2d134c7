"""Vote repository interface."""

from abc import ABC, abstractmethod
from typing import Dict, Sequence

from discuss.domain.model.vote import Vote
from discuss.domain.value import UserId, VoteTargetType, VoteValue


class VoteRepository(ABC):
    """Repository for Vote entity.

    Defines the contract for vote persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def upsert(self, vote: Vote) -> Vote:
        """Insert a vote or overwrite the user's existing vote on the target.

        Args:
            vote: The vote to store

        Returns:
            The stored vote
        """
        pass

    @abstractmethod
    async def delete_by_user_and_target(
        self,
        user_id: UserId,
        target_type: VoteTargetType,
        target_id: int,
    ) -> bool:
        """Delete a user's vote on a target.

        Returns:
            True if a vote was deleted, False if no vote existed
        """
        pass

    @abstractmethod
    async def sum_by_targets(
        self,
        target_type: VoteTargetType,
        target_ids: Sequence[int],
    ) -> Dict[int, int]:
        """Sum vote values grouped by target (batch query).

        Args:
            target_type: Type of items (post or comment)
            target_ids: Item IDs to aggregate

        Returns:
            Mapping of target ID to vote sum. Targets without votes are absent.
        """
        pass

    @abstractmethod
    async def find_values_by_user(
        self,
        user_id: UserId,
        target_type: VoteTargetType,
        target_ids: Sequence[int],
    ) -> Dict[int, VoteValue]:
        """Find a user's vote values on multiple items (batch query).

        Args:
            user_id: The user's ID
            target_type: Type of items (post or comment)
            target_ids: Item IDs to check

        Returns:
            Mapping of target ID to the user's vote. Unvoted targets are absent.
        """
        pass
