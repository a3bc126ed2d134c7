"""PostgreSQL implementation of Vote repository."""

from typing import Dict, Sequence

from sqlalchemy import and_, delete, func, select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from discuss.domain.model import Vote
from discuss.domain.repository import VoteRepository
from discuss.domain.value import UserId, VoteTargetType, VoteValue
from discuss.persistence.mappers import vote_to_dict
from discuss.persistence.tables import votes_table


class PostgresVoteRepository(VoteRepository):
    """PostgreSQL implementation of VoteRepository.

    Batch reads open their own short-lived session so that several of them
    can run concurrently; an ``AsyncSession`` must not be shared between
    concurrent tasks. Single-target reads and writes use the request session.
    """

    def __init__(
        self,
        session: AsyncSession,
        session_factory: async_sessionmaker[AsyncSession],
    ) -> None:
        """Initialize repository.

        Args:
            session: SQLAlchemy async session of the current request
            session_factory: Factory for the sessions used by batch reads
        """
        self.session = session
        self.session_factory = session_factory

    async def upsert(self, vote: Vote) -> Vote:
        """Insert a vote or overwrite the existing one."""
        vote_dict = vote_to_dict(vote)
        stmt = insert(votes_table).values(**vote_dict)
        stmt = stmt.on_conflict_do_update(
            constraint="unique_vote",
            set_={"value": stmt.excluded.value},
        )
        await self.session.execute(stmt)
        await self.session.flush()
        return vote

    async def delete_by_user_and_target(
        self,
        user_id: UserId,
        target_type: VoteTargetType,
        target_id: int,
    ) -> bool:
        """Delete a user's vote on a target."""
        stmt = delete(votes_table).where(
            and_(
                votes_table.c.user_id == str(user_id),
                votes_table.c.target_type == target_type.value,
                votes_table.c.target_id == target_id,
            )
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]

    async def sum_by_targets(
        self,
        target_type: VoteTargetType,
        target_ids: Sequence[int],
    ) -> Dict[int, int]:
        """Sum vote values grouped by target (batch query)."""
        if not target_ids:
            return {}

        stmt = (
            select(votes_table.c.target_id, func.sum(votes_table.c.value))
            .where(
                and_(
                    votes_table.c.target_type == target_type.value,
                    votes_table.c.target_id.in_(list(target_ids)),
                )
            )
            .group_by(votes_table.c.target_id)
        )
        async with self.session_factory() as session:
            result = await session.execute(stmt)
            return {row[0]: int(row[1]) for row in result.fetchall()}

    async def find_values_by_user(
        self,
        user_id: UserId,
        target_type: VoteTargetType,
        target_ids: Sequence[int],
    ) -> Dict[int, VoteValue]:
        """Find a user's vote values on multiple items (batch query)."""
        if not target_ids:
            return {}

        stmt = select(votes_table.c.target_id, votes_table.c.value).where(
            and_(
                votes_table.c.user_id == str(user_id),
                votes_table.c.target_type == target_type.value,
                votes_table.c.target_id.in_(list(target_ids)),
            )
        )
        async with self.session_factory() as session:
            result = await session.execute(stmt)
            return {row[0]: VoteValue(row[1]) for row in result.fetchall()}
