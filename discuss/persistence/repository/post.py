"""PostgreSQL implementation of Post repository."""

from datetime import datetime
from typing import List, Optional, Sequence

import logfire
from sqlalchemy import select, update
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from discuss.domain.model import Post
from discuss.domain.repository import PostRepository
from discuss.domain.value import PostId
from discuss.persistence.mappers import post_to_dict, row_to_post
from discuss.persistence.tables import posts_table


class PostgresPostRepository(PostRepository):
    """PostgreSQL implementation of PostRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        with logfire.span("post_repository.find_by_id", post_id=str(post_id)):
            stmt = select(posts_table).where(posts_table.c.id == post_id)
            result = await self.session.execute(stmt)
            row = result.fetchone()
            return row_to_post(row._asdict()) if row else None

    async def find_by_ids(self, post_ids: Sequence[PostId]) -> List[Post]:
        """Find several posts by ID."""
        if not post_ids:
            return []

        stmt = select(posts_table).where(posts_table.c.id.in_(list(post_ids)))
        result = await self.session.execute(stmt)
        return [row_to_post(row._asdict()) for row in result.fetchall()]

    async def save(self, post: Post) -> Post:
        """Save a post (create or update)."""
        with logfire.span("post_repository.save", post_id=str(post.id)):
            post_dict = post_to_dict(post)
            stmt = insert(posts_table).values(**post_dict)
            stmt = stmt.on_conflict_do_update(
                index_elements=[posts_table.c.id],
                set_={k: v for k, v in post_dict.items() if k != "id"},
            )
            await self.session.execute(stmt)
            await self.session.flush()
            return post

    async def update_summary(
        self,
        post_id: PostId,
        summary: str,
        generated_at: datetime,
        comment_count: int,
    ) -> None:
        """Store a generated summary and its metadata."""
        with logfire.span("post_repository.update_summary", post_id=str(post_id)):
            stmt = (
                update(posts_table)
                .where(posts_table.c.id == post_id)
                .values(
                    ai_summary=summary,
                    ai_summary_generated_at=generated_at,
                    ai_summary_comment_count=comment_count,
                )
            )
            await self.session.execute(stmt)
            await self.session.flush()
