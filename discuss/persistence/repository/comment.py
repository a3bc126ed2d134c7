"""PostgreSQL implementation of Comment repository."""

from datetime import datetime, timezone
from typing import Dict, List, Optional, Sequence

from sqlalchemy import delete, desc, func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from discuss.domain.model import Comment
from discuss.domain.repository import CommentRepository
from discuss.domain.value import CommentId, PostId, UserId
from discuss.domain.value.types import Username
from discuss.persistence.mappers import row_to_comment
from discuss.persistence.tables import comments_table


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        stmt = select(comments_table).where(comments_table.c.id == comment_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_comment(row._asdict()) if row else None

    async def find_by_post(self, post_id: PostId) -> List[Comment]:
        """Find every comment of a post, newest first."""
        stmt = (
            select(comments_table)
            .where(comments_table.c.post_id == post_id)
            .order_by(desc(comments_table.c.created_at))
        )
        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def find_top_level_page(self, post_id: PostId, limit: int) -> List[Comment]:
        """Find the newest top-level comments of a post."""
        stmt = (
            select(comments_table)
            .where(
                comments_table.c.post_id == post_id,
                comments_table.c.parent_comment_id.is_(None),
            )
            .order_by(desc(comments_table.c.created_at))
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def find_replies(self, parent_ids: Sequence[CommentId]) -> List[Comment]:
        """Find the direct replies of several comments (batch query)."""
        if not parent_ids:
            return []

        stmt = (
            select(comments_table)
            .where(comments_table.c.parent_comment_id.in_(list(parent_ids)))
            .order_by(desc(comments_table.c.created_at))
        )
        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def count_replies(self, parent_ids: Sequence[CommentId]) -> Dict[int, int]:
        """Count the direct replies of several comments (batch query)."""
        if not parent_ids:
            return {}

        stmt = (
            select(comments_table.c.parent_comment_id, func.count())
            .where(comments_table.c.parent_comment_id.in_(list(parent_ids)))
            .group_by(comments_table.c.parent_comment_id)
        )
        result = await self.session.execute(stmt)
        return {row[0]: int(row[1]) for row in result.fetchall()}

    async def search(self, query: str, offset: int, limit: int) -> List[Comment]:
        """Find comments whose body contains the query, newest first."""
        stmt = (
            select(comments_table)
            .where(_body_contains(query))
            .order_by(desc(comments_table.c.created_at), desc(comments_table.c.id))
            .offset(offset)
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def count_matching(self, query: str) -> int:
        """Count comments whose body contains the query."""
        stmt = (
            select(func.count())
            .select_from(comments_table)
            .where(_body_contains(query))
        )
        result = await self.session.execute(stmt)
        return result.scalar_one()

    async def create(
        self,
        post_id: PostId,
        author_id: UserId,
        author_username: Username,
        body: str,
        parent_comment_id: Optional[CommentId] = None,
    ) -> Comment:
        """Insert a new comment."""
        stmt = (
            insert(comments_table)
            .values(
                post_id=post_id,
                author_id=str(author_id),
                author_username=author_username.root,
                body=body,
                parent_comment_id=parent_comment_id,
            )
            .returning(comments_table)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        await self.session.flush()
        return row_to_comment(row._asdict())

    async def update_body(self, comment_id: CommentId, body: str) -> Optional[Comment]:
        """Replace the body of a comment."""
        stmt = (
            update(comments_table)
            .where(comments_table.c.id == comment_id)
            .values(body=body, updated_at=datetime.now(timezone.utc))
            .returning(comments_table)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        await self.session.flush()
        return row_to_comment(row._asdict()) if row else None

    async def delete(self, comment_id: CommentId) -> bool:
        """Delete a comment; replies go with it through ON DELETE CASCADE."""
        stmt = delete(comments_table).where(comments_table.c.id == comment_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]

    async def count_by_post(self, post_id: PostId) -> int:
        """Count all comments of a post."""
        stmt = (
            select(func.count())
            .select_from(comments_table)
            .where(comments_table.c.post_id == post_id)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one()


def _body_contains(query: str):
    """Case-insensitive substring match with LIKE wildcards taken literally."""
    escaped = query.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return comments_table.c.body.ilike(f"%{escaped}%", escape="\\")
