"""In-memory comment repository for testing."""

from datetime import datetime, timezone
from collections import Counter
from itertools import count
from typing import Optional, Sequence

from discuss.domain.model.comment import Comment
from discuss.domain.repository.comment import CommentRepository
from discuss.domain.value import CommentId, PostId, UserId
from discuss.domain.value.types import Username


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self) -> None:
        self._comments: dict[CommentId, Comment] = {}
        self._ids = count(1)

    def add(self, comment: Comment) -> Comment:
        """Store a fully built comment as-is (test seeding)."""
        self._comments[comment.id] = comment
        return comment

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        return self._comments.get(comment_id)

    async def find_by_post(self, post_id: PostId) -> list[Comment]:
        """Find every comment of a post, newest first."""
        return _newest_first(c for c in self._comments.values() if c.post_id == post_id)

    async def find_top_level_page(self, post_id: PostId, limit: int) -> list[Comment]:
        """Find the newest top-level comments of a post."""
        top_level = _newest_first(
            c
            for c in self._comments.values()
            if c.post_id == post_id and c.parent_comment_id is None
        )
        return top_level[:limit]

    async def find_replies(self, parent_ids: Sequence[CommentId]) -> list[Comment]:
        """Find the direct replies of several comments."""
        wanted = set(parent_ids)
        return _newest_first(
            c for c in self._comments.values() if c.parent_comment_id in wanted
        )

    async def count_replies(self, parent_ids: Sequence[CommentId]) -> dict[int, int]:
        """Count the direct replies of several comments."""
        wanted = set(parent_ids)
        return dict(
            Counter(
                c.parent_comment_id
                for c in self._comments.values()
                if c.parent_comment_id in wanted
            )
        )

    async def search(self, query: str, offset: int, limit: int) -> list[Comment]:
        """Find comments whose body contains the query, newest first."""
        return self._matching(query)[offset : offset + limit]

    async def count_matching(self, query: str) -> int:
        """Count comments whose body contains the query."""
        return len(self._matching(query))

    def _matching(self, query: str) -> list[Comment]:
        needle = query.casefold()
        return sorted(
            (c for c in self._comments.values() if needle in c.body.casefold()),
            key=lambda c: (c.created_at, c.id),
            reverse=True,
        )

    async def create(
        self,
        post_id: PostId,
        author_id: UserId,
        author_username: Username,
        body: str,
        parent_comment_id: Optional[CommentId] = None,
    ) -> Comment:
        """Insert a new comment with the next free ID."""
        comment_id = CommentId(next(self._ids))
        while comment_id in self._comments:
            comment_id = CommentId(next(self._ids))

        now = datetime.now(timezone.utc)
        comment = Comment(
            id=comment_id,
            post_id=post_id,
            author_id=author_id,
            author_username=author_username,
            body=body,
            parent_comment_id=parent_comment_id,
            created_at=now,
            updated_at=now,
        )
        self._comments[comment_id] = comment
        return comment

    async def update_body(self, comment_id: CommentId, body: str) -> Optional[Comment]:
        """Replace the body of a comment."""
        comment = self._comments.get(comment_id)
        if not comment:
            return None
        updated = comment.model_copy(
            update={"body": body, "updated_at": datetime.now(timezone.utc)}
        )
        self._comments[comment_id] = updated
        return updated

    async def delete(self, comment_id: CommentId) -> bool:
        """Delete a comment and all of its descendants."""
        if comment_id not in self._comments:
            return False

        doomed = {comment_id}
        frontier = [comment_id]
        while frontier:
            parent = frontier.pop()
            for c in self._comments.values():
                if c.parent_comment_id == parent and c.id not in doomed:
                    doomed.add(c.id)
                    frontier.append(c.id)

        for cid in doomed:
            del self._comments[cid]
        return True

    async def count_by_post(self, post_id: PostId) -> int:
        """Count all comments of a post."""
        return sum(1 for c in self._comments.values() if c.post_id == post_id)


def _newest_first(comments) -> list[Comment]:
    return sorted(comments, key=lambda c: c.created_at, reverse=True)
