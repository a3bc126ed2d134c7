"""In-memory post repository for testing."""

from datetime import datetime
from typing import Optional, Sequence

from discuss.domain.model.post import Post
from discuss.domain.repository.post import PostRepository
from discuss.domain.value import PostId


class InMemoryPostRepository(PostRepository):
    """In-memory implementation of PostRepository for testing."""

    def __init__(self) -> None:
        self._posts: dict[PostId, Post] = {}

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        return self._posts.get(post_id)

    async def find_by_ids(self, post_ids: Sequence[PostId]) -> list[Post]:
        """Find several posts by ID."""
        return [self._posts[pid] for pid in dict.fromkeys(post_ids) if pid in self._posts]

    async def save(self, post: Post) -> Post:
        """Save a post."""
        self._posts[post.id] = post
        return post

    async def update_summary(
        self,
        post_id: PostId,
        summary: str,
        generated_at: datetime,
        comment_count: int,
    ) -> None:
        """Store summary metadata on a post."""
        post = self._posts.get(post_id)
        if not post:
            return
        self._posts[post_id] = post.model_copy(
            update={
                "ai_summary": summary,
                "ai_summary_generated_at": generated_at,
                "ai_summary_comment_count": comment_count,
            }
        )
