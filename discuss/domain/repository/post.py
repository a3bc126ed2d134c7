"""Post repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional, Sequence

from discuss.domain.model.post import Post
from discuss.domain.value import PostId


class PostRepository(ABC):
    """Repository for Post aggregate.

    Defines the contract for post persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID.

        Args:
            post_id: The post's unique identifier

        Returns:
            The post if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_ids(self, post_ids: Sequence[PostId]) -> List[Post]:
        """Find several posts by ID (batch query).

        Args:
            post_ids: Post IDs

        Returns:
            The posts that exist, in no particular order
        """
        pass

    @abstractmethod
    async def save(self, post: Post) -> Post:
        """Save a post (create or update).

        Args:
            post: The post to save

        Returns:
            The saved post
        """
        pass

    @abstractmethod
    async def update_summary(
        self,
        post_id: PostId,
        summary: str,
        generated_at: datetime,
        comment_count: int,
    ) -> None:
        """Store a freshly generated AI summary on a post.

        Args:
            post_id: Post ID
            summary: Generated summary text
            generated_at: Generation timestamp
            comment_count: Number of comments the summary was generated from
        """
        pass
