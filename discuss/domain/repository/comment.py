"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import Dict, List, Optional, Sequence

from discuss.domain.model.comment import Comment
from discuss.domain.value import CommentId, PostId, UserId
from discuss.domain.value.types import Username


class CommentRepository(ABC):
    """Repository for Comment entity.

    Defines the contract for comment persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_post(self, post_id: PostId) -> List[Comment]:
        """Find every comment of a post, newest first.

        Args:
            post_id: The post ID

        Returns:
            All comments of the post, top-level and replies alike
        """
        pass

    @abstractmethod
    async def find_top_level_page(self, post_id: PostId, limit: int) -> List[Comment]:
        """Find the newest top-level comments of a post.

        Args:
            post_id: The post ID
            limit: Maximum number of comments to return

        Returns:
            Top-level comments ordered by creation time, newest first
        """
        pass

    @abstractmethod
    async def find_replies(self, parent_ids: Sequence[CommentId]) -> List[Comment]:
        """Find the direct replies of several comments (batch query).

        Args:
            parent_ids: Parent comment IDs

        Returns:
            Replies ordered by creation time, newest first
        """
        pass

    @abstractmethod
    async def count_replies(self, parent_ids: Sequence[CommentId]) -> Dict[int, int]:
        """Count the direct replies of several comments (batch query).

        Args:
            parent_ids: Parent comment IDs

        Returns:
            Mapping of comment ID to its number of direct replies.
            Comments without replies are absent.
        """
        pass

    @abstractmethod
    async def search(self, query: str, offset: int, limit: int) -> List[Comment]:
        """Find comments whose body contains ``query``, case-insensitively.

        Args:
            query: Text to look for
            offset: Number of matches to skip
            limit: Maximum number of comments to return

        Returns:
            Matching comments across all posts, newest first
        """
        pass

    @abstractmethod
    async def count_matching(self, query: str) -> int:
        """Count comments whose body contains ``query``, case-insensitively."""
        pass

    @abstractmethod
    async def create(
        self,
        post_id: PostId,
        author_id: UserId,
        author_username: Username,
        body: str,
        parent_comment_id: Optional[CommentId] = None,
    ) -> Comment:
        """Insert a new comment.

        The storage layer assigns the identifier and timestamps.

        Returns:
            The stored comment
        """
        pass

    @abstractmethod
    async def update_body(self, comment_id: CommentId, body: str) -> Optional[Comment]:
        """Replace the body of a comment and bump ``updated_at``.

        Args:
            comment_id: Comment ID
            body: New body text

        Returns:
            The updated comment, or None if it doesn't exist
        """
        pass

    @abstractmethod
    async def delete(self, comment_id: CommentId) -> bool:
        """Delete a comment and, in cascade, all of its replies.

        Args:
            comment_id: The comment ID to delete

        Returns:
            True if a comment was deleted
        """
        pass

    @abstractmethod
    async def count_by_post(self, post_id: PostId) -> int:
        """Count all comments of a post, replies included.

        Args:
            post_id: The post ID

        Returns:
            Number of comments
        """
        pass
