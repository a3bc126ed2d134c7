"""Comment tree cache interface.

Cached forests are keyed by post, viewer and variant. The viewer is part of
the key because every node carries the viewer's own vote.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from discuss.domain.model.comment_node import CommentNode
from discuss.domain.value import PostId, UserId

# Viewer component of the key for unauthenticated requests
ANONYMOUS_VIEWER = "anon"

# Capped page of top-level comments plus their direct replies
PAGE_VARIANT = "page"
# Every comment of the post
FULL_VARIANT = "full"


def cache_key(post_id: PostId, viewer_id: Optional[UserId], variant: str) -> str:
    """Build the cache key for one forest.

    All keys of a post share the ``comments:{post_id}:`` prefix.
    """
    viewer = viewer_id or ANONYMOUS_VIEWER
    return f"{post_prefix(post_id)}{viewer}:{variant}"


def post_prefix(post_id: PostId) -> str:
    """Key prefix shared by every entry of a post."""
    return f"comments:{post_id}:"


class CommentTreeCache(ABC):
    """Cache of built comment forests.

    Implementations may fail; callers treat any exception as a miss.
    """

    @abstractmethod
    async def get(
        self,
        post_id: PostId,
        viewer_id: Optional[UserId],
        variant: str = PAGE_VARIANT,
    ) -> Optional[List[CommentNode]]:
        """Return the cached forest, or None if absent or expired."""
        pass

    @abstractmethod
    async def set(
        self,
        post_id: PostId,
        viewer_id: Optional[UserId],
        forest: List[CommentNode],
        ttl: float,
        variant: str = PAGE_VARIANT,
    ) -> None:
        """Store a complete forest for ``ttl`` seconds (last writer wins)."""
        pass

    @abstractmethod
    async def invalidate_post(self, post_id: PostId) -> int:
        """Drop every entry of a post, for all viewers and variants.

        Returns:
            Number of entries removed
        """
        pass

    @abstractmethod
    async def clear(self) -> None:
        """Drop every entry."""
        pass
