"""Process-local comment tree cache."""

import asyncio
import time
from typing import Callable, List, Optional

import logfire

from discuss.domain.model.comment_node import CommentNode
from discuss.domain.repository.cache import (
    PAGE_VARIANT,
    CommentTreeCache,
    cache_key,
    post_prefix,
)
from discuss.domain.value import PostId, UserId


class _Entry:
    __slots__ = ("forest", "expires_at")

    def __init__(self, forest: List[CommentNode], expires_at: float) -> None:
        self.forest = forest
        self.expires_at = expires_at


class InMemoryCommentTreeCache(CommentTreeCache):
    """Comment tree cache held in a dict shared by the whole process.

    Expired entries are dropped lazily on read and by a periodic sweep task.
    When full, the oldest inserted entry is evicted first. Cached forests are
    shared between requests and must not be mutated by callers.
    """

    def __init__(
        self,
        max_entries: int = 10000,
        sweep_interval: float = 60.0,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        """Initialize cache.

        Args:
            max_entries: Maximum number of stored forests
            sweep_interval: Seconds between background sweeps
            clock: Monotonic time source in seconds
        """
        self.max_entries = max_entries
        self.sweep_interval = sweep_interval
        self._clock = clock
        # dicts keep insertion order, which drives eviction
        self._entries: dict[str, _Entry] = {}
        self._sweeper: Optional[asyncio.Task] = None

    def __len__(self) -> int:
        return len(self._entries)

    async def get(
        self,
        post_id: PostId,
        viewer_id: Optional[UserId],
        variant: str = PAGE_VARIANT,
    ) -> Optional[List[CommentNode]]:
        key = cache_key(post_id, viewer_id, variant)
        entry = self._entries.get(key)
        if entry is None:
            return None
        if entry.expires_at <= self._clock():
            del self._entries[key]
            return None
        return entry.forest

    async def set(
        self,
        post_id: PostId,
        viewer_id: Optional[UserId],
        forest: List[CommentNode],
        ttl: float,
        variant: str = PAGE_VARIANT,
    ) -> None:
        key = cache_key(post_id, viewer_id, variant)
        # Re-inserting moves the key to the end of the eviction order
        self._entries.pop(key, None)
        while self._entries and len(self._entries) >= self.max_entries:
            oldest = next(iter(self._entries))
            del self._entries[oldest]
        self._entries[key] = _Entry(forest, self._clock() + ttl)

    async def invalidate_post(self, post_id: PostId) -> int:
        prefix = post_prefix(post_id)
        doomed = [key for key in self._entries if key.startswith(prefix)]
        for key in doomed:
            del self._entries[key]
        return len(doomed)

    async def clear(self) -> None:
        self._entries.clear()

    def sweep(self) -> int:
        """Drop every expired entry.

        Returns:
            Number of entries removed
        """
        now = self._clock()
        expired = [key for key, e in self._entries.items() if e.expires_at <= now]
        for key in expired:
            del self._entries[key]
        return len(expired)

    def start(self) -> None:
        """Start the background sweep task on the running event loop."""
        if self._sweeper is None or self._sweeper.done():
            self._sweeper = asyncio.create_task(self._sweep_forever())

    async def stop(self) -> None:
        """Cancel the background sweep task and wait for it to finish."""
        if self._sweeper is None:
            return
        self._sweeper.cancel()
        try:
            await self._sweeper
        except asyncio.CancelledError:
            pass
        self._sweeper = None

    async def _sweep_forever(self) -> None:
        while True:
            await asyncio.sleep(self.sweep_interval)
            removed = self.sweep()
            if removed:
                logfire.debug("Comment cache swept", removed=removed, size=len(self))
