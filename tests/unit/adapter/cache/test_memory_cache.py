"""Unit tests for InMemoryCommentTreeCache."""

import pytest

from discuss.adapter.cache import InMemoryCommentTreeCache
from discuss.domain.model import CommentNode
from discuss.domain.repository.cache import FULL_VARIANT, cache_key
from discuss.domain.value import PostId, UserId
from tests.conftest import make_comment


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self) -> None:
        self.now = 1000.0

    def __call__(self) -> float:
        return self.now


def _forest(comment_id: int, post_id: int = 1) -> list[CommentNode]:
    comment = make_comment(comment_id, post_id=post_id)
    return [CommentNode(**comment.model_dump(), vote_count=1, replies=[])]


class TestCacheKey:
    """Tests for cache key layout."""

    def test_anonymous_viewer_key(self):
        assert cache_key(PostId(42), None, "page") == "comments:42:anon:page"

    def test_viewer_key(self):
        assert cache_key(PostId(42), UserId("u1"), "full") == "comments:42:u1:full"


class TestInMemoryCommentTreeCache:
    """Tests for InMemoryCommentTreeCache."""

    @pytest.mark.asyncio
    async def test_get_returns_stored_forest(self):
        """A stored forest is returned until it expires."""
        # Arrange
        cache = InMemoryCommentTreeCache()
        forest = _forest(1)

        # Act
        await cache.set(PostId(1), None, forest, ttl=60)

        # Assert
        assert await cache.get(PostId(1), None) == forest

    @pytest.mark.asyncio
    async def test_viewers_are_isolated(self):
        """One viewer's forest is never served to another viewer."""
        # Arrange
        cache = InMemoryCommentTreeCache()
        await cache.set(PostId(1), UserId("u1"), _forest(1), ttl=60)

        # Act / Assert
        assert await cache.get(PostId(1), UserId("u2")) is None
        assert await cache.get(PostId(1), None) is None
        assert await cache.get(PostId(1), UserId("u1")) is not None

    @pytest.mark.asyncio
    async def test_variants_are_isolated(self):
        """Page and full forests of the same post are separate entries."""
        # Arrange
        cache = InMemoryCommentTreeCache()
        await cache.set(PostId(1), None, _forest(1), ttl=60)

        # Act / Assert
        assert await cache.get(PostId(1), None, FULL_VARIANT) is None

    @pytest.mark.asyncio
    async def test_entries_expire(self):
        """An entry is a miss once its TTL has elapsed."""
        # Arrange
        clock = FakeClock()
        cache = InMemoryCommentTreeCache(clock=clock)
        await cache.set(PostId(1), None, _forest(1), ttl=60)

        # Act
        clock.now += 59
        before_expiry = await cache.get(PostId(1), None)
        clock.now += 1
        at_expiry = await cache.get(PostId(1), None)

        # Assert
        assert before_expiry is not None
        assert at_expiry is None
        assert len(cache) == 0

    @pytest.mark.asyncio
    async def test_invalidate_post_drops_all_viewers(self):
        """Invalidation removes every entry of the post and nothing else."""
        # Arrange
        cache = InMemoryCommentTreeCache()
        await cache.set(PostId(1), None, _forest(1), ttl=60)
        await cache.set(PostId(1), UserId("u1"), _forest(1), ttl=60, variant=FULL_VARIANT)
        await cache.set(PostId(10), None, _forest(2, post_id=10), ttl=60)

        # Act
        removed = await cache.invalidate_post(PostId(1))

        # Assert
        assert removed == 2
        assert await cache.get(PostId(1), None) is None
        assert await cache.get(PostId(10), None) is not None

    @pytest.mark.asyncio
    async def test_oldest_entry_is_evicted_when_full(self):
        """Inserting past capacity evicts the oldest inserted entry."""
        # Arrange
        cache = InMemoryCommentTreeCache(max_entries=2)
        await cache.set(PostId(1), None, _forest(1), ttl=60)
        await cache.set(PostId(2), None, _forest(2, post_id=2), ttl=60)

        # Act
        await cache.set(PostId(3), None, _forest(3, post_id=3), ttl=60)

        # Assert
        assert len(cache) == 2
        assert await cache.get(PostId(1), None) is None
        assert await cache.get(PostId(3), None) is not None

    @pytest.mark.asyncio
    async def test_sweep_removes_expired_entries(self):
        """A sweep drops expired entries without touching live ones."""
        # Arrange
        clock = FakeClock()
        cache = InMemoryCommentTreeCache(clock=clock)
        await cache.set(PostId(1), None, _forest(1), ttl=10)
        await cache.set(PostId(2), None, _forest(2, post_id=2), ttl=100)
        clock.now += 50

        # Act
        removed = cache.sweep()

        # Assert
        assert removed == 1
        assert len(cache) == 1

    @pytest.mark.asyncio
    async def test_clear(self):
        """Clear empties the cache."""
        cache = InMemoryCommentTreeCache()
        await cache.set(PostId(1), None, _forest(1), ttl=60)

        await cache.clear()

        assert len(cache) == 0

    @pytest.mark.asyncio
    async def test_start_and_stop_sweeper(self):
        """The sweeper task can be started and cancelled cleanly."""
        cache = InMemoryCommentTreeCache(sweep_interval=0.01)

        cache.start()
        await cache.stop()

        assert cache._sweeper is None
