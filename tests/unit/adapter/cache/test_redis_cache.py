"""Unit tests for RedisCommentTreeCache with a stubbed client."""

from unittest.mock import AsyncMock, MagicMock

import pytest
from redis.exceptions import ConnectionError as RedisConnectionError

from discuss.adapter.cache import RedisCommentTreeCache
from discuss.adapter.error import CacheUnavailableError
from discuss.domain.model import CommentNode
from discuss.domain.value import PostId, UserId
from tests.conftest import make_comment


def _forest() -> list[CommentNode]:
    root = make_comment(1)
    reply = make_comment(2, parent_comment_id=1, minutes=1)
    return [
        CommentNode(
            **root.model_dump(),
            vote_count=3,
            replies=[CommentNode(**reply.model_dump(), vote_count=-1, replies=[])],
        )
    ]


def _scan(keys: list[bytes]):
    async def scan_iter(match: str):
        for key in keys:
            yield key

    return MagicMock(side_effect=scan_iter)


class TestRedisCommentTreeCache:
    """Tests for RedisCommentTreeCache."""

    @pytest.mark.asyncio
    async def test_set_stores_json_with_expiry(self):
        """Forests are written under the namespaced key with a whole-second TTL."""
        # Arrange
        client = AsyncMock()
        cache = RedisCommentTreeCache(client)

        # Act
        await cache.set(PostId(5), UserId("u1"), _forest(), ttl=60.5)

        # Assert
        args, kwargs = client.set.call_args
        assert args[0] == "discuss:comments:5:u1:page"
        assert kwargs["ex"] == 60

    @pytest.mark.asyncio
    async def test_get_decodes_stored_forest(self):
        """A stored payload decodes back into nested nodes."""
        # Arrange
        client = AsyncMock()
        cache = RedisCommentTreeCache(client)
        await cache.set(PostId(5), None, _forest(), ttl=60)
        client.get.return_value = client.set.call_args.args[1]

        # Act
        forest = await cache.get(PostId(5), None)

        # Assert
        assert forest[0].vote_count == 3
        assert forest[0].replies[0].id == 2
        assert forest[0].replies[0].vote_count == -1

    @pytest.mark.asyncio
    async def test_get_miss(self):
        """A missing key is a miss."""
        client = AsyncMock()
        client.get.return_value = None
        cache = RedisCommentTreeCache(client)

        assert await cache.get(PostId(5), None) is None

    @pytest.mark.asyncio
    async def test_unreadable_entry_is_discarded(self):
        """Garbage in Redis is deleted and treated as a miss."""
        # Arrange
        client = AsyncMock()
        client.get.return_value = b"not json"
        cache = RedisCommentTreeCache(client)

        # Act
        forest = await cache.get(PostId(5), None)

        # Assert
        assert forest is None
        client.delete.assert_awaited_once_with("discuss:comments:5:anon:page")

    @pytest.mark.asyncio
    async def test_failed_discard_becomes_cache_unavailable(self):
        """A Redis error while deleting garbage is reported like other Redis errors."""
        # Arrange
        client = AsyncMock()
        client.get.return_value = b"not json"
        client.delete.side_effect = RedisConnectionError("reset")
        cache = RedisCommentTreeCache(client)

        # Act / Assert
        with pytest.raises(CacheUnavailableError):
            await cache.get(PostId(5), None)

    @pytest.mark.asyncio
    async def test_connection_errors_become_cache_unavailable(self):
        """Redis errors surface as CacheUnavailableError."""
        # Arrange
        client = AsyncMock()
        client.get.side_effect = RedisConnectionError("refused")
        cache = RedisCommentTreeCache(client)

        # Act / Assert
        with pytest.raises(CacheUnavailableError):
            await cache.get(PostId(5), None)

    @pytest.mark.asyncio
    async def test_invalidate_post_deletes_matching_keys(self):
        """Invalidation scans the post prefix and deletes every match."""
        # Arrange
        client = AsyncMock()
        keys = [b"discuss:comments:5:anon:page", b"discuss:comments:5:u1:full"]
        client.scan_iter = _scan(keys)
        cache = RedisCommentTreeCache(client)

        # Act
        removed = await cache.invalidate_post(PostId(5))

        # Assert
        assert removed == 2
        client.scan_iter.assert_called_once_with(match="discuss:comments:5:*")
        client.delete.assert_awaited_once_with(*keys)

    @pytest.mark.asyncio
    async def test_invalidate_without_matches_skips_delete(self):
        """Nothing to delete means no DELETE call."""
        client = AsyncMock()
        client.scan_iter = _scan([])
        cache = RedisCommentTreeCache(client)

        assert await cache.invalidate_post(PostId(5)) == 0
        client.delete.assert_not_called()
