"""Redis-backed comment tree cache, shared across worker processes."""

from typing import List, Optional

import logfire
import redis.asyncio as redis
from pydantic import TypeAdapter, ValidationError
from redis.exceptions import RedisError

from discuss.adapter.error import CacheUnavailableError
from discuss.domain.model.comment_node import CommentNode
from discuss.domain.repository.cache import (
    PAGE_VARIANT,
    CommentTreeCache,
    cache_key,
    post_prefix,
)
from discuss.domain.value import PostId, UserId

_forest_adapter = TypeAdapter(List[CommentNode])


class RedisCommentTreeCache(CommentTreeCache):
    """Comment tree cache stored in Redis.

    Forests are stored as JSON with a native Redis expiry. Post invalidation
    scans for the post's key prefix and deletes the matches.
    """

    def __init__(self, client: redis.Redis, namespace: str = "discuss") -> None:
        """Initialize cache.

        Args:
            client: Redis client
            namespace: Prefix isolating our keys from other Redis users
        """
        self.client = client
        self.namespace = namespace

    def _key(self, key: str) -> str:
        return f"{self.namespace}:{key}"

    async def get(
        self,
        post_id: PostId,
        viewer_id: Optional[UserId],
        variant: str = PAGE_VARIANT,
    ) -> Optional[List[CommentNode]]:
        key = self._key(cache_key(post_id, viewer_id, variant))
        try:
            raw = await self.client.get(key)
        except RedisError as e:
            raise CacheUnavailableError(f"Redis GET failed: {e}") from e
        if raw is None:
            return None
        try:
            return _forest_adapter.validate_json(raw)
        except ValidationError as e:
            logfire.warn("Discarding unreadable cache entry", key=key, error=str(e))
            try:
                await self.client.delete(key)
            except RedisError as delete_error:
                raise CacheUnavailableError(
                    f"Redis DEL failed: {delete_error}"
                ) from delete_error
            return None

    async def set(
        self,
        post_id: PostId,
        viewer_id: Optional[UserId],
        forest: List[CommentNode],
        ttl: float,
        variant: str = PAGE_VARIANT,
    ) -> None:
        key = self._key(cache_key(post_id, viewer_id, variant))
        payload = _forest_adapter.dump_json(forest)
        try:
            await self.client.set(key, payload, ex=max(1, int(ttl)))
        except RedisError as e:
            raise CacheUnavailableError(f"Redis SET failed: {e}") from e

    async def invalidate_post(self, post_id: PostId) -> int:
        pattern = f"{self._key(post_prefix(post_id))}*"
        try:
            keys = [key async for key in self.client.scan_iter(match=pattern)]
            if keys:
                await self.client.delete(*keys)
        except RedisError as e:
            raise CacheUnavailableError(f"Redis invalidation failed: {e}") from e
        return len(keys)

    async def clear(self) -> None:
        try:
            keys = [key async for key in self.client.scan_iter(match=f"{self.namespace}:*")]
            if keys:
                await self.client.delete(*keys)
        except RedisError as e:
            raise CacheUnavailableError(f"Redis clear failed: {e}") from e
