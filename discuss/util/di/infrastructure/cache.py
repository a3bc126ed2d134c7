"""Comment tree cache infrastructure providers."""

from collections.abc import AsyncIterator

import logfire
import redis.asyncio as redis
from dishka import Scope, provide

from discuss.adapter.cache import InMemoryCommentTreeCache, RedisCommentTreeCache
from discuss.config import CacheSettings
from discuss.domain.repository import CommentTreeCache
from discuss.util.di.base import ProviderBase


class CacheProvider(ProviderBase):
    """Cache component base."""

    __mock_component__ = "cache"


class ProdCacheProvider(CacheProvider):
    """Production cache provider.

    The backend is chosen by ``CACHE__BACKEND``. The cache lives as long as
    the container, so every request shares it.
    """

    __is_mock__ = False

    @provide(scope=Scope.APP)
    async def get_comment_tree_cache(
        self, settings: CacheSettings
    ) -> AsyncIterator[CommentTreeCache]:
        """Provide comment tree cache, released on container close."""
        if settings.backend == "redis":
            client = redis.from_url(settings.redis_url)
            logfire.info("Using Redis comment cache")
            yield RedisCommentTreeCache(client)
            await client.aclose()
            return

        cache = InMemoryCommentTreeCache(
            max_entries=settings.max_entries,
            sweep_interval=settings.sweep_interval,
        )
        cache.start()
        logfire.info(
            "Using in-memory comment cache",
            max_entries=settings.max_entries,
            sweep_interval=settings.sweep_interval,
        )
        yield cache
        await cache.stop()
