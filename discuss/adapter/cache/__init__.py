"""Comment tree cache adapters."""

from .memory import InMemoryCommentTreeCache
from .redis_cache import RedisCommentTreeCache

__all__ = ["InMemoryCommentTreeCache", "RedisCommentTreeCache"]
