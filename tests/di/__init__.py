"""Mock providers for testing."""

from .cache import MockCacheProvider
from .persistence import MockPersistenceProvider
from .summarizer import MockSummarizerProvider
from .container import build_test_container

__all__ = [
    "MockCacheProvider",
    "MockPersistenceProvider",
    "MockSummarizerProvider",
    "build_test_container",
]
