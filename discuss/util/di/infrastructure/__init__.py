"""Infrastructure providers."""

# Import bases
from .cache import CacheProvider
from .persistence import PersistenceProvider
from .summarizer import SummarizerProvider

# Import implementations (needed for __subclasses__())
from .cache import ProdCacheProvider  # noqa: F401
from .persistence import ProdPersistenceProvider  # noqa: F401
from .summarizer import ProdSummarizerProvider  # noqa: F401

__all__ = [
    "CacheProvider",
    "PersistenceProvider",
    "ProdCacheProvider",
    "ProdPersistenceProvider",
    "ProdSummarizerProvider",
    "SummarizerProvider",
]
