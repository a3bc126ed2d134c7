"""Repository interfaces for the discussion domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from discuss.domain.repository.cache import ANONYMOUS_VIEWER, CommentTreeCache
from discuss.domain.repository.comment import CommentRepository
from discuss.domain.repository.post import PostRepository
from discuss.domain.repository.unit_of_work import UnitOfWork
from discuss.domain.repository.vote import VoteRepository

__all__ = [
    "PostRepository",
    "CommentRepository",
    "VoteRepository",
    "CommentTreeCache",
    "ANONYMOUS_VIEWER",
    "UnitOfWork",
]
