"""PostgreSQL repository implementations."""

from discuss.persistence.repository.comment import PostgresCommentRepository
from discuss.persistence.repository.post import PostgresPostRepository
from discuss.persistence.repository.unit_of_work import SessionUnitOfWork
from discuss.persistence.repository.vote import PostgresVoteRepository

__all__ = [
    "PostgresPostRepository",
    "PostgresCommentRepository",
    "PostgresVoteRepository",
    "SessionUnitOfWork",
]
