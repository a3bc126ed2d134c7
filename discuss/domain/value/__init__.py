"""Domain value objects for discussions."""

from discuss.domain.value.identifiers import (
    CommentId,
    PostId,
    UserId,
    VoteId,
    parse_identifier,
)
from discuss.domain.value.types import (
    PostType,
    Username,
    VoteTargetType,
    VoteValue,
)

__all__ = [
    # Identifiers
    "PostId",
    "CommentId",
    "VoteId",
    "UserId",
    "parse_identifier",
    # Types
    "PostType",
    "Username",
    "VoteTargetType",
    "VoteValue",
]
