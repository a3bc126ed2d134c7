"""Strongly typed identifiers for discussion entities.

Posts, comments and votes use integer keys from the relational store.
Users are identified by the auth provider's subject (a UUID string).
"""

import re
from typing import NewType

from discuss.domain.error import InvalidIdentifierError

# Core domain entity identifiers
PostId = NewType("PostId", int)
CommentId = NewType("CommentId", int)
VoteId = NewType("VoteId", int)
UserId = NewType("UserId", str)

# Upper bound of the INTEGER primary key columns
MAX_IDENTIFIER = 2_147_483_647

_DIGITS = re.compile(r"[0-9]+")


def parse_identifier(value: str | int, resource: str) -> int:
    """Parse a client-supplied identifier.

    Args:
        value: Raw identifier (path segment or JSON value)
        resource: Resource name used in the error message

    Returns:
        Positive integer identifier that fits the id columns

    Raises:
        InvalidIdentifierError: If the value is not a positive integer
            or exceeds MAX_IDENTIFIER
    """
    if isinstance(value, bool):
        raise InvalidIdentifierError(resource, str(value))
    if isinstance(value, int):
        parsed = value
    else:
        text = value.strip()
        if not _DIGITS.fullmatch(text):
            raise InvalidIdentifierError(resource, value)
        parsed = int(text)
    if parsed <= 0 or parsed > MAX_IDENTIFIER:
        raise InvalidIdentifierError(resource, str(value))
    return parsed
