"""Domain value objects for discussions.

Value objects are immutable and defined by their values, not identity.
"""

from enum import Enum, IntEnum

from pydantic import field_validator

from discuss.domain.value.common import RootValueObject


class VoteTargetType(str, Enum):
    """Type of entity that can be voted on."""

    POST = "post"
    COMMENT = "comment"


class VoteValue(IntEnum):
    """Value of a single vote."""

    UP = 1
    DOWN = -1


class PostType(str, Enum):
    """Kind of post."""

    TEXT = "text"
    LINK = "link"
    POLL = "poll"


class Username(RootValueObject[str]):
    """Display name of a user, denormalized onto posts and comments."""

    @field_validator("root")
    @classmethod
    def validate_username(cls, v: str) -> str:
        """Validate username is not empty and within length limits."""
        if len(v) < 1 or len(v) > 255:
            raise ValueError("Username must be 1-255 characters")
        return v
