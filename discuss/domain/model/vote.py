"""Vote entity.

Each user has at most one vote per target. Casting again overwrites the
previous value.
"""

from datetime import datetime, timezone

from pydantic import Field

from discuss.domain.model.common import DomainModel
from discuss.domain.value import UserId, VoteTargetType, VoteValue


class Vote(DomainModel):
    """Vote entity.

    Business rules:
    - One vote per (user, target type, target) (database unique constraint)
    - Up (+1) or down (-1)
    - Polymorphic reference to the target (post or comment)
    """

    user_id: UserId
    target_type: VoteTargetType
    target_id: int  # PostId or CommentId
    value: VoteValue
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
