"""Derived comment tree types.

These are built per request from fetched rows and are never persisted.
"""

from typing import Optional

from pydantic import Field

from discuss.domain.model.comment import Comment
from discuss.domain.model.common import DomainModel
from discuss.domain.value import VoteValue


class CommentNode(Comment):
    """A comment with its vote data and nested replies.

    The node itself is frozen; ``replies`` is filled in place while the
    forest is linked.
    """

    vote_count: int = 0
    caller_vote: Optional[VoteValue] = None
    # Direct replies in storage, including ones not loaded into ``replies``
    reply_count: int = 0
    replies: list["CommentNode"] = Field(default_factory=list)


class AggregateMaps(DomainModel):
    """Vote aggregates for one batch of targets.

    Targets missing from ``vote_counts`` have a score of 0. Targets missing
    from ``caller_votes`` were not voted on by the viewer.
    """

    vote_counts: dict[int, int] = Field(default_factory=dict)
    caller_votes: dict[int, VoteValue] = Field(default_factory=dict)
