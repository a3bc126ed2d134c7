"""Domain model entities for discussions."""

from discuss.domain.model.comment import Comment
from discuss.domain.model.comment_node import AggregateMaps, CommentNode
from discuss.domain.model.post import Post, SummaryMetadata
from discuss.domain.model.vote import Vote

__all__ = [
    "Post",
    "SummaryMetadata",
    "Comment",
    "CommentNode",
    "AggregateMaps",
    "Vote",
]
