"""Response items for comment forests."""

from datetime import datetime
from typing import Iterable, Optional

from pydantic import BaseModel

from discuss.domain.model.comment_node import CommentNode


class CommentNodeItem(BaseModel):
    """Comment with its vote data and nested replies."""

    id: int
    post_id: int
    author_id: str
    author_username: str
    body: str
    parent_comment_id: Optional[int]
    created_at: datetime
    updated_at: datetime
    vote_count: int
    user_vote: Optional[int]  # -1, 1 or null
    reply_count: int  # Direct replies, loaded or not
    replies: list["CommentNodeItem"]

    @classmethod
    def from_node(cls, node: CommentNode) -> "CommentNodeItem":
        """Convert a forest node and its replies."""
        return cls(
            id=node.id,
            post_id=node.post_id,
            author_id=str(node.author_id),
            author_username=node.author_username.root,
            body=node.body,
            parent_comment_id=node.parent_comment_id,
            created_at=node.created_at,
            updated_at=node.updated_at,
            vote_count=node.vote_count,
            user_vote=int(node.caller_vote) if node.caller_vote is not None else None,
            reply_count=node.reply_count,
            replies=[cls.from_node(reply) for reply in node.replies],
        )


def to_items(forest: Iterable[CommentNode]) -> list[CommentNodeItem]:
    """Convert a whole forest to response items."""
    return [CommentNodeItem.from_node(node) for node in forest]
