"""Comment entity.

Comments are threaded discussions on posts. A reply points at its parent
through ``parent_comment_id``; the parent always belongs to the same post.
"""

from datetime import datetime, timezone
from typing import Optional

from pydantic import Field

from discuss.domain.model.common import DomainModel
from discuss.domain.value import CommentId, PostId, UserId
from discuss.domain.value.types import Username


class Comment(DomainModel):
    """Comment entity.

    Represents a comment on a post or a reply to another comment.
    Comments are never reparented. Deleting a comment deletes its
    replies in storage.
    """

    id: CommentId
    post_id: PostId
    author_id: UserId
    author_username: Username
    body: str = Field(min_length=1, max_length=10000)
    parent_comment_id: Optional[CommentId] = None
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def is_top_level(self) -> bool:
        """Whether this comment is a direct comment on the post."""
        return self.parent_comment_id is None
