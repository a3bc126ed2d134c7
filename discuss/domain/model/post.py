"""Post aggregate root."""

from datetime import datetime, timezone
from typing import Optional

from pydantic import Field, model_validator

from discuss.domain.model.common import DomainModel
from discuss.domain.value import PostId, PostType, UserId
from discuss.domain.value.types import Username


class SummaryMetadata(DomainModel):
    """Cached AI summary state stored on a post.

    Only the summary regeneration path writes these fields.
    """

    summary: Optional[str] = None
    generated_at: Optional[datetime] = None
    comment_count_at_generation: int = Field(default=0, ge=0)


class Post(DomainModel):
    """Post aggregate root.

    Link posts require a URL; text and poll posts carry an optional body.
    """

    id: PostId
    title: str = Field(min_length=1, max_length=300)
    post_type: PostType = PostType.TEXT
    author_id: UserId
    author_username: Username
    body: Optional[str] = Field(default=None, max_length=40000)
    link_url: Optional[str] = None
    ai_summary: Optional[str] = None
    ai_summary_generated_at: Optional[datetime] = None
    ai_summary_comment_count: int = Field(default=0, ge=0)
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    @model_validator(mode="after")
    def validate_post_type_content(self) -> "Post":
        """Validate that link posts carry a URL."""
        if self.post_type == PostType.LINK and not self.link_url:
            raise ValueError("URL is required for link posts")
        return self

    @property
    def summary_metadata(self) -> SummaryMetadata:
        """Summary cache state as a value object."""
        return SummaryMetadata(
            summary=self.ai_summary,
            generated_at=self.ai_summary_generated_at,
            comment_count_at_generation=self.ai_summary_comment_count,
        )
