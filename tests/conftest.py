"""Test configuration and fixtures."""

from datetime import datetime, timedelta, timezone

from discuss.domain.model import Comment, Post
from discuss.domain.value import CommentId, PostId, UserId
from discuss.domain.value.types import Username

# Fixed reference time so ordering and freshness checks are deterministic
BASE_TIME = datetime(2025, 1, 1, 12, 0, tzinfo=timezone.utc)


def make_post(post_id: int = 1, title: str = "Test Post", **overrides) -> Post:
    """Build a text post authored by ``author-1``."""
    fields = {
        "id": PostId(post_id),
        "title": title,
        "author_id": UserId("author-1"),
        "author_username": Username("author"),
        "body": "Post body",
        "created_at": BASE_TIME,
        "updated_at": BASE_TIME,
    }
    fields.update(overrides)
    return Post(**fields)


def make_comment(
    comment_id: int,
    post_id: int = 1,
    parent_comment_id: int | None = None,
    minutes: int = 0,
    author_id: str = "author-1",
    body: str | None = None,
) -> Comment:
    """Build a comment created ``minutes`` after BASE_TIME."""
    created_at = BASE_TIME + timedelta(minutes=minutes)
    return Comment(
        id=CommentId(comment_id),
        post_id=PostId(post_id),
        author_id=UserId(author_id),
        author_username=Username(author_id),
        body=body or f"Comment {comment_id}",
        parent_comment_id=CommentId(parent_comment_id) if parent_comment_id else None,
        created_at=created_at,
        updated_at=created_at,
    )
