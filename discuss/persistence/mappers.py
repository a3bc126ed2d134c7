"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict

from discuss.domain.model import Comment, Post, Vote
from discuss.domain.value import (
    CommentId,
    PostId,
    PostType,
    UserId,
)
from discuss.domain.value.types import Username


def row_to_post(row: Dict[str, Any]) -> Post:
    """Convert database row to Post domain model.

    Args:
        row: Database row as dict

    Returns:
        Post domain model
    """
    return Post(
        id=PostId(row["id"]),
        title=row["title"],
        body=row.get("body"),
        post_type=PostType(row["post_type"]),
        link_url=row.get("link_url"),
        author_id=UserId(str(row["author_id"])),
        author_username=Username(row["author_username"]),
        ai_summary=row.get("ai_summary"),
        ai_summary_generated_at=row.get("ai_summary_generated_at"),
        ai_summary_comment_count=row.get("ai_summary_comment_count") or 0,
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def post_to_dict(post: Post) -> Dict[str, Any]:
    """Convert Post domain model to database dict.

    Args:
        post: Post domain model

    Returns:
        Dict suitable for database insertion/update
    """
    return {
        "id": post.id,
        "title": post.title,
        "body": post.body,
        "post_type": post.post_type.value,
        "link_url": post.link_url,
        "author_id": str(post.author_id),
        "author_username": post.author_username.root,
        "ai_summary": post.ai_summary,
        "ai_summary_generated_at": post.ai_summary_generated_at,
        "ai_summary_comment_count": post.ai_summary_comment_count,
        "created_at": post.created_at,
        "updated_at": post.updated_at,
    }


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model.

    Args:
        row: Database row as dict

    Returns:
        Comment domain model
    """
    parent_id = row.get("parent_comment_id")
    return Comment(
        id=CommentId(row["id"]),
        post_id=PostId(row["post_id"]),
        author_id=UserId(str(row["author_id"])),
        author_username=Username(row["author_username"]),
        body=row["body"],
        parent_comment_id=CommentId(parent_id) if parent_id is not None else None,
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def vote_to_dict(vote: Vote) -> Dict[str, Any]:
    """Convert Vote domain model to database dict.

    Args:
        vote: Vote domain model

    Returns:
        Dict suitable for database insertion
    """
    return {
        "user_id": str(vote.user_id),
        "target_type": vote.target_type.value,
        "target_id": vote.target_id,
        "value": int(vote.value),
        "created_at": vote.created_at,
    }
