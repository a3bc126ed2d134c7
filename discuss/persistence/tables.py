"""SQLAlchemy table definitions for discussions.

Tables are used through SQLAlchemy Core; rows are mapped to domain models
by hand (see mappers.py). They match the schema defined in Alembic
migrations.
"""

from sqlalchemy import (
    CheckConstraint,
    Column,
    Enum,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    SmallInteger,
    String,
    Table,
    Text,
    UniqueConstraint,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# POSTS TABLE
# ============================================================================
posts_table = Table(
    "posts",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("title", String(300), nullable=False),
    Column("body", Text, nullable=True),
    Column(
        "post_type",
        Enum("text", "link", "poll", name="post_type", create_type=False),
        nullable=False,
        server_default="text",
    ),
    Column("link_url", Text, nullable=True),
    # Users live in the auth provider; ids are its subject strings
    Column("author_id", String(255), nullable=False),
    Column("author_username", String(255), nullable=False),  # Denormalized
    # AI summary cache, written only by the summary regeneration path
    Column("ai_summary", Text, nullable=True),
    Column("ai_summary_generated_at", TIMESTAMP(timezone=True), nullable=True),
    Column("ai_summary_comment_count", Integer, nullable=False, server_default="0"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint(
        "post_type <> 'link' OR link_url IS NOT NULL",
        name="link_post_has_url",
    ),
)

Index("idx_posts_created_at", posts_table.c.created_at.desc())
Index("idx_posts_author_id", posts_table.c.author_id)

# ============================================================================
# COMMENTS TABLE
# ============================================================================
comments_table = Table(
    "comments",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("post_id", Integer, ForeignKey("posts.id", ondelete="CASCADE"), nullable=False),
    Column(
        "parent_comment_id",
        Integer,
        ForeignKey("comments.id", ondelete="CASCADE"),
        nullable=True,
    ),
    Column("author_id", String(255), nullable=False),
    Column("author_username", String(255), nullable=False),  # Denormalized
    Column("body", Text, nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index(
    "idx_comments_post_parent_created",
    comments_table.c.post_id,
    comments_table.c.parent_comment_id,
    comments_table.c.created_at.desc(),
)
Index("idx_comments_parent_comment_id", comments_table.c.parent_comment_id)
Index("idx_comments_author_id", comments_table.c.author_id)

# ============================================================================
# VOTES TABLE
# ============================================================================
votes_table = Table(
    "votes",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("user_id", String(255), nullable=False),
    Column(
        "target_type",
        Enum("post", "comment", name="vote_target_type", create_type=False),
        nullable=False,
    ),
    Column("target_id", Integer, nullable=False),
    Column("value", SmallInteger, nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("value IN (-1, 1)", name="vote_value_up_or_down"),
    UniqueConstraint("user_id", "target_type", "target_id", name="unique_vote"),
)

Index("idx_votes_target", votes_table.c.target_type, votes_table.c.target_id)
