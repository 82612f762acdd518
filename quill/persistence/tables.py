"""SQLAlchemy table definitions for Quill.

They match the schema defined in Alembic migrations. Engagement counters are
not stored: like, bookmark, follower and comment counts are always computed
from the relations and comments tables.
"""

from sqlalchemy import (
    CheckConstraint,
    Column,
    ForeignKey,
    Index,
    MetaData,
    String,
    Table,
    Text,
    UniqueConstraint,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# USERS TABLE (owned by the identity service, read-only here)
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("handle", String(255), nullable=False, unique=True),
    Column("display_name", String(255), nullable=True),
    Column("avatar_url", Text, nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

# ============================================================================
# POSTS TABLE
# ============================================================================
posts_table = Table(
    "posts",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("slug", String(100), nullable=False, unique=True),
    Column("title", String(300), nullable=False),
    Column(
        "author_id",
        UUID(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_posts_author_id", posts_table.c.author_id)

# ============================================================================
# COMMENTS TABLE (flat, one optional parent level)
# ============================================================================
comments_table = Table(
    "comments",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column(
        "post_id",
        UUID(as_uuid=True),
        ForeignKey("posts.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "author_id",
        UUID(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "parent_id",
        UUID(as_uuid=True),
        ForeignKey("comments.id", ondelete="CASCADE"),
        nullable=True,
    ),
    Column("content", Text, nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("length(trim(content)) > 0", name="comment_content_not_blank"),
    CheckConstraint("parent_id IS NULL OR parent_id <> id", name="comment_not_own_parent"),
)

Index("idx_comments_post_id_created_at", comments_table.c.post_id, comments_table.c.created_at)
Index("idx_comments_parent_id", comments_table.c.parent_id)

# ============================================================================
# RELATIONS TABLE (like, bookmark, follow edges)
# ============================================================================
relations_table = Table(
    "relations",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column(
        "source_id",
        UUID(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    ),
    # Post ID for like/bookmark, user ID for follow (no FK: polymorphic)
    Column("target_id", UUID(as_uuid=True), nullable=False),
    Column("kind", String(20), nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("source_id", "kind", "target_id", name="uq_relation_edge"),
    CheckConstraint(
        "kind IN ('like', 'bookmark', 'follow')", name="relation_kind_valid"
    ),
    CheckConstraint(
        "kind <> 'follow' OR source_id <> target_id", name="relation_no_self_follow"
    ),
)

Index("idx_relations_kind_target", relations_table.c.kind, relations_table.c.target_id)
