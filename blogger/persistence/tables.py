"""SQLAlchemy table definitions for the blogger platform.

They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    Boolean,
    Column,
    Enum,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    UniqueConstraint,
)
from sqlalchemy.dialects.postgresql import JSONB, TIMESTAMP, UUID

metadata = MetaData()

# ============================================================================
# USERS TABLE
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("login", String(10), nullable=False),
    Column("email", String(255), nullable=False),
    Column("password_hash", String(255), nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column("deleted_at", TIMESTAMP(timezone=True), nullable=True),  # Soft delete
)

# Unique among live users; soft-deleted users release login and e-mail
Index(
    "uq_users_login_live",
    users_table.c.login,
    unique=True,
    postgresql_where=users_table.c.deleted_at.is_(None),
)
Index(
    "uq_users_email_live",
    users_table.c.email,
    unique=True,
    postgresql_where=users_table.c.deleted_at.is_(None),
)

# ============================================================================
# BLOGS TABLE
# ============================================================================
blogs_table = Table(
    "blogs",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("name", String(15), nullable=False),
    Column("description", String(500), nullable=False),
    Column("website_url", String(100), nullable=False),
    Column("is_membership", Boolean, nullable=False, server_default="false"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column("deleted_at", TIMESTAMP(timezone=True), nullable=True),
)

# ============================================================================
# POSTS TABLE (with denormalized like summary)
# ============================================================================
posts_table = Table(
    "posts",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("title", String(30), nullable=False),
    Column("short_description", String(100), nullable=False),
    Column("content", String(1000), nullable=False),
    Column("blog_id", UUID, ForeignKey("blogs.id", ondelete="CASCADE"), nullable=False),
    Column("blog_name", String(15), nullable=False),
    Column("likes_count", Integer, nullable=False, server_default="0"),
    Column("dislikes_count", Integer, nullable=False, server_default="0"),
    Column("newest_likes", JSONB, nullable=False, server_default="[]"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column("deleted_at", TIMESTAMP(timezone=True), nullable=True),
)

Index("idx_posts_blog_id", posts_table.c.blog_id)
Index("idx_posts_created_at", posts_table.c.created_at.desc())

# ============================================================================
# COMMENTS TABLE
# ============================================================================
comments_table = Table(
    "comments",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("post_id", UUID, ForeignKey("posts.id", ondelete="CASCADE"), nullable=False),
    Column("content", Text, nullable=False),
    Column("user_id", UUID, ForeignKey("users.id"), nullable=False),
    Column("user_login", String(10), nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_comments_post_id", comments_table.c.post_id)

# ============================================================================
# LIKES TABLE (one fact per user and parent)
# ============================================================================
likes_table = Table(
    "likes",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("user_id", UUID, ForeignKey("users.id"), nullable=False),
    Column(
        "parent_type",
        Enum("post", "comment", name="like_parent_type", create_type=False),
        nullable=False,
    ),
    Column("parent_id", UUID, nullable=False),
    Column(
        "status",
        Enum("None", "Like", "Dislike", name="like_status", create_type=False),
        nullable=False,
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("user_id", "parent_type", "parent_id", name="uq_like_user_parent"),
)

Index("idx_likes_parent", likes_table.c.parent_type, likes_table.c.parent_id)
Index(
    "idx_likes_parent_newest",
    likes_table.c.parent_type,
    likes_table.c.parent_id,
    likes_table.c.status,
    likes_table.c.created_at.desc(),
)
