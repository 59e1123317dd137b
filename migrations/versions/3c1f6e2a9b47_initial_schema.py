"""initial_schema

Create the schema for the blogger platform:
- Users (login/e-mail accounts, soft-deleted)
- Blogs and posts (posts carry a materialized like summary)
- Comments (flat, per post)
- Likes (one reaction fact per user and parent)

Revision ID: 3c1f6e2a9b47
Revises:
Create Date: 2026-10-19 10:12:04.518392

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3c1f6e2a9b47"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _id_column() -> sa.Column:
    return sa.Column(
        "id",
        sa.UUID(),
        server_default=sa.text("uuid_generate_v4()"),
        nullable=False,
    )


def _timestamp_column(name: str) -> sa.Column:
    return sa.Column(
        name,
        sa.TIMESTAMP(timezone=True),
        nullable=False,
        server_default=sa.text("NOW()"),
    )


def upgrade() -> None:
    """Upgrade schema."""
    op.execute('CREATE EXTENSION IF NOT EXISTS "uuid-ossp"')

    # Create ENUM types (idempotent)
    op.execute("""
        DO $$ BEGIN
            CREATE TYPE like_parent_type AS ENUM ('post', 'comment');
        EXCEPTION
            WHEN duplicate_object THEN null;
        END $$;
    """)

    op.execute("""
        DO $$ BEGIN
            CREATE TYPE like_status AS ENUM ('None', 'Like', 'Dislike');
        EXCEPTION
            WHEN duplicate_object THEN null;
        END $$;
    """)

    # ========================================================================
    # USERS table
    # ========================================================================
    op.create_table(
        "users",
        _id_column(),
        sa.Column("login", sa.String(10), nullable=False),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("password_hash", sa.String(255), nullable=False),
        _timestamp_column("created_at"),
        sa.Column("deleted_at", sa.TIMESTAMP(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_users_login", "users", ["login"])
    op.create_index("idx_users_email", "users", ["email"])

    # ========================================================================
    # BLOGS table
    # ========================================================================
    op.create_table(
        "blogs",
        _id_column(),
        sa.Column("name", sa.String(15), nullable=False),
        sa.Column("description", sa.String(500), nullable=False),
        sa.Column("website_url", sa.String(100), nullable=False),
        sa.Column(
            "is_membership", sa.Boolean(), nullable=False, server_default="false"
        ),
        _timestamp_column("created_at"),
        sa.Column("deleted_at", sa.TIMESTAMP(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )

    # ========================================================================
    # POSTS table (likes_count, dislikes_count and newest_likes are
    # rewritten on every effective like-status change)
    # ========================================================================
    op.create_table(
        "posts",
        _id_column(),
        sa.Column("title", sa.String(30), nullable=False),
        sa.Column("short_description", sa.String(100), nullable=False),
        sa.Column("content", sa.String(1000), nullable=False),
        sa.Column("blog_id", sa.UUID(), nullable=False),
        sa.Column("blog_name", sa.String(15), nullable=False),
        sa.Column("likes_count", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("dislikes_count", sa.Integer(), nullable=False, server_default="0"),
        sa.Column(
            "newest_likes",
            postgresql.JSONB(),
            nullable=False,
            server_default=sa.text("'[]'::jsonb"),
        ),
        _timestamp_column("created_at"),
        _timestamp_column("updated_at"),
        sa.Column("deleted_at", sa.TIMESTAMP(timezone=True), nullable=True),
        sa.ForeignKeyConstraint(["blog_id"], ["blogs.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_posts_blog_id", "posts", ["blog_id"])
    op.create_index(
        "idx_posts_created_at", "posts", [sa.text("created_at DESC")]
    )

    # ========================================================================
    # COMMENTS table
    # ========================================================================
    op.create_table(
        "comments",
        _id_column(),
        sa.Column("post_id", sa.UUID(), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("user_id", sa.UUID(), nullable=False),
        sa.Column("user_login", sa.String(10), nullable=False),
        _timestamp_column("created_at"),
        _timestamp_column("updated_at"),
        sa.ForeignKeyConstraint(["post_id"], ["posts.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_comments_post_id", "comments", ["post_id"])

    # ========================================================================
    # LIKES table
    # ========================================================================
    op.create_table(
        "likes",
        _id_column(),
        sa.Column("user_id", sa.UUID(), nullable=False),
        sa.Column(
            "parent_type",
            postgresql.ENUM(
                "post", "comment", name="like_parent_type", create_type=False
            ),
            nullable=False,
        ),
        sa.Column("parent_id", sa.UUID(), nullable=False),
        sa.Column(
            "status",
            postgresql.ENUM(
                "None", "Like", "Dislike", name="like_status", create_type=False
            ),
            nullable=False,
        ),
        _timestamp_column("created_at"),
        _timestamp_column("updated_at"),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"]),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint(
            "user_id", "parent_type", "parent_id", name="uq_like_user_parent"
        ),
    )
    op.create_index("idx_likes_parent", "likes", ["parent_type", "parent_id"])
    op.create_index(
        "idx_likes_parent_newest",
        "likes",
        ["parent_type", "parent_id", "status", sa.text("created_at DESC")],
    )


def downgrade() -> None:
    """Downgrade schema."""
    # Drop tables (in reverse order of dependencies)
    op.drop_table("likes")
    op.drop_table("comments")
    op.drop_table("posts")
    op.drop_table("blogs")
    op.drop_table("users")

    # Drop ENUM types
    op.execute("DROP TYPE IF EXISTS like_status")
    op.execute("DROP TYPE IF EXISTS like_parent_type")
