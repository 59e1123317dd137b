"""Test configuration and fixtures."""

from datetime import datetime, timezone
from uuid import uuid4

import logfire
from dishka import AsyncContainer

from blogger.domain.model import Blog, Comment, CommentatorInfo, Post, User
from blogger.domain.repository import (
    BlogRepository,
    CommentRepository,
    PostRepository,
    UserRepository,
)
from blogger.domain.value import BlogId, CommentId, Login, PostId, UserId
from blogger.util.password import hash_password

# Keep telemetry local while tests run
logfire.configure(send_to_logfire=False, console=False)

TEST_PASSWORD = "secret123"


def at(minute: int) -> datetime:
    """Fixed, timezone-aware timestamp on a test day."""
    return datetime(2024, 1, 1, 12, minute, tzinfo=timezone.utc)


async def add_user(env: AsyncContainer, login: str = "alice") -> User:
    """Store a user whose password is ``TEST_PASSWORD``."""
    user_repo = await env.get(UserRepository)
    return await user_repo.save(
        User(
            id=UserId(uuid4()),
            login=Login(login),
            email=f"{login}@example.com",
            password_hash=hash_password(TEST_PASSWORD),
        )
    )


async def add_blog(env: AsyncContainer, name: str = "Science") -> Blog:
    """Store a blog."""
    blog_repo = await env.get(BlogRepository)
    return await blog_repo.save(
        Blog(
            id=BlogId(uuid4()),
            name=name,
            description="A blog about things",
            website_url="https://example.com",
        )
    )


async def add_post(
    env: AsyncContainer, blog: Blog | None = None, title: str = "First post"
) -> Post:
    """Store a post, creating a blog for it when none is given."""
    blog = blog or await add_blog(env)
    post_repo = await env.get(PostRepository)
    return await post_repo.save(
        Post(
            id=PostId(uuid4()),
            title=title,
            short_description="Short description",
            content="Post content",
            blog_id=blog.id,
            blog_name=blog.name,
        )
    )


async def add_comment(env: AsyncContainer, post: Post, author: User) -> Comment:
    """Store a comment by ``author`` on ``post``."""
    comment_repo = await env.get(CommentRepository)
    return await comment_repo.save(
        Comment(
            id=CommentId(uuid4()),
            post_id=post.id,
            content="This is a long enough comment text",
            commentator_info=CommentatorInfo(
                user_id=author.id, user_login=str(author.login)
            ),
        )
    )
