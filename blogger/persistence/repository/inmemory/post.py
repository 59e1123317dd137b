"""In-memory post repository for testing."""

from typing import Optional

from blogger.domain.model.like import ExtendedLikesInfo
from blogger.domain.model.post import Post
from blogger.domain.repository.post import PostRepository
from blogger.domain.value import BlogId, PostId, PostSortField, SortDirection

_SORT_KEYS = {
    PostSortField.CREATED_AT: lambda p: p.created_at,
    PostSortField.TITLE: lambda p: p.title,
    PostSortField.BLOG_NAME: lambda p: p.blog_name,
}


class InMemoryPostRepository(PostRepository):
    """In-memory implementation of PostRepository for testing."""

    def __init__(self) -> None:
        self._posts: dict[PostId, Post] = {}

    def _matching(self, blog_id: Optional[BlogId]) -> list[Post]:
        posts = [p for p in self._posts.values() if p.deleted_at is None]
        if blog_id is not None:
            posts = [p for p in posts if p.blog_id == blog_id]
        return posts

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        post = self._posts.get(post_id)
        if post is None or post.deleted_at is not None:
            return None
        return post

    async def find_all(
        self,
        sort_by: PostSortField = PostSortField.CREATED_AT,
        sort_direction: SortDirection = SortDirection.DESC,
        blog_id: Optional[BlogId] = None,
        limit: int = 10,
        offset: int = 0,
    ) -> list[Post]:
        """Find posts with optional blog filter, sorting and pagination."""
        posts = sorted(
            self._matching(blog_id),
            key=_SORT_KEYS[sort_by],
            reverse=sort_direction == SortDirection.DESC,
        )
        return posts[offset : offset + limit]

    async def count(self, blog_id: Optional[BlogId] = None) -> int:
        """Count posts, optionally of a single blog."""
        return len(self._matching(blog_id))

    async def save(self, post: Post) -> Post:
        """Save or update a post, keeping any stored like summary."""
        existing = self._posts.get(post.id)
        if existing is not None:
            post = post.with_likes_info(existing.extended_likes_info)
        self._posts[post.id] = post
        return post

    async def update_likes_info(
        self, post_id: PostId, likes_info: ExtendedLikesInfo
    ) -> None:
        """Overwrite the stored like summary of a post."""
        post = self._posts.get(post_id)
        if post:
            self._posts[post_id] = post.with_likes_info(likes_info)

    async def delete_all(self) -> None:
        """Remove every stored post."""
        self._posts.clear()
