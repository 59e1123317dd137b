"""Post repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from blogger.domain.model.like import ExtendedLikesInfo
from blogger.domain.model.post import Post
from blogger.domain.value import BlogId, PostId, PostSortField, SortDirection


class PostRepository(ABC):
    """Repository for Post entity.

    Soft-deleted posts are invisible to every finder.
    """

    @abstractmethod
    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID.

        Args:
            post_id: The post's unique identifier

        Returns:
            The post if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(
        self,
        sort_by: PostSortField = PostSortField.CREATED_AT,
        sort_direction: SortDirection = SortDirection.DESC,
        blog_id: Optional[BlogId] = None,
        limit: int = 10,
        offset: int = 0,
    ) -> List[Post]:
        """Find posts with optional blog filter, sorting and pagination.

        Args:
            sort_by: Field to sort by
            sort_direction: Sort direction
            blog_id: Only posts of this blog if given
            limit: Page size
            offset: Number of posts to skip

        Returns:
            List of posts
        """
        pass

    @abstractmethod
    async def count(self, blog_id: Optional[BlogId] = None) -> int:
        """Count posts, optionally of a single blog."""
        pass

    @abstractmethod
    async def save(self, post: Post) -> Post:
        """Save a post (create or update).

        Args:
            post: The post to save

        Returns:
            The saved post
        """
        pass

    @abstractmethod
    async def update_likes_info(
        self, post_id: PostId, likes_info: ExtendedLikesInfo
    ) -> None:
        """Overwrite the stored like summary of a post.

        Only the like summary columns are written, so concurrent edits of
        the post content are not clobbered.

        Args:
            post_id: The post ID
            likes_info: Freshly computed summary
        """
        pass

    @abstractmethod
    async def delete_all(self) -> None:
        """Permanently remove all posts, soft-deleted ones included."""
        pass
