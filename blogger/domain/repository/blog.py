"""Blog repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from blogger.domain.model.blog import Blog
from blogger.domain.value import BlogId, BlogSortField, SortDirection


class BlogRepository(ABC):
    """Repository for Blog entity.

    Soft-deleted blogs are invisible to every finder.
    """

    @abstractmethod
    async def find_by_id(self, blog_id: BlogId) -> Optional[Blog]:
        """Find a blog by ID.

        Args:
            blog_id: The blog's unique identifier

        Returns:
            The blog if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(
        self,
        sort_by: BlogSortField = BlogSortField.CREATED_AT,
        sort_direction: SortDirection = SortDirection.DESC,
        search_name_term: Optional[str] = None,
        limit: int = 10,
        offset: int = 0,
    ) -> List[Blog]:
        """Find blogs with filtering, sorting and pagination.

        Args:
            sort_by: Field to sort by
            sort_direction: Sort direction
            search_name_term: Case-insensitive name substring
            limit: Page size
            offset: Number of blogs to skip

        Returns:
            List of blogs
        """
        pass

    @abstractmethod
    async def count(self, search_name_term: Optional[str] = None) -> int:
        """Count blogs matching the name filter."""
        pass

    @abstractmethod
    async def save(self, blog: Blog) -> Blog:
        """Save a blog (create or update).

        Args:
            blog: The blog to save

        Returns:
            The saved blog
        """
        pass

    @abstractmethod
    async def delete_all(self) -> None:
        """Permanently remove all blogs, soft-deleted ones included."""
        pass
