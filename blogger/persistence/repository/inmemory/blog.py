"""In-memory blog repository for testing."""

from typing import Optional

from blogger.domain.model.blog import Blog
from blogger.domain.repository.blog import BlogRepository
from blogger.domain.value import BlogId, BlogSortField, SortDirection

_SORT_KEYS = {
    BlogSortField.CREATED_AT: lambda b: b.created_at,
    BlogSortField.NAME: lambda b: b.name,
}


class InMemoryBlogRepository(BlogRepository):
    """In-memory implementation of BlogRepository for testing."""

    def __init__(self) -> None:
        self._blogs: dict[BlogId, Blog] = {}

    def _matching(self, search_name_term: Optional[str]) -> list[Blog]:
        blogs = [b for b in self._blogs.values() if b.deleted_at is None]
        if search_name_term:
            term = search_name_term.lower()
            blogs = [b for b in blogs if term in b.name.lower()]
        return blogs

    async def find_by_id(self, blog_id: BlogId) -> Optional[Blog]:
        """Find a blog by ID."""
        blog = self._blogs.get(blog_id)
        if blog is None or blog.deleted_at is not None:
            return None
        return blog

    async def find_all(
        self,
        sort_by: BlogSortField = BlogSortField.CREATED_AT,
        sort_direction: SortDirection = SortDirection.DESC,
        search_name_term: Optional[str] = None,
        limit: int = 10,
        offset: int = 0,
    ) -> list[Blog]:
        """Find blogs with filtering, sorting and pagination."""
        blogs = sorted(
            self._matching(search_name_term),
            key=_SORT_KEYS[sort_by],
            reverse=sort_direction == SortDirection.DESC,
        )
        return blogs[offset : offset + limit]

    async def count(self, search_name_term: Optional[str] = None) -> int:
        """Count blogs matching the name filter."""
        return len(self._matching(search_name_term))

    async def save(self, blog: Blog) -> Blog:
        """Save or update a blog."""
        self._blogs[blog.id] = blog
        return blog

    async def delete_all(self) -> None:
        """Remove every stored blog."""
        self._blogs.clear()
