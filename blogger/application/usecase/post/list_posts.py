"""List posts use case."""

from typing import Optional

from blogger.application.pagination import Page, PageRequest
from blogger.application.usecase.base import (
    BaseUseCase,
    parse_id,
    parse_viewer_id,
)
from blogger.application.view import PostView
from blogger.domain.service import LikeService, PostService
from blogger.domain.value import BlogId, ParentType, PostSortField


class ListPostsRequest(PageRequest):
    """List posts request."""

    sort_by: PostSortField = PostSortField.CREATED_AT
    blog_id: Optional[str] = None  # Restrict to one blog
    viewer_id: Optional[str] = None  # Authenticated viewer, if any


class ListPostsUseCase(BaseUseCase):
    """Use case for listing posts, globally or for one blog."""

    def __init__(self, post_service: PostService, like_service: LikeService) -> None:
        """Initialize list posts use case.

        Args:
            post_service: Post domain service
            like_service: Like domain service
        """
        self.post_service = post_service
        self.like_service = like_service

    async def execute(self, request: ListPostsRequest) -> Page[PostView]:
        """Execute list posts flow.

        Args:
            request: Page selection, optional blog and viewer

        Returns:
            Page of posts, each with the viewer's own status

        Raises:
            NotFoundError: If a blog is given and doesn't exist
        """
        blog_id = BlogId(parse_id(request.blog_id, "Blog")) if request.blog_id else None
        viewer_id = parse_viewer_id(request.viewer_id)

        posts, total = await self.post_service.list_posts(
            sort_by=request.sort_by,
            sort_direction=request.sort_direction,
            limit=request.limit,
            offset=request.offset,
            blog_id=blog_id,
        )

        # Batch query to avoid N+1
        statuses = await self.like_service.get_my_statuses(
            viewer_id, ParentType.POST, [p.id for p in posts]
        )
        return Page[PostView].build(
            [PostView.from_post(p, statuses[p.id]) for p in posts], total, request
        )
