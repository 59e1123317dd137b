"""Post entity.

Posts carry a denormalized copy of their like summary
(``extended_likes_info``), rewritten after every like status change.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from blogger.domain.model.common import DomainModel, utc_now
from blogger.domain.model.like import ExtendedLikesInfo
from blogger.domain.value import BlogId, PostId


class Post(DomainModel):
    """Post entity."""

    id: PostId
    title: str = Field(min_length=1, max_length=30)
    short_description: str = Field(min_length=1, max_length=100)
    content: str = Field(min_length=1, max_length=1000)
    blog_id: BlogId
    blog_name: str  # Denormalized from blog
    extended_likes_info: ExtendedLikesInfo = Field(default_factory=ExtendedLikesInfo)
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)
    deleted_at: Optional[datetime] = None

    def with_likes_info(self, likes_info: ExtendedLikesInfo) -> "Post":
        """Return a copy carrying a freshly computed like summary."""
        return self.model_copy(update={"extended_likes_info": likes_info})
