"""Blog entity."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from blogger.domain.model.common import DomainModel, utc_now
from blogger.domain.value import BlogId


class Blog(DomainModel):
    """Blog entity.

    Blogs group posts. Deletion is soft.
    """

    id: BlogId
    name: str = Field(min_length=1, max_length=15)
    description: str = Field(min_length=1, max_length=500)
    website_url: str = Field(max_length=100, pattern=r"^https://")
    is_membership: bool = False
    created_at: datetime = Field(default_factory=utc_now)
    deleted_at: Optional[datetime] = None
