"""Comment entity."""

from datetime import datetime

from pydantic import Field

from blogger.domain.model.common import DomainModel, utc_now
from blogger.domain.value import CommentId, PostId, UserId


class CommentatorInfo(DomainModel):
    """Author snapshot taken when the comment is created."""

    user_id: UserId
    user_login: str


class Comment(DomainModel):
    """Comment on a post.

    Comments are flat (no threading) and hard-deleted. Only the author may
    edit or delete a comment. Like counts are never stored on the comment;
    they are aggregated from like facts on every read.
    """

    id: CommentId
    post_id: PostId
    content: str = Field(min_length=20, max_length=300)
    commentator_info: CommentatorInfo
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)

    def is_owned_by(self, user_id: UserId) -> bool:
        return self.commentator_info.user_id == user_id
