"""Like fact and the read models derived from it.

A like fact records one user's current reaction to one parent (post or
comment). Facts are created on the first reaction and only ever change
status afterwards, so ``created_at`` keeps the time of the first reaction.
"""

from datetime import datetime
from uuid import UUID

from pydantic import Field

from blogger.domain.model.common import DomainModel, utc_now
from blogger.domain.value import LikeId, LikeStatus, ParentType, UserId


class Like(DomainModel):
    """Like fact entity.

    Business rules:
    - One fact per (user_id, parent_type, parent_id), enforced by a unique
      constraint in storage
    - Never deleted by like flows; withdrawing sets status to NONE
    """

    id: LikeId
    user_id: UserId
    parent_type: ParentType
    parent_id: UUID  # PostId or CommentId
    status: LikeStatus
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)

    def with_status(self, status: LikeStatus, now: datetime) -> "Like":
        """Return a copy with a new status, keeping the creation time."""
        return self.model_copy(update={"status": status, "updated_at": now})


class LikeDetails(DomainModel):
    """One entry of a post's newest likers list."""

    added_at: datetime
    user_id: UserId
    login: str


class ExtendedLikesInfo(DomainModel):
    """Like summary stored on a post, recomputed on every changing write."""

    likes_count: int = Field(default=0, ge=0)
    dislikes_count: int = Field(default=0, ge=0)
    newest_likes: list[LikeDetails] = Field(default_factory=list, max_length=3)


class LikesInfo(DomainModel):
    """Like summary of a comment as seen by one viewer."""

    likes_count: int = Field(default=0, ge=0)
    dislikes_count: int = Field(default=0, ge=0)
    my_status: LikeStatus = LikeStatus.NONE
