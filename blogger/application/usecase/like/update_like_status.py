"""Update like status use case."""

from pydantic import BaseModel

from blogger.application.usecase.base import BaseUseCase, parse_id
from blogger.domain.service import LikeService
from blogger.domain.value import LikeStatus, ParentType, UserId


class UpdateLikeStatusRequest(BaseModel):
    """Update like status request."""

    parent_type: ParentType
    parent_id: str  # UUID string of the post or comment
    user_id: str  # Authenticated user
    like_status: LikeStatus


class UpdateLikeStatusResponse(BaseModel):
    """Update like status response."""

    changed: bool


class UpdateLikeStatusUseCase(BaseUseCase):
    """Use case for liking, disliking or un-reacting to a post or comment."""

    def __init__(self, like_service: LikeService) -> None:
        """Initialize update like status use case.

        Args:
            like_service: Like domain service
        """
        self.like_service = like_service

    async def execute(
        self, request: UpdateLikeStatusRequest
    ) -> UpdateLikeStatusResponse:
        """Execute update like status flow.

        Args:
            request: Parent, user and requested status

        Returns:
            Whether the stored status changed

        Raises:
            NotFoundError: If the parent or the user doesn't exist
        """
        parent_id = parse_id(request.parent_id, request.parent_type.value.capitalize())
        changed = await self.like_service.update_like_status(
            parent_type=request.parent_type,
            parent_id=parent_id,
            user_id=UserId(parse_id(request.user_id, "User")),
            status=request.like_status,
        )
        return UpdateLikeStatusResponse(changed=changed)
