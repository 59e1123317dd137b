"""Comment routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, status
from fastapi.security import HTTPAuthorizationCredentials

from blogger.application.usecase.comment import (
    DeleteCommentRequest,
    DeleteCommentUseCase,
    GetCommentRequest,
    GetCommentUseCase,
    UpdateCommentRequest,
    UpdateCommentUseCase,
)
from blogger.application.usecase.like import (
    UpdateLikeStatusRequest,
    UpdateLikeStatusUseCase,
)
from blogger.application.view import CommentView
from blogger.domain.service import JWTService
from blogger.domain.value import ParentType
from blogger.interface.api.routes.posts import CommentAPIRequest, LikeStatusAPIRequest
from blogger.interface.api.security import (
    bearer_scheme,
    optional_user_id,
    require_user_id,
)

router = APIRouter(prefix="/comments", tags=["comments"], route_class=DishkaRoute)


@router.get("/{comment_id}", response_model=CommentView)
async def get_comment(
    comment_id: str,
    get_comment_use_case: FromDishka[GetCommentUseCase],
    jwt_service: FromDishka[JWTService],
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> CommentView:
    """Get a comment; like counts are aggregated when read."""
    return await get_comment_use_case.execute(
        GetCommentRequest(
            comment_id=comment_id,
            viewer_id=optional_user_id(jwt_service, credentials),
        )
    )


@router.put("/{comment_id}", status_code=status.HTTP_204_NO_CONTENT)
async def update_comment(
    comment_id: str,
    request: CommentAPIRequest,
    update_comment_use_case: FromDishka[UpdateCommentUseCase],
    jwt_service: FromDishka[JWTService],
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> None:
    """Edit a comment. Only its author may do so (403 otherwise)."""
    user_id = require_user_id(jwt_service, credentials)
    await update_comment_use_case.execute(
        UpdateCommentRequest(
            comment_id=comment_id, user_id=user_id, content=request.content
        )
    )


@router.delete("/{comment_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_comment(
    comment_id: str,
    delete_comment_use_case: FromDishka[DeleteCommentUseCase],
    jwt_service: FromDishka[JWTService],
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> None:
    """Delete a comment. Only its author may do so (403 otherwise)."""
    user_id = require_user_id(jwt_service, credentials)
    await delete_comment_use_case.execute(
        DeleteCommentRequest(comment_id=comment_id, user_id=user_id)
    )


@router.put("/{comment_id}/like-status", status_code=status.HTTP_204_NO_CONTENT)
async def update_comment_like_status(
    comment_id: str,
    request: LikeStatusAPIRequest,
    update_like_status_use_case: FromDishka[UpdateLikeStatusUseCase],
    jwt_service: FromDishka[JWTService],
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> None:
    """Like, dislike or clear the caller's reaction to a comment."""
    user_id = require_user_id(jwt_service, credentials)
    await update_like_status_use_case.execute(
        UpdateLikeStatusRequest(
            parent_type=ParentType.COMMENT,
            parent_id=comment_id,
            user_id=user_id,
            like_status=request.like_status,
        )
    )
