"""Post routes, including post likes and post comments."""

from typing import Annotated

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, Query, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBasicCredentials
from pydantic import Field

from blogger.application.pagination import Page, PageRequest
from blogger.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentUseCase,
    ListCommentsRequest,
    ListCommentsUseCase,
)
from blogger.application.usecase.like import (
    UpdateLikeStatusRequest,
    UpdateLikeStatusUseCase,
)
from blogger.application.usecase.post import (
    CreatePostRequest,
    CreatePostUseCase,
    DeletePostRequest,
    DeletePostUseCase,
    GetPostRequest,
    GetPostUseCase,
    ListPostsRequest,
    ListPostsUseCase,
    UpdatePostRequest,
    UpdatePostUseCase,
)
from blogger.application.view import CommentView, PostView
from blogger.config import AuthSettings
from blogger.domain.service import JWTService
from blogger.domain.value import CommentSortField, LikeStatus, ParentType, PostSortField
from blogger.interface.api.params import CamelModel, page_params
from blogger.interface.api.security import (
    basic_scheme,
    bearer_scheme,
    optional_user_id,
    require_admin,
    require_user_id,
)

router = APIRouter(prefix="/posts", tags=["posts"], route_class=DishkaRoute)


class BlogPostAPIRequest(CamelModel):
    """API request for a post created under a known blog."""

    title: str = Field(min_length=1, max_length=30)
    short_description: str = Field(min_length=1, max_length=100)
    content: str = Field(min_length=1, max_length=1000)


class PostAPIRequest(BlogPostAPIRequest):
    """API request for creating or replacing a post."""

    blog_id: str


class LikeStatusAPIRequest(CamelModel):
    """API request for setting the caller's reaction."""

    like_status: LikeStatus


class CommentAPIRequest(CamelModel):
    """API request for writing a comment."""

    content: str = Field(min_length=20, max_length=300)


@router.get("", response_model=Page[PostView])
async def list_posts(
    list_posts_use_case: FromDishka[ListPostsUseCase],
    jwt_service: FromDishka[JWTService],
    page: PageRequest = Depends(page_params),
    sort_by: Annotated[PostSortField, Query(alias="sortBy")] = PostSortField.CREATED_AT,
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> Page[PostView]:
    """List posts across all blogs."""
    return await list_posts_use_case.execute(
        ListPostsRequest(
            **page.model_dump(),
            sort_by=sort_by,
            viewer_id=optional_user_id(jwt_service, credentials),
        )
    )


@router.get("/{post_id}", response_model=PostView)
async def get_post(
    post_id: str,
    get_post_use_case: FromDishka[GetPostUseCase],
    jwt_service: FromDishka[JWTService],
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> PostView:
    """Get a post with its materialized likes info.

    ``myStatus`` is reported for the bearer of a valid token and is
    ``None`` for anonymous callers.
    """
    return await get_post_use_case.execute(
        GetPostRequest(
            post_id=post_id, viewer_id=optional_user_id(jwt_service, credentials)
        )
    )


@router.post("", response_model=PostView, status_code=status.HTTP_201_CREATED)
async def create_post(
    request: PostAPIRequest,
    create_post_use_case: FromDishka[CreatePostUseCase],
    auth_settings: FromDishka[AuthSettings],
    credentials: HTTPBasicCredentials | None = Depends(basic_scheme),
) -> PostView:
    """Create a post."""
    require_admin(auth_settings, credentials)
    return await create_post_use_case.execute(
        CreatePostRequest(
            blog_id=request.blog_id,
            title=request.title,
            short_description=request.short_description,
            content=request.content,
        )
    )


@router.put("/{post_id}", status_code=status.HTTP_204_NO_CONTENT)
async def update_post(
    post_id: str,
    request: PostAPIRequest,
    update_post_use_case: FromDishka[UpdatePostUseCase],
    auth_settings: FromDishka[AuthSettings],
    credentials: HTTPBasicCredentials | None = Depends(basic_scheme),
) -> None:
    """Replace a post's fields."""
    require_admin(auth_settings, credentials)
    await update_post_use_case.execute(
        UpdatePostRequest(
            post_id=post_id,
            blog_id=request.blog_id,
            title=request.title,
            short_description=request.short_description,
            content=request.content,
        )
    )


@router.delete("/{post_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_post(
    post_id: str,
    delete_post_use_case: FromDishka[DeletePostUseCase],
    auth_settings: FromDishka[AuthSettings],
    credentials: HTTPBasicCredentials | None = Depends(basic_scheme),
) -> None:
    """Delete a post."""
    require_admin(auth_settings, credentials)
    await delete_post_use_case.execute(DeletePostRequest(post_id=post_id))


@router.put("/{post_id}/like-status", status_code=status.HTTP_204_NO_CONTENT)
async def update_post_like_status(
    post_id: str,
    request: LikeStatusAPIRequest,
    update_like_status_use_case: FromDishka[UpdateLikeStatusUseCase],
    jwt_service: FromDishka[JWTService],
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> None:
    """Like, dislike or clear the caller's reaction to a post.

    Repeating the current status is accepted and changes nothing.
    """
    user_id = require_user_id(jwt_service, credentials)
    await update_like_status_use_case.execute(
        UpdateLikeStatusRequest(
            parent_type=ParentType.POST,
            parent_id=post_id,
            user_id=user_id,
            like_status=request.like_status,
        )
    )


@router.get("/{post_id}/comments", response_model=Page[CommentView])
async def list_post_comments(
    post_id: str,
    list_comments_use_case: FromDishka[ListCommentsUseCase],
    jwt_service: FromDishka[JWTService],
    page: PageRequest = Depends(page_params),
    sort_by: Annotated[
        CommentSortField, Query(alias="sortBy")
    ] = CommentSortField.CREATED_AT,
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> Page[CommentView]:
    """List the comments of a post with live like counts."""
    return await list_comments_use_case.execute(
        ListCommentsRequest(
            **page.model_dump(),
            post_id=post_id,
            sort_by=sort_by,
            viewer_id=optional_user_id(jwt_service, credentials),
        )
    )


@router.post(
    "/{post_id}/comments",
    response_model=CommentView,
    status_code=status.HTTP_201_CREATED,
)
async def create_post_comment(
    post_id: str,
    request: CommentAPIRequest,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
    jwt_service: FromDishka[JWTService],
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> CommentView:
    """Comment on a post as the authenticated user."""
    user_id = require_user_id(jwt_service, credentials)
    return await create_comment_use_case.execute(
        CreateCommentRequest(post_id=post_id, user_id=user_id, content=request.content)
    )
