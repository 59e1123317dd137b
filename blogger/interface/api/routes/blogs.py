"""Blog routes."""

from typing import Annotated, Optional

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, Query, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBasicCredentials
from pydantic import Field

from blogger.application.pagination import Page, PageRequest
from blogger.application.usecase.blog import (
    BlogInput,
    CreateBlogUseCase,
    DeleteBlogRequest,
    DeleteBlogUseCase,
    GetBlogRequest,
    GetBlogUseCase,
    ListBlogsRequest,
    ListBlogsUseCase,
    UpdateBlogRequest,
    UpdateBlogUseCase,
)
from blogger.application.usecase.blog.create_blog import WEBSITE_URL_PATTERN
from blogger.application.usecase.post import (
    CreatePostRequest,
    CreatePostUseCase,
    ListPostsRequest,
    ListPostsUseCase,
)
from blogger.application.view import BlogView, PostView
from blogger.config import AuthSettings
from blogger.domain.service import JWTService
from blogger.domain.value import BlogSortField, PostSortField
from blogger.interface.api.params import CamelModel, page_params
from blogger.interface.api.routes.posts import BlogPostAPIRequest
from blogger.interface.api.security import (
    basic_scheme,
    bearer_scheme,
    optional_user_id,
    require_admin,
)

router = APIRouter(prefix="/blogs", tags=["blogs"], route_class=DishkaRoute)


class BlogAPIRequest(CamelModel):
    """API request for creating or replacing a blog."""

    name: str = Field(min_length=1, max_length=15)
    description: str = Field(min_length=1, max_length=500)
    website_url: str = Field(max_length=100, pattern=WEBSITE_URL_PATTERN)


@router.get("", response_model=Page[BlogView])
async def list_blogs(
    list_blogs_use_case: FromDishka[ListBlogsUseCase],
    page: PageRequest = Depends(page_params),
    sort_by: Annotated[BlogSortField, Query(alias="sortBy")] = BlogSortField.CREATED_AT,
    search_name_term: Annotated[Optional[str], Query(alias="searchNameTerm")] = None,
) -> Page[BlogView]:
    """List blogs, optionally filtered by a name substring."""
    return await list_blogs_use_case.execute(
        ListBlogsRequest(
            **page.model_dump(), sort_by=sort_by, search_name_term=search_name_term
        )
    )


@router.get("/{blog_id}", response_model=BlogView)
async def get_blog(
    blog_id: str, get_blog_use_case: FromDishka[GetBlogUseCase]
) -> BlogView:
    """Get a blog by ID."""
    return await get_blog_use_case.execute(GetBlogRequest(blog_id=blog_id))


@router.post("", response_model=BlogView, status_code=status.HTTP_201_CREATED)
async def create_blog(
    request: BlogAPIRequest,
    create_blog_use_case: FromDishka[CreateBlogUseCase],
    auth_settings: FromDishka[AuthSettings],
    credentials: HTTPBasicCredentials | None = Depends(basic_scheme),
) -> BlogView:
    """Create a blog."""
    require_admin(auth_settings, credentials)
    return await create_blog_use_case.execute(
        BlogInput(
            name=request.name,
            description=request.description,
            website_url=request.website_url,
        )
    )


@router.put("/{blog_id}", status_code=status.HTTP_204_NO_CONTENT)
async def update_blog(
    blog_id: str,
    request: BlogAPIRequest,
    update_blog_use_case: FromDishka[UpdateBlogUseCase],
    auth_settings: FromDishka[AuthSettings],
    credentials: HTTPBasicCredentials | None = Depends(basic_scheme),
) -> None:
    """Replace a blog's fields."""
    require_admin(auth_settings, credentials)
    await update_blog_use_case.execute(
        UpdateBlogRequest(
            blog_id=blog_id,
            name=request.name,
            description=request.description,
            website_url=request.website_url,
        )
    )


@router.delete("/{blog_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_blog(
    blog_id: str,
    delete_blog_use_case: FromDishka[DeleteBlogUseCase],
    auth_settings: FromDishka[AuthSettings],
    credentials: HTTPBasicCredentials | None = Depends(basic_scheme),
) -> None:
    """Delete a blog."""
    require_admin(auth_settings, credentials)
    await delete_blog_use_case.execute(DeleteBlogRequest(blog_id=blog_id))


@router.get("/{blog_id}/posts", response_model=Page[PostView])
async def list_blog_posts(
    blog_id: str,
    list_posts_use_case: FromDishka[ListPostsUseCase],
    jwt_service: FromDishka[JWTService],
    page: PageRequest = Depends(page_params),
    sort_by: Annotated[PostSortField, Query(alias="sortBy")] = PostSortField.CREATED_AT,
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> Page[PostView]:
    """List the posts of one blog."""
    return await list_posts_use_case.execute(
        ListPostsRequest(
            **page.model_dump(),
            sort_by=sort_by,
            blog_id=blog_id,
            viewer_id=optional_user_id(jwt_service, credentials),
        )
    )


@router.post(
    "/{blog_id}/posts", response_model=PostView, status_code=status.HTTP_201_CREATED
)
async def create_blog_post(
    blog_id: str,
    request: BlogPostAPIRequest,
    create_post_use_case: FromDishka[CreatePostUseCase],
    auth_settings: FromDishka[AuthSettings],
    credentials: HTTPBasicCredentials | None = Depends(basic_scheme),
) -> PostView:
    """Create a post inside a blog."""
    require_admin(auth_settings, credentials)
    return await create_post_use_case.execute(
        CreatePostRequest(
            blog_id=blog_id,
            title=request.title,
            short_description=request.short_description,
            content=request.content,
        )
    )
