"""User administration routes (basic auth)."""

from typing import Annotated, Optional

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, Query, status
from fastapi.security import HTTPBasicCredentials
from pydantic import Field

from blogger.application.pagination import Page, PageRequest
from blogger.application.usecase.user import (
    CreateUserRequest,
    CreateUserUseCase,
    DeleteUserRequest,
    DeleteUserUseCase,
    ListUsersRequest,
    ListUsersUseCase,
)
from blogger.application.view import UserView
from blogger.config import AuthSettings
from blogger.domain.value import UserSortField
from blogger.interface.api.params import CamelModel, page_params
from blogger.interface.api.security import basic_scheme, require_admin

router = APIRouter(prefix="/sa/users", tags=["users"], route_class=DishkaRoute)


class CreateUserAPIRequest(CamelModel):
    """API request for creating a user."""

    login: str = Field(min_length=3, max_length=10, pattern=r"^[a-zA-Z0-9_-]*$")
    password: str = Field(min_length=6, max_length=20)
    email: str


@router.get("", response_model=Page[UserView])
async def list_users(
    list_users_use_case: FromDishka[ListUsersUseCase],
    auth_settings: FromDishka[AuthSettings],
    page: PageRequest = Depends(page_params),
    sort_by: Annotated[UserSortField, Query(alias="sortBy")] = UserSortField.CREATED_AT,
    search_login_term: Annotated[Optional[str], Query(alias="searchLoginTerm")] = None,
    search_email_term: Annotated[Optional[str], Query(alias="searchEmailTerm")] = None,
    credentials: HTTPBasicCredentials | None = Depends(basic_scheme),
) -> Page[UserView]:
    """List users; login and e-mail search terms match either field."""
    require_admin(auth_settings, credentials)
    return await list_users_use_case.execute(
        ListUsersRequest(
            **page.model_dump(),
            sort_by=sort_by,
            search_login_term=search_login_term,
            search_email_term=search_email_term,
        )
    )


@router.post("", response_model=UserView, status_code=status.HTTP_201_CREATED)
async def create_user(
    request: CreateUserAPIRequest,
    create_user_use_case: FromDishka[CreateUserUseCase],
    auth_settings: FromDishka[AuthSettings],
    credentials: HTTPBasicCredentials | None = Depends(basic_scheme),
) -> UserView:
    """Create a user account."""
    require_admin(auth_settings, credentials)
    return await create_user_use_case.execute(
        CreateUserRequest(
            login=request.login, password=request.password, email=request.email
        )
    )


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_user(
    user_id: str,
    delete_user_use_case: FromDishka[DeleteUserUseCase],
    auth_settings: FromDishka[AuthSettings],
    credentials: HTTPBasicCredentials | None = Depends(basic_scheme),
) -> None:
    """Soft-delete a user."""
    require_admin(auth_settings, credentials)
    await delete_user_use_case.execute(DeleteUserRequest(user_id=user_id))
