"""Authentication routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends
from fastapi.security import HTTPAuthorizationCredentials

from blogger.application.usecase.auth import (
    GetCurrentUserRequest,
    GetCurrentUserResponse,
    GetCurrentUserUseCase,
    LoginRequest,
    LoginResponse,
    LoginUseCase,
)
from blogger.domain.service import JWTService
from blogger.interface.api.params import CamelModel
from blogger.interface.api.security import bearer_scheme, require_user_id

router = APIRouter(prefix="/auth", tags=["auth"], route_class=DishkaRoute)


class LoginAPIRequest(CamelModel):
    """API request for logging in."""

    login_or_email: str
    password: str


@router.post("/login", response_model=LoginResponse)
async def login(
    request: LoginAPIRequest,
    login_use_case: FromDishka[LoginUseCase],
) -> LoginResponse:
    """Exchange login (or e-mail) and password for an access token.

    Wrong credentials are answered with 401.
    """
    return await login_use_case.execute(
        LoginRequest(login_or_email=request.login_or_email, password=request.password)
    )


@router.get("/me", response_model=GetCurrentUserResponse)
async def me(
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    jwt_service: FromDishka[JWTService],
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> GetCurrentUserResponse:
    """Describe the authenticated user."""
    user_id = require_user_id(jwt_service, credentials)
    return await get_current_user_use_case.execute(
        GetCurrentUserRequest(user_id=user_id)
    )
