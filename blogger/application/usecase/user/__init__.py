"""User administration use cases."""

from .create_user import CreateUserRequest, CreateUserUseCase
from .delete_user import DeleteUserRequest, DeleteUserUseCase
from .list_users import ListUsersRequest, ListUsersUseCase

__all__ = [
    "CreateUserRequest",
    "CreateUserUseCase",
    "DeleteUserRequest",
    "DeleteUserUseCase",
    "ListUsersRequest",
    "ListUsersUseCase",
]
