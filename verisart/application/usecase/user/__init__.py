"""User use cases."""

from .create_user import CreateUserRequest, CreateUserUseCase, UserResponse
from .get_user_certificates import (
    GetUserCertificatesRequest,
    GetUserCertificatesResponse,
    GetUserCertificatesUseCase,
)
from .list_users import ListUsersResponse, ListUsersUseCase

__all__ = [
    "CreateUserRequest",
    "CreateUserUseCase",
    "GetUserCertificatesRequest",
    "GetUserCertificatesResponse",
    "GetUserCertificatesUseCase",
    "ListUsersResponse",
    "ListUsersUseCase",
    "UserResponse",
]
