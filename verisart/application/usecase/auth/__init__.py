"""Auth use cases."""

from .authenticate_owner import (
    AuthenticateOwnerRequest,
    AuthenticateOwnerResponse,
    AuthenticateOwnerUseCase,
)

__all__ = [
    "AuthenticateOwnerRequest",
    "AuthenticateOwnerResponse",
    "AuthenticateOwnerUseCase",
]
