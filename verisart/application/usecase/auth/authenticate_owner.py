"""Authenticate owner use case."""

import logfire
from pydantic import BaseModel

from verisart.domain.error import NotFoundError
from verisart.domain.service import UserService
from verisart.domain.value import UserId


class AuthenticateOwnerRequest(BaseModel):
    """Authenticate owner request."""

    owner_id: str | None  # Caller-supplied identity header, may be missing


class AuthenticateOwnerResponse(BaseModel):
    """Authenticated caller."""

    user_id: str
    email: str


class AuthenticateOwnerUseCase:
    """Use case for resolving the caller's claimed identity.

    The caller is trusted to be who the header says, as long as that user
    exists. There is no credential check.
    """

    def __init__(self, user_service: UserService) -> None:
        """Initialize authenticate owner use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(
        self, request: AuthenticateOwnerRequest
    ) -> AuthenticateOwnerResponse | None:
        """Execute authenticate owner flow.

        Args:
            request: Request with the claimed owner id

        Returns:
            The authenticated caller, or None if the id is missing or unknown
        """
        if not request.owner_id:
            return None

        with logfire.span("authenticate_owner.execute", owner_id=request.owner_id):
            try:
                user = await self.user_service.get_by_id(UserId(request.owner_id))
            except NotFoundError:
                return None

            return AuthenticateOwnerResponse(user_id=str(user.id), email=user.email)
