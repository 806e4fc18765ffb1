"""List users use case."""

from pydantic import BaseModel

from verisart.application.usecase.user.create_user import UserResponse
from verisart.domain.service import UserService


class ListUsersResponse(BaseModel):
    """List users response."""

    users: list[UserResponse]
    total: int


class ListUsersUseCase:
    """Use case for listing every user."""

    def __init__(self, user_service: UserService) -> None:
        """Initialize list users use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(self) -> ListUsersResponse:
        """Execute list users flow."""
        users = await self.user_service.list_users()
        items = [UserResponse.from_user(user) for user in users]
        return ListUsersResponse(users=items, total=len(items))
