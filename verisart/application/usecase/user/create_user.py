"""Create user use case."""

from pydantic import BaseModel, Field

from verisart.application.usecase.base import BaseUseCase
from verisart.domain.model import User
from verisart.domain.service import UserService


class CreateUserRequest(BaseModel):
    """Create user request."""

    email: str
    name: str = Field(min_length=1)


class UserResponse(BaseModel):
    """User as returned to callers."""

    id: str
    email: str
    name: str

    @classmethod
    def from_user(cls, user: User) -> "UserResponse":
        """Build a response from a stored user."""
        return cls(id=str(user.id), email=user.email, name=user.name)


class CreateUserUseCase(BaseUseCase):
    """Use case for registering a user."""

    def __init__(self, user_service: UserService) -> None:
        """Initialize create user use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(self, request: CreateUserRequest) -> UserResponse:
        """Execute create user flow.

        Args:
            request: Create user request

        Returns:
            The created user, with its derived id

        Raises:
            AlreadyExistsError: If the email is already registered
        """
        user = await self.user_service.create_user(
            User(email=request.email, name=request.name)
        )
        return UserResponse.from_user(user)
