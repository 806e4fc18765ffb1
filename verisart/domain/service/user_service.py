"""User domain service."""

import logfire

from verisart.domain.error import AlreadyExistsError, NotFoundError
from verisart.domain.model import User
from verisart.domain.repository import StoreLocks, UserRepository
from verisart.domain.value import UserId, derive_identifier

from .base import Service


class UserService(Service):
    """Domain service for the user directory."""

    def __init__(self, user_repository: UserRepository, locks: StoreLocks) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
            locks: Store write locks
        """
        self.user_repository = user_repository
        self.locks = locks

    async def create_user(self, user: User) -> User:
        """Create a user, deriving its ID from its email.

        Args:
            user: User to create (any id it carries is ignored)

        Returns:
            The stored user, with its id set

        Raises:
            AlreadyExistsError: If a user with this email already exists
        """
        with logfire.span("user_service.create_user", email=user.email):
            async with self.locks.users:
                return await self._insert(user)

    async def get_by_id(self, user_id: UserId) -> User:
        """Get user by ID.

        Args:
            user_id: User ID

        Returns:
            User entity

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("user_service.get_by_id", user_id=user_id):
            user = await self.user_repository.find_by_id(user_id)
            if not user:
                raise NotFoundError("User", user_id)
            return user

    async def get_by_email(self, email: str) -> User:
        """Get user by email.

        Args:
            email: User email

        Returns:
            User entity

        Raises:
            NotFoundError: If no user has this email
        """
        with logfire.span("user_service.get_by_email", email=email):
            user = await self.user_repository.find_by_email(email)
            if not user:
                raise NotFoundError("User", email)
            return user

    async def list_users(self) -> list[User]:
        """List every user, in no particular order."""
        with logfire.span("user_service.list_users"):
            users = await self.user_repository.find_all()
            logfire.info("Users listed", count=len(users))
            return users

    async def get_or_create_by_email(self, email: str) -> User:
        """Resolve a user by email, creating one if the email is unknown.

        Lookup and insertion happen under the users lock, so two callers
        resolving the same email end up with the same user. A created user
        is named after their email.

        Args:
            email: User email

        Returns:
            The existing or newly created user
        """
        with logfire.span("user_service.get_or_create_by_email", email=email):
            async with self.locks.users:
                existing = await self.user_repository.find_by_email(email)
                if existing:
                    return existing
                return await self._insert(User(email=email, name=email))

    async def _insert(self, user: User) -> User:
        # Caller holds self.locks.users
        user_id = UserId(derive_identifier(user.email))
        if await self.user_repository.find_by_id(user_id):
            raise AlreadyExistsError("User", user_id)

        saved = await self.user_repository.save(user.model_copy(update={"id": user_id}))
        logfire.info("User created", user_id=saved.id, email=saved.email)
        return saved
