"""In-memory user repository."""

from typing import Optional

from verisart.domain.model.user import User
from verisart.domain.repository.user import UserRepository
from verisart.domain.value import UserId


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository.

    Keeps users by id plus an email index. Both maps point at the same
    User instances; the index is not separately owned data.
    """

    def __init__(self) -> None:
        self._users: dict[UserId, User] = {}
        self._by_email: dict[str, User] = {}

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        return self._users.get(user_id)

    async def find_by_email(self, email: str) -> Optional[User]:
        """Find a user by their email."""
        return self._by_email.get(email)

    async def find_all(self) -> list[User]:
        """Find every user."""
        return list(self._users.values())

    async def save(self, user: User) -> User:
        """Save or update a user."""
        if user.id is None:
            raise ValueError("Cannot save a user without an id")
        self._users[user.id] = user
        self._by_email[user.email] = user
        return user
