"""Unit tests for UserService."""

import asyncio

import pytest

from verisart.domain.error import AlreadyExistsError, NotFoundError
from verisart.domain.model import User
from verisart.domain.repository import UserRepository
from verisart.domain.service import UserService
from verisart.domain.value import UserId, derive_identifier
from tests.conftest import make_yielding_services
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked
unit_env = create_env_fixture()


class TestCreateUser:
    """Tests for create_user method."""

    @pytest.mark.asyncio
    async def test_create_user_derives_id_from_email(self, unit_env):
        """Created user should carry the identifier derived from its email."""
        # Arrange
        user_service = await unit_env.get(UserService)
        user_repo = await unit_env.get(UserRepository)

        # Act
        created = await user_service.create_user(
            User(email="bob@x.com", name="Bob")
        )

        # Assert
        assert created.id == derive_identifier("bob@x.com")
        assert created.email == "bob@x.com"
        assert created.name == "Bob"
        assert await user_repo.find_by_id(created.id) == created

    @pytest.mark.asyncio
    async def test_create_user_ignores_supplied_id(self, unit_env):
        """An id on the input should be replaced by the derived one."""
        # Arrange
        user_service = await unit_env.get(UserService)

        # Act
        created = await user_service.create_user(
            User(id=UserId("chosen"), email="bob@x.com", name="Bob")
        )

        # Assert
        assert created.id == derive_identifier("bob@x.com")

    @pytest.mark.asyncio
    async def test_duplicate_email_raises_already_exists(self, unit_env):
        """Second user with the same email should be rejected."""
        # Arrange
        user_service = await unit_env.get(UserService)
        first = await user_service.create_user(User(email="e@x.com", name="First"))

        # Act & Assert
        with pytest.raises(AlreadyExistsError) as exc_info:
            await user_service.create_user(User(email="e@x.com", name="Second"))

        assert exc_info.value.resource == "User"
        assert exc_info.value.identifier == first.id

        # First user is untouched
        stored = await user_service.get_by_email("e@x.com")
        assert stored == first
        assert stored.name == "First"

    @pytest.mark.asyncio
    async def test_concurrent_creates_with_same_email_store_one_user(self):
        """Racing creations of one email should leave exactly one user."""
        # Arrange - lookups yield, so both creations interleave without the lock
        user_service, _ = make_yielding_services()

        # Act
        results = await asyncio.gather(
            user_service.create_user(User(email="race@x.com", name="A")),
            user_service.create_user(User(email="race@x.com", name="B")),
            return_exceptions=True,
        )

        # Assert
        errors = [r for r in results if isinstance(r, AlreadyExistsError)]
        created = [r for r in results if isinstance(r, User)]
        assert len(errors) == 1
        assert len(created) == 1
        assert len(await user_service.list_users()) == 1


class TestGetUser:
    """Tests for get_by_id and get_by_email."""

    @pytest.mark.asyncio
    async def test_get_by_id_returns_user(self, unit_env):
        """Should return the stored user."""
        # Arrange
        user_service = await unit_env.get(UserService)
        created = await user_service.create_user(User(email="a@x.com", name="A"))

        # Act
        found = await user_service.get_by_id(created.id)

        # Assert
        assert found == created

    @pytest.mark.asyncio
    async def test_get_by_id_unknown_raises_not_found(self, unit_env):
        """Unknown id should raise NotFoundError."""
        # Arrange
        user_service = await unit_env.get(UserService)

        # Act & Assert
        with pytest.raises(NotFoundError, match="User not found"):
            await user_service.get_by_id(UserId("missing"))

    @pytest.mark.asyncio
    async def test_get_by_email_unknown_raises_not_found(self, unit_env):
        """Unknown email should raise NotFoundError."""
        # Arrange
        user_service = await unit_env.get(UserService)

        # Act & Assert
        with pytest.raises(NotFoundError):
            await user_service.get_by_email("nobody@x.com")


class TestListUsers:
    """Tests for list_users method."""

    @pytest.mark.asyncio
    async def test_empty_directory(self, unit_env):
        """Should return an empty list when there are no users."""
        # Arrange
        user_service = await unit_env.get(UserService)

        # Act
        users = await user_service.list_users()

        # Assert
        assert users == []

    @pytest.mark.asyncio
    async def test_lists_every_user(self, unit_env):
        """Should return all users, in any order."""
        # Arrange
        user_service = await unit_env.get(UserService)
        for email in ("a@x.com", "b@x.com", "c@x.com"):
            await user_service.create_user(User(email=email, name=email))

        # Act
        users = await user_service.list_users()

        # Assert
        assert {u.email for u in users} == {"a@x.com", "b@x.com", "c@x.com"}


class TestGetOrCreateByEmail:
    """Tests for get_or_create_by_email method."""

    @pytest.mark.asyncio
    async def test_returns_existing_user(self, unit_env):
        """Known email should resolve to the existing user."""
        # Arrange
        user_service = await unit_env.get(UserService)
        existing = await user_service.create_user(User(email="a@x.com", name="Alice"))

        # Act
        resolved = await user_service.get_or_create_by_email("a@x.com")

        # Assert
        assert resolved == existing
        assert resolved.name == "Alice"

    @pytest.mark.asyncio
    async def test_creates_user_named_after_email(self, unit_env):
        """Unknown email should create a user named after the email."""
        # Arrange
        user_service = await unit_env.get(UserService)

        # Act
        created = await user_service.get_or_create_by_email("new@x.com")

        # Assert
        assert created.id == derive_identifier("new@x.com")
        assert created.name == "new@x.com"
        assert await user_service.get_by_id(created.id) == created

    @pytest.mark.asyncio
    async def test_concurrent_resolution_yields_one_user(self):
        """Racing resolutions of one email should agree on one user."""
        # Arrange - lookups yield, so both resolutions interleave without the lock
        user_service, _ = make_yielding_services()

        # Act
        first, second = await asyncio.gather(
            user_service.get_or_create_by_email("same@x.com"),
            user_service.get_or_create_by_email("same@x.com"),
        )

        # Assert
        assert first == second
        assert len(await user_service.list_users()) == 1
