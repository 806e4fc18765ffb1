"""Unit tests for AuthenticateOwnerUseCase."""

import pytest

from verisart.application.usecase.auth import (
    AuthenticateOwnerRequest,
    AuthenticateOwnerUseCase,
)
from verisart.domain.model import User
from verisart.domain.service import UserService
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestAuthenticateOwnerUseCase:
    """Tests for AuthenticateOwnerUseCase."""

    @pytest.mark.asyncio
    async def test_known_user_is_authenticated(self, unit_env):
        """Header naming an existing user should authenticate as that user."""
        # Arrange
        user_service = await unit_env.get(UserService)
        use_case = await unit_env.get(AuthenticateOwnerUseCase)
        bob = await user_service.create_user(User(email="bob@x.com", name="Bob"))

        # Act
        response = await use_case.execute(AuthenticateOwnerRequest(owner_id=bob.id))

        # Assert
        assert response is not None
        assert response.user_id == bob.id
        assert response.email == "bob@x.com"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("owner_id", [None, "", "unknown-user"])
    async def test_missing_or_unknown_owner_is_rejected(self, unit_env, owner_id):
        """Missing, empty or unknown ids should not authenticate."""
        # Arrange
        use_case = await unit_env.get(AuthenticateOwnerUseCase)

        # Act
        response = await use_case.execute(AuthenticateOwnerRequest(owner_id=owner_id))

        # Assert
        assert response is None
