"""Unit tests for provider selection."""

import pytest

from verisart.util.di import (
    PersistenceProvider,
    ProdConfigProvider,
    ProdPersistenceProvider,
    get_provider,
)
from verisart.util.error import DependencyInjectionError
from tests.di import MockPersistenceProvider, build_test_container


class TestGetProvider:
    """Tests for get_provider."""

    def test_concrete_provider_is_returned_as_is(self):
        """Providers without implementations are used directly."""
        assert get_provider(ProdConfigProvider) is ProdConfigProvider

    def test_selects_production_implementation(self):
        """use_mock=False should select the production persistence."""
        assert get_provider(PersistenceProvider) is ProdPersistenceProvider

    def test_selects_mock_implementation(self):
        """use_mock=True should select the test persistence."""
        assert (
            get_provider(PersistenceProvider, use_mock=True) is MockPersistenceProvider
        )


class TestBuildTestContainer:
    """Tests for build_test_container."""

    def test_unknown_component_raises(self):
        """Unmocking a component that does not exist should fail."""
        with pytest.raises(DependencyInjectionError, match="Unknown components"):
            build_test_container(unmock={"mailer"})
