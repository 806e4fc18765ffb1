"""Mock persistence providers for testing."""

from dishka import Scope, provide

from verisart.domain.repository import (
    CertificateRepository,
    StoreLocks,
    UserRepository,
)
from verisart.persistence.repository.inmemory import (
    InMemoryCertificateRepository,
    InMemoryUserRepository,
)
from verisart.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    Uses REQUEST scope to ensure test isolation - each test gets fresh
    repositories and locks.
    """

    __is_mock__ = True

    @provide(scope=Scope.REQUEST)
    def get_store_locks(self) -> StoreLocks:
        """Provide fresh store locks."""
        return StoreLocks()

    @provide(scope=Scope.REQUEST)
    def get_user_repository(self) -> UserRepository:
        """Provide in-memory user repository."""
        return InMemoryUserRepository()

    @provide(scope=Scope.REQUEST)
    def get_certificate_repository(self) -> CertificateRepository:
        """Provide in-memory certificate repository."""
        return InMemoryCertificateRepository()
