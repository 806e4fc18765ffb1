"""Persistence infrastructure providers."""

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
from verisart.util.di.base import ProviderBase


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider using process-local memory.

    Stores and their locks are APP-scoped: one set per process, shared by
    every request and lost on restart.
    """

    __is_mock__ = False

    scope = Scope.APP

    @provide(scope=Scope.APP)
    def get_store_locks(self) -> StoreLocks:
        """Provide store write locks."""
        return StoreLocks()

    @provide(scope=Scope.APP)
    def get_user_repository(self) -> UserRepository:
        """Provide User repository."""
        return InMemoryUserRepository()

    @provide(scope=Scope.APP)
    def get_certificate_repository(self) -> CertificateRepository:
        """Provide Certificate repository."""
        return InMemoryCertificateRepository()
