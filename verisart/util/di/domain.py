"""Domain layer DI providers."""

from dishka import Scope, provide

from verisart.domain.repository import (
    CertificateRepository,
    StoreLocks,
    UserRepository,
)
from verisart.domain.service import CertificateService, UserService
from verisart.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped. They hold no state of their own;
    the stores and locks they share live in the persistence component.
    """

    scope = Scope.REQUEST

    @provide
    def get_user_service(
        self, user_repository: UserRepository, locks: StoreLocks
    ) -> UserService:
        """Provide user domain service."""
        return UserService(user_repository=user_repository, locks=locks)

    @provide
    def get_certificate_service(
        self,
        certificate_repository: CertificateRepository,
        user_service: UserService,
        locks: StoreLocks,
    ) -> CertificateService:
        """Provide certificate domain service."""
        return CertificateService(
            certificate_repository=certificate_repository,
            user_service=user_service,
            locks=locks,
        )
