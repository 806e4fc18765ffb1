"""Application layer DI providers."""

from dishka import Scope, provide

from verisart.application.usecase.auth import AuthenticateOwnerUseCase
from verisart.application.usecase.certificate import (
    CreateCertificateUseCase,
    DeleteCertificateUseCase,
    UpdateCertificateUseCase,
)
from verisart.application.usecase.transfer import (
    AcceptTransferUseCase,
    CreateTransferUseCase,
)
from verisart.application.usecase.user import (
    CreateUserUseCase,
    GetUserCertificatesUseCase,
    ListUsersUseCase,
)
from verisart.domain.service import CertificateService, UserService
from verisart.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Auth use cases
    @provide(scope=Scope.REQUEST)
    def get_authenticate_owner_use_case(
        self, user_service: UserService
    ) -> AuthenticateOwnerUseCase:
        """Provide authenticate owner use case."""
        return AuthenticateOwnerUseCase(user_service=user_service)

    # User use cases
    @provide(scope=Scope.REQUEST)
    def get_create_user_use_case(self, user_service: UserService) -> CreateUserUseCase:
        """Provide create user use case."""
        return CreateUserUseCase(user_service=user_service)

    @provide(scope=Scope.REQUEST)
    def get_list_users_use_case(self, user_service: UserService) -> ListUsersUseCase:
        """Provide list users use case."""
        return ListUsersUseCase(user_service=user_service)

    @provide(scope=Scope.REQUEST)
    def get_get_user_certificates_use_case(
        self, certificate_service: CertificateService
    ) -> GetUserCertificatesUseCase:
        """Provide get user certificates use case."""
        return GetUserCertificatesUseCase(certificate_service=certificate_service)

    # Certificate use cases
    @provide(scope=Scope.REQUEST)
    def get_create_certificate_use_case(
        self, certificate_service: CertificateService
    ) -> CreateCertificateUseCase:
        """Provide create certificate use case."""
        return CreateCertificateUseCase(certificate_service=certificate_service)

    @provide(scope=Scope.REQUEST)
    def get_update_certificate_use_case(
        self, certificate_service: CertificateService
    ) -> UpdateCertificateUseCase:
        """Provide update certificate use case."""
        return UpdateCertificateUseCase(certificate_service=certificate_service)

    @provide(scope=Scope.REQUEST)
    def get_delete_certificate_use_case(
        self, certificate_service: CertificateService
    ) -> DeleteCertificateUseCase:
        """Provide delete certificate use case."""
        return DeleteCertificateUseCase(certificate_service=certificate_service)

    # Transfer use cases
    @provide(scope=Scope.REQUEST)
    def get_create_transfer_use_case(
        self, certificate_service: CertificateService
    ) -> CreateTransferUseCase:
        """Provide create transfer use case."""
        return CreateTransferUseCase(certificate_service=certificate_service)

    @provide(scope=Scope.REQUEST)
    def get_accept_transfer_use_case(
        self, certificate_service: CertificateService
    ) -> AcceptTransferUseCase:
        """Provide accept transfer use case."""
        return AcceptTransferUseCase(certificate_service=certificate_service)
