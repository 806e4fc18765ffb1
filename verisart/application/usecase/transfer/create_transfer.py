"""Create transfer use case."""

import logfire
from pydantic import BaseModel

from verisart.application.usecase.certificate.response import CertificateResponse
from verisart.domain.service import CertificateService
from verisart.domain.value import CertificateId, Transfer, TransferStatus, UserId


class CreateTransferRequest(BaseModel):
    """Create transfer request."""

    certificate_id: str
    user_id: str  # Authenticated caller, must own the certificate
    email: str  # Recipient


class CreateTransferUseCase:
    """Use case for offering a certificate to another user by email."""

    def __init__(self, certificate_service: CertificateService) -> None:
        """Initialize create transfer use case.

        Args:
            certificate_service: Certificate domain service
        """
        self.certificate_service = certificate_service

    async def execute(self, request: CreateTransferRequest) -> CertificateResponse:
        """Execute create transfer flow.

        The recorded transfer is always pending, whatever the client sent,
        and replaces any transfer already on the certificate.

        Args:
            request: Create transfer request

        Returns:
            The certificate with its pending transfer

        Raises:
            NotFoundError: If the certificate does not exist
            NotAuthorizedError: If the caller does not own the certificate
        """
        certificate_id = CertificateId(request.certificate_id)

        with logfire.span(
            "create_transfer.execute",
            certificate_id=request.certificate_id,
            user_id=request.user_id,
        ):
            certificate = await self.certificate_service.create_transfer(
                certificate_id,
                Transfer(email=request.email, status=TransferStatus.PENDING),
                owner_id=UserId(request.user_id),
            )
            return CertificateResponse.from_certificate(certificate)
