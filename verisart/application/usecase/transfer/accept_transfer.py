"""Accept transfer use case."""

from pydantic import BaseModel

from verisart.application.usecase.certificate.response import CertificateResponse
from verisart.domain.service import CertificateService
from verisart.domain.value import CertificateId


class AcceptTransferRequest(BaseModel):
    """Accept transfer request."""

    certificate_id: str
    user_id: str  # Authenticated caller


class AcceptTransferUseCase:
    """Use case for completing a pending certificate transfer."""

    def __init__(self, certificate_service: CertificateService) -> None:
        """Initialize accept transfer use case.

        Args:
            certificate_service: Certificate domain service
        """
        self.certificate_service = certificate_service

    async def execute(self, request: AcceptTransferRequest) -> CertificateResponse:
        """Execute accept transfer flow.

        Any authenticated user may accept; the recipient is whoever owns
        the transfer's email, and gets an account if they have none.

        Args:
            request: Accept transfer request

        Returns:
            The certificate under its new owner

        Raises:
            NotFoundError: If the certificate does not exist
            InvalidStateError: If no transfer is pending
        """
        certificate = await self.certificate_service.accept_transfer(
            CertificateId(request.certificate_id)
        )
        return CertificateResponse.from_certificate(certificate)
