"""Delete certificate use case."""

import logfire
from pydantic import BaseModel

from verisart.domain.service import CertificateService
from verisart.domain.value import CertificateId, UserId


class DeleteCertificateRequest(BaseModel):
    """Delete certificate request."""

    certificate_id: str
    user_id: str  # Authenticated caller


class DeleteCertificateResponse(BaseModel):
    """Delete certificate response."""

    certificate_id: str


class DeleteCertificateUseCase:
    """Use case for deleting a certificate owned by the caller."""

    def __init__(self, certificate_service: CertificateService) -> None:
        """Initialize delete certificate use case.

        Args:
            certificate_service: Certificate domain service
        """
        self.certificate_service = certificate_service

    async def execute(
        self, request: DeleteCertificateRequest
    ) -> DeleteCertificateResponse:
        """Execute delete certificate flow.

        Args:
            request: Delete certificate request

        Returns:
            Response naming the deleted certificate

        Raises:
            NotFoundError: If the certificate does not exist
            NotAuthorizedError: If the caller does not own the certificate
        """
        certificate_id = CertificateId(request.certificate_id)

        with logfire.span(
            "delete_certificate.execute",
            certificate_id=request.certificate_id,
            user_id=request.user_id,
        ):
            await self.certificate_service.delete_certificate(
                certificate_id, owner_id=UserId(request.user_id)
            )
            return DeleteCertificateResponse(certificate_id=request.certificate_id)
