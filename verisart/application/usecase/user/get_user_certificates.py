"""Get user certificates use case."""

from pydantic import BaseModel

from verisart.application.usecase.certificate.response import CertificateResponse
from verisart.domain.service import CertificateService
from verisart.domain.value import UserId


class GetUserCertificatesRequest(BaseModel):
    """Get user certificates request."""

    user_id: str


class GetUserCertificatesResponse(BaseModel):
    """Get user certificates response."""

    certificates: list[CertificateResponse]
    total: int


class GetUserCertificatesUseCase:
    """Use case for listing the certificates a user owns.

    The user does not need to exist: an unknown id simply owns nothing.
    """

    def __init__(self, certificate_service: CertificateService) -> None:
        """Initialize get user certificates use case.

        Args:
            certificate_service: Certificate domain service
        """
        self.certificate_service = certificate_service

    async def execute(
        self, request: GetUserCertificatesRequest
    ) -> GetUserCertificatesResponse:
        """Execute get user certificates flow.

        Args:
            request: Request with the owner's user ID

        Returns:
            The user's certificates (possibly none)
        """
        certificates = await self.certificate_service.get_certificates_by_owner(
            UserId(request.user_id)
        )
        items = [CertificateResponse.from_certificate(c) for c in certificates]
        return GetUserCertificatesResponse(certificates=items, total=len(items))
