"""Create certificate use case."""

from datetime import datetime

import logfire
from pydantic import BaseModel, Field

from verisart.application.usecase.base import BaseUseCase
from verisart.application.usecase.certificate.response import CertificateResponse
from verisart.domain.model import Certificate
from verisart.domain.service import CertificateService
from verisart.domain.value import UserId


class CreateCertificateRequest(BaseModel):
    """Create certificate request."""

    owner_id: str  # Authenticated caller
    title: str = Field(min_length=1)
    year: int = 0
    note: str = ""


class CreateCertificateUseCase(BaseUseCase):
    """Use case for registering a certificate for the calling user."""

    def __init__(self, certificate_service: CertificateService) -> None:
        """Initialize create certificate use case.

        Args:
            certificate_service: Certificate domain service
        """
        self.certificate_service = certificate_service

    async def execute(self, request: CreateCertificateRequest) -> CertificateResponse:
        """Execute create certificate flow.

        The certificate is owned by the caller and stamped with the current
        time; neither can be chosen by the client.

        Args:
            request: Create certificate request

        Returns:
            The created certificate

        Raises:
            AlreadyExistsError: If a certificate with the same title exists
        """
        with logfire.span("create_certificate.execute", owner_id=request.owner_id):
            certificate = Certificate(
                title=request.title,
                created_at=datetime.now(),
                owner_id=UserId(request.owner_id),
                year=request.year,
                note=request.note,
            )
            created = await self.certificate_service.create_certificate(certificate)
            return CertificateResponse.from_certificate(created)
