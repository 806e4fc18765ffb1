"""Update certificate use case."""

from datetime import datetime

from pydantic import BaseModel, Field

from verisart.application.usecase.certificate.response import (
    CertificateResponse,
    TransferInfo,
)
from verisart.domain.error import NotAuthorizedError, ValidationError
from verisart.domain.model import Certificate
from verisart.domain.service import CertificateService
from verisart.domain.value import CertificateId, Transfer, TransferStatus, UserId


class UpdateCertificateRequest(BaseModel):
    """Update certificate request.

    Carries the complete new state of the certificate: the update is a
    full replacement, so omitted optional fields are reset to defaults.
    """

    certificate_id: str  # From the resource path
    user_id: str  # Authenticated caller

    id: str
    title: str = Field(min_length=1)
    created_at: datetime
    owner_id: str
    year: int = 0
    note: str = ""
    transfer: TransferInfo = TransferInfo(email="", status=TransferStatus.NONE)


class UpdateCertificateUseCase:
    """Use case for replacing a certificate owned by the caller."""

    def __init__(self, certificate_service: CertificateService) -> None:
        """Initialize update certificate use case.

        Args:
            certificate_service: Certificate domain service
        """
        self.certificate_service = certificate_service

    async def execute(self, request: UpdateCertificateRequest) -> CertificateResponse:
        """Execute update certificate flow.

        Steps:
        1. Payload owner must be the caller
        2. Payload id must match the resource path
        3. Stored certificate must exist and belong to the caller
        4. Replace the stored certificate

        Args:
            request: Update certificate request

        Returns:
            The updated certificate

        Raises:
            NotAuthorizedError: If the caller does not own the certificate
            ValidationError: If the payload id does not match the path
            NotFoundError: If the certificate does not exist
        """
        if request.owner_id != request.user_id:
            raise NotAuthorizedError(
                "certificate", request.certificate_id, request.user_id
            )

        if request.id != request.certificate_id:
            raise ValidationError(
                f"Certificate id {request.id} does not match path {request.certificate_id}"
            )

        certificate_id = CertificateId(request.certificate_id)
        user_id = UserId(request.user_id)

        certificate = Certificate(
            id=certificate_id,
            title=request.title,
            created_at=request.created_at,
            owner_id=user_id,
            year=request.year,
            note=request.note,
            transfer=Transfer(
                email=request.transfer.email, status=request.transfer.status
            ),
        )
        # Ownership of the stored record, not just the payload
        updated = await self.certificate_service.update_certificate(
            certificate, owner_id=user_id
        )
        return CertificateResponse.from_certificate(updated)
