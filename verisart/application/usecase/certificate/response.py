"""Certificate response shared by certificate and transfer use cases."""

from datetime import datetime

from pydantic import BaseModel

from verisart.domain.model import Certificate
from verisart.domain.value import TransferStatus


class TransferInfo(BaseModel):
    """Transfer embedded in a certificate response."""

    email: str
    status: TransferStatus


class CertificateResponse(BaseModel):
    """Certificate as returned to callers."""

    id: str
    title: str
    created_at: datetime
    owner_id: str
    year: int
    note: str
    transfer: TransferInfo

    @classmethod
    def from_certificate(cls, certificate: Certificate) -> "CertificateResponse":
        """Build a response from a stored certificate."""
        return cls(
            id=str(certificate.id),
            title=certificate.title,
            created_at=certificate.created_at,
            owner_id=certificate.owner_id,
            year=certificate.year,
            note=certificate.note,
            transfer=TransferInfo(
                email=certificate.transfer.email,
                status=certificate.transfer.status,
            ),
        )
