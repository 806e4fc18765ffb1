"""In-memory certificate repository."""

from typing import Optional

from verisart.domain.model.certificate import Certificate
from verisart.domain.repository.certificate import CertificateRepository
from verisart.domain.value import CertificateId, UserId


class InMemoryCertificateRepository(CertificateRepository):
    """In-memory implementation of CertificateRepository."""

    def __init__(self) -> None:
        self._certificates: dict[CertificateId, Certificate] = {}

    async def find_by_id(self, certificate_id: CertificateId) -> Optional[Certificate]:
        """Find a certificate by ID."""
        return self._certificates.get(certificate_id)

    async def find_by_owner(self, owner_id: UserId) -> list[Certificate]:
        """Find certificates by owner.

        There is no owner index: this scans every certificate, O(n) in the
        size of the store.
        """
        return [c for c in self._certificates.values() if c.owner_id == owner_id]

    async def save(self, certificate: Certificate) -> Certificate:
        """Save or replace a certificate."""
        if certificate.id is None:
            raise ValueError("Cannot save a certificate without an id")
        self._certificates[certificate.id] = certificate
        return certificate

    async def delete(self, certificate_id: CertificateId) -> None:
        """Delete a certificate."""
        self._certificates.pop(certificate_id, None)
