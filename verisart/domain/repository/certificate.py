"""Certificate repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from verisart.domain.model.certificate import Certificate
from verisart.domain.value import CertificateId, UserId


class CertificateRepository(ABC):
    """Repository for Certificate aggregate.

    Defines the contract for certificate persistence operations.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def find_by_id(self, certificate_id: CertificateId) -> Optional[Certificate]:
        """Find a certificate by ID.

        Args:
            certificate_id: The certificate's unique identifier

        Returns:
            The certificate if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_owner(self, owner_id: UserId) -> list[Certificate]:
        """Find every certificate owned by a user, in no particular order.

        Args:
            owner_id: The owner's user ID

        Returns:
            List of certificates (empty if the user owns none)
        """
        pass

    @abstractmethod
    async def save(self, certificate: Certificate) -> Certificate:
        """Save a certificate (create or replace).

        Args:
            certificate: The certificate to save, with its id set

        Returns:
            The saved certificate
        """
        pass

    @abstractmethod
    async def delete(self, certificate_id: CertificateId) -> None:
        """Delete a certificate. Deleting a missing certificate is a no-op.

        Args:
            certificate_id: The certificate ID to delete
        """
        pass
