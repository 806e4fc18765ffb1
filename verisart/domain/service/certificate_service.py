"""Certificate domain service."""

import logfire

from verisart.domain.error import (
    AlreadyExistsError,
    InvalidStateError,
    NotAuthorizedError,
    NotFoundError,
)
from verisart.domain.model import Certificate
from verisart.domain.repository import CertificateRepository, StoreLocks
from verisart.domain.value import (
    CertificateId,
    Transfer,
    TransferStatus,
    UserId,
    derive_identifier,
)

from .base import Service
from .user_service import UserService


class CertificateService(Service):
    """Domain service for the certificate registry and its transfers."""

    def __init__(
        self,
        certificate_repository: CertificateRepository,
        user_service: UserService,
        locks: StoreLocks,
    ) -> None:
        """Initialize certificate service.

        Args:
            certificate_repository: Certificate repository
            user_service: User domain service, used to resolve transfer recipients
            locks: Store write locks
        """
        self.certificate_repository = certificate_repository
        self.user_service = user_service
        self.locks = locks

    async def create_certificate(self, certificate: Certificate) -> Certificate:
        """Create a certificate, deriving its ID from its title.

        Args:
            certificate: Certificate to create (any id it carries is ignored)

        Returns:
            The stored certificate, with its id set

        Raises:
            AlreadyExistsError: If a certificate with the same title exists
        """
        with logfire.span(
            "certificate_service.create_certificate", title=certificate.title
        ):
            certificate_id = CertificateId(derive_identifier(certificate.title))

            async with self.locks.certificates:
                if await self.certificate_repository.find_by_id(certificate_id):
                    raise AlreadyExistsError("Certificate", certificate_id)

                saved = await self.certificate_repository.save(
                    certificate.model_copy(update={"id": certificate_id})
                )

            logfire.info(
                "Certificate created",
                certificate_id=saved.id,
                owner_id=saved.owner_id,
            )
            return saved

    async def update_certificate(
        self, certificate: Certificate, owner_id: UserId | None = None
    ) -> Certificate:
        """Replace a stored certificate wholesale.

        Nothing is merged: fields left at their defaults in the new value
        overwrite what was stored.

        Args:
            certificate: Complete new state, identified by its id
            owner_id: If given, the stored certificate must belong to this user

        Returns:
            The stored certificate

        Raises:
            NotFoundError: If no certificate has this id
            NotAuthorizedError: If owner_id is given and does not own it
        """
        with logfire.span(
            "certificate_service.update_certificate", certificate_id=certificate.id
        ):
            async with self.locks.certificates:
                if certificate.id is None:
                    raise NotFoundError("Certificate", str(certificate.id))
                await self._get_owned(certificate.id, owner_id)

                saved = await self.certificate_repository.save(certificate)

            logfire.info("Certificate updated", certificate_id=saved.id)
            return saved

    async def delete_certificate(
        self, certificate_id: CertificateId, owner_id: UserId | None = None
    ) -> None:
        """Delete a certificate.

        Without owner_id, deleting a missing certificate is a no-op.

        Args:
            certificate_id: Certificate ID
            owner_id: If given, the certificate must exist and belong to this user

        Raises:
            NotFoundError: If owner_id is given and the certificate is missing
            NotAuthorizedError: If owner_id is given and does not own it
        """
        with logfire.span(
            "certificate_service.delete_certificate", certificate_id=certificate_id
        ):
            async with self.locks.certificates:
                if owner_id is not None:
                    await self._get_owned(certificate_id, owner_id)
                await self.certificate_repository.delete(certificate_id)
            logfire.info("Certificate deleted", certificate_id=certificate_id)

    async def get_certificates_by_owner(self, owner_id: UserId) -> list[Certificate]:
        """Get every certificate a user owns, in no particular order.

        Linear in the total number of certificates.

        Args:
            owner_id: Owner's user ID

        Returns:
            List of certificates (empty if the user owns none)
        """
        with logfire.span(
            "certificate_service.get_certificates_by_owner", owner_id=owner_id
        ):
            certificates = await self.certificate_repository.find_by_owner(owner_id)
            logfire.info(
                "Certificates listed", owner_id=owner_id, count=len(certificates)
            )
            return certificates

    async def get_certificate_by_id(self, certificate_id: CertificateId) -> Certificate:
        """Get a certificate by ID.

        Args:
            certificate_id: Certificate ID

        Returns:
            Certificate entity

        Raises:
            NotFoundError: If certificate not found
        """
        with logfire.span(
            "certificate_service.get_certificate_by_id", certificate_id=certificate_id
        ):
            certificate = await self.certificate_repository.find_by_id(certificate_id)
            if not certificate:
                raise NotFoundError("Certificate", certificate_id)
            return certificate

    async def check_ownership(
        self, certificate_id: CertificateId, owner_id: UserId
    ) -> bool:
        """Check whether a user owns a certificate.

        Only a missing certificate is an error; a certificate owned by
        someone else is a plain False.

        Args:
            certificate_id: Certificate ID
            owner_id: Candidate owner's user ID

        Returns:
            True if the certificate is owned by owner_id

        Raises:
            NotFoundError: If certificate not found
        """
        certificate = await self.get_certificate_by_id(certificate_id)
        return certificate.owner_id == owner_id

    async def create_transfer(
        self,
        certificate_id: CertificateId,
        transfer: Transfer,
        owner_id: UserId | None = None,
    ) -> Certificate:
        """Record a transfer on a certificate.

        Any previous transfer is overwritten, even one still pending.

        Args:
            certificate_id: Certificate ID
            transfer: Transfer to record
            owner_id: If given, the certificate must belong to this user

        Returns:
            Updated certificate

        Raises:
            NotFoundError: If certificate not found
            NotAuthorizedError: If owner_id is given and does not own it
        """
        with logfire.span(
            "certificate_service.create_transfer",
            certificate_id=certificate_id,
            email=transfer.email,
            status=transfer.status.value,
        ):
            async with self.locks.certificates:
                certificate = await self._get_owned(certificate_id, owner_id)
                saved = await self.certificate_repository.save(
                    certificate.model_copy(update={"transfer": transfer})
                )

            logfire.info(
                "Transfer created",
                certificate_id=certificate_id,
                email=transfer.email,
            )
            return saved

    async def accept_transfer(self, certificate_id: CertificateId) -> Certificate:
        """Accept the pending transfer of a certificate.

        Resolves the recipient by the transfer's email, creating a user for
        it when none exists, then makes the recipient the owner and clears
        the transfer.

        The certificates lock is held for the whole sequence. The recipient
        is committed to the user directory before the certificate is saved
        and is not rolled back if saving the certificate fails.

        Args:
            certificate_id: Certificate ID

        Returns:
            Updated certificate

        Raises:
            NotFoundError: If certificate not found
            InvalidStateError: If the certificate has no pending transfer
        """
        with logfire.span(
            "certificate_service.accept_transfer", certificate_id=certificate_id
        ):
            async with self.locks.certificates:
                certificate = await self.get_certificate_by_id(certificate_id)
                if not certificate.transfer.is_pending:
                    raise InvalidStateError(
                        f"No transfer has been initiated for certificate {certificate_id}"
                    )

                recipient = await self.user_service.get_or_create_by_email(
                    certificate.transfer.email
                )

                saved = await self.certificate_repository.save(
                    certificate.model_copy(
                        update={
                            "owner_id": recipient.id,
                            "transfer": Transfer(status=TransferStatus.NONE),
                        }
                    )
                )

            logfire.info(
                "Transfer accepted",
                certificate_id=certificate_id,
                previous_owner_id=certificate.owner_id,
                owner_id=saved.owner_id,
            )
            return saved

    async def _get_owned(
        self, certificate_id: CertificateId, owner_id: UserId | None
    ) -> Certificate:
        # Caller holds self.locks.certificates
        certificate = await self.get_certificate_by_id(certificate_id)
        if owner_id is not None and certificate.owner_id != owner_id:
            raise NotAuthorizedError("certificate", certificate_id, owner_id)
        return certificate
