"""Domain value objects for Verisart.

Value objects are immutable and defined by their values, not identity.
"""

from enum import Enum

from verisart.domain.value.common import ValueObject


class TransferStatus(str, Enum):
    """Status of a certificate transfer."""

    NONE = "none"
    PENDING = "pending"


class Transfer(ValueObject):
    """Transfer of a certificate to another user, embedded in the certificate.

    A certificate carries at most one transfer. Recording a new one replaces
    whatever was there before, pending or not.
    """

    email: str = ""  # Recipient; may not have an account yet
    status: TransferStatus = TransferStatus.NONE

    @property
    def is_pending(self) -> bool:
        """Whether the transfer is waiting to be accepted."""
        return self.status == TransferStatus.PENDING
