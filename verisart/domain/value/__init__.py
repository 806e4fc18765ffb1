"""Domain value objects for Verisart."""

from verisart.domain.value.identifiers import (
    CertificateId,
    UserId,
    derive_identifier,
)
from verisart.domain.value.types import Transfer, TransferStatus

__all__ = [
    # Identifiers
    "CertificateId",
    "UserId",
    "derive_identifier",
    # Types
    "Transfer",
    "TransferStatus",
]
