"""Repository interfaces for Verisart domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from verisart.domain.repository.certificate import CertificateRepository
from verisart.domain.repository.lock import StoreLocks
from verisart.domain.repository.user import UserRepository

__all__ = [
    "CertificateRepository",
    "StoreLocks",
    "UserRepository",
]
