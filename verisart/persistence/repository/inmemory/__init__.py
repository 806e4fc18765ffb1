"""In-memory repository implementations."""

from .certificate import InMemoryCertificateRepository
from .user import InMemoryUserRepository

__all__ = [
    "InMemoryCertificateRepository",
    "InMemoryUserRepository",
]
