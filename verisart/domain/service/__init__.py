"""Domain services."""

from .base import Service
from .certificate_service import CertificateService
from .user_service import UserService

__all__ = [
    "CertificateService",
    "Service",
    "UserService",
]
