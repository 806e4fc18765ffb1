"""Domain model entities for Verisart."""

from verisart.domain.model.certificate import Certificate
from verisart.domain.model.user import User

__all__ = [
    "Certificate",
    "User",
]
