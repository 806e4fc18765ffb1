"""Certificate aggregate root.

A certificate asserts that a user owns a titled work. Ownership moves
between users through the embedded transfer: the owner records a pending
transfer to an email, and accepting it reassigns the certificate.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from verisart.domain.model.common import DomainModel
from verisart.domain.value import CertificateId, Transfer, UserId


class Certificate(DomainModel):
    """Certificate aggregate root.

    The id is derived from the title, so titles are unique across the
    registry regardless of owner.
    """

    id: Optional[CertificateId] = None  # Set by the registry on creation
    title: str = Field(min_length=1)
    created_at: datetime = Field(default_factory=datetime.now)
    owner_id: UserId
    year: int = 0
    note: str = ""
    transfer: Transfer = Field(default_factory=Transfer)
