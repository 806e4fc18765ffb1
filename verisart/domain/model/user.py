"""User entity.

A user's id is derived from their email, so an email can only ever belong
to one user. Users are created explicitly, or implicitly when a certificate
is transferred to an email that has no account yet.
"""

from typing import Optional

from verisart.domain.model.common import DomainModel
from verisart.domain.value import UserId


class User(DomainModel):
    """User entity."""

    id: Optional[UserId] = None  # Set by the user directory on creation
    email: str
    name: str
