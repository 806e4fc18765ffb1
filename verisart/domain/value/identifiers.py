"""Strongly typed identifiers for Verisart domain entities.

Identifiers are content-addressed: a user's id is derived from their email
and a certificate's id from its title. Two certificates with the same title
therefore share an id, and the second one cannot be created.
"""

import hashlib
from typing import NewType

UserId = NewType("UserId", str)
CertificateId = NewType("CertificateId", str)


def derive_identifier(value: str) -> str:
    """Derive a stable identifier from an arbitrary string.

    The identifier is the MD5 digest of the UTF-8 encoded value, as 32
    lowercase hex characters. This is a primary key, not a security
    boundary; collisions are possible and not mitigated.

    Args:
        value: Source string (an email, a title)

    Returns:
        32-character lowercase hex digest
    """
    return hashlib.md5(value.encode("utf-8")).hexdigest()
