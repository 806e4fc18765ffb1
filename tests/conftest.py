"""Test configuration and fixtures."""

import asyncio
from datetime import datetime

import logfire

from verisart.domain.model import Certificate, User
from verisart.domain.repository import StoreLocks
from verisart.domain.service import CertificateService, UserService
from verisart.domain.value import CertificateId, UserId, derive_identifier
from verisart.persistence.repository.inmemory import (
    InMemoryCertificateRepository,
    InMemoryUserRepository,
)

# Spans and logs stay in-process during tests
logfire.configure(send_to_logfire=False, console=False)


def make_user(email: str = "bob@x.com", name: str = "Bob") -> User:
    """Helper to build a user carrying its derived id.

    Args:
        email: User email
        name: Display name

    Returns:
        User with id set as the directory would set it
    """
    return User(id=UserId(derive_identifier(email)), email=email, name=name)


def make_certificate(
    title: str = "Mona Lisa",
    owner_id: str = "ab12",
    year: int = 0,
    note: str = "",
) -> Certificate:
    """Helper to build a certificate carrying its derived id.

    Args:
        title: Certificate title
        owner_id: Owner's user ID
        year: Year of the work
        note: Free-text note

    Returns:
        Certificate with id set as the registry would set it
    """
    return Certificate(
        id=CertificateId(derive_identifier(title)),
        title=title,
        created_at=datetime(2024, 1, 1, 12, 0, 0),
        owner_id=UserId(owner_id),
        year=year,
        note=note,
    )


class YieldingUserRepository(InMemoryUserRepository):
    """User repository whose lookups give up the event loop.

    Lets concurrent coroutines interleave between a read and the following
    write, the way a networked store would.
    """

    async def find_by_id(self, user_id: UserId) -> User | None:
        await asyncio.sleep(0)
        return await super().find_by_id(user_id)

    async def find_by_email(self, email: str) -> User | None:
        await asyncio.sleep(0)
        return await super().find_by_email(email)


class YieldingCertificateRepository(InMemoryCertificateRepository):
    """Certificate repository whose lookups give up the event loop."""

    async def find_by_id(self, certificate_id: CertificateId) -> Certificate | None:
        await asyncio.sleep(0)
        return await super().find_by_id(certificate_id)


def make_yielding_services() -> tuple[UserService, CertificateService]:
    """Build services over yielding repositories sharing one set of locks."""
    locks = StoreLocks()
    user_service = UserService(user_repository=YieldingUserRepository(), locks=locks)
    certificate_service = CertificateService(
        certificate_repository=YieldingCertificateRepository(),
        user_service=user_service,
        locks=locks,
    )
    return user_service, certificate_service
