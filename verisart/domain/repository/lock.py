"""Per-collection write locks.

The stores have no transactions, so every read-check-write sequence in the
domain services runs under the lock of the collection it writes. That
includes the owner check guarding a certificate write, so ownership cannot
change between check and save. Services that write both collections take
the certificates lock first, then the users lock.
"""

import asyncio
from dataclasses import dataclass, field


@dataclass
class StoreLocks:
    """One lock per collection, living exactly as long as the stores."""

    users: asyncio.Lock = field(default_factory=asyncio.Lock)
    certificates: asyncio.Lock = field(default_factory=asyncio.Lock)
