"""Caller authentication for certificate routes."""

from fastapi import HTTPException, status

from verisart.application.usecase.auth import (
    AuthenticateOwnerRequest,
    AuthenticateOwnerUseCase,
)

OWNER_HEADER = "X-Owner-ID"


async def require_owner(
    owner_id: str | None, authenticate_owner_use_case: AuthenticateOwnerUseCase
) -> str:
    """Resolve the X-Owner-ID header to an existing user.

    Args:
        owner_id: Header value, None if absent
        authenticate_owner_use_case: Authenticate owner use case

    Returns:
        The caller's user ID

    Raises:
        HTTPException: 403 if the header is missing or names no user
    """
    caller = await authenticate_owner_use_case.execute(
        AuthenticateOwnerRequest(owner_id=owner_id)
    )
    if caller is None:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Forbidden")
    return caller.user_id
