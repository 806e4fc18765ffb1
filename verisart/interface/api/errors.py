"""Global error handlers.

Maps domain errors to HTTP responses. This is the only place failures are
logged; the domain layer just raises.
"""

import logfire
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from verisart.domain.error import (
    AlreadyExistsError,
    DomainError,
    InvalidStateError,
    NotAuthorizedError,
    NotFoundError,
    ValidationError,
)

DOMAIN_ERROR_STATUS_MAP: dict[type[DomainError], int] = {
    NotFoundError: status.HTTP_404_NOT_FOUND,
    AlreadyExistsError: status.HTTP_409_CONFLICT,
    InvalidStateError: status.HTTP_409_CONFLICT,
    NotAuthorizedError: status.HTTP_403_FORBIDDEN,
    ValidationError: status.HTTP_422_UNPROCESSABLE_ENTITY,
}


def status_for(error: DomainError) -> int:
    """Get the HTTP status for a domain error.

    Args:
        error: Domain error

    Returns:
        Mapped status code, 400 for unmapped domain errors
    """
    return DOMAIN_ERROR_STATUS_MAP.get(type(error), status.HTTP_400_BAD_REQUEST)


def register_error_handlers(app: FastAPI) -> None:
    """Register global error handlers on the FastAPI app."""

    @app.exception_handler(DomainError)
    async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
        status_code = status_for(exc)

        if isinstance(exc, NotAuthorizedError):
            logfire.error(
                "Ownership mismatch",
                path=request.url.path,
                user_id=exc.user_id,
                resource_id=exc.resource_id,
            )
        else:
            logfire.warn(
                "Request failed",
                path=request.url.path,
                error=str(exc),
                error_type=type(exc).__name__,
                status_code=status_code,
            )

        return JSONResponse(
            status_code=status_code,
            content={"detail": str(exc), "code": type(exc).__name__},
        )
