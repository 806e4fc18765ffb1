"""Certificate and transfer routes.

Every route here requires the X-Owner-ID header to name an existing user.
"""

from datetime import datetime

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header, Response, status
from pydantic import BaseModel, EmailStr, Field

from verisart.application.usecase.auth import AuthenticateOwnerUseCase
from verisart.application.usecase.certificate import (
    CertificateResponse,
    CreateCertificateRequest,
    CreateCertificateUseCase,
    DeleteCertificateRequest,
    DeleteCertificateUseCase,
    TransferInfo,
    UpdateCertificateRequest,
    UpdateCertificateUseCase,
)
from verisart.application.usecase.transfer import (
    AcceptTransferRequest,
    AcceptTransferUseCase,
    CreateTransferRequest,
    CreateTransferUseCase,
)
from verisart.domain.value import TransferStatus
from verisart.interface.api.auth import OWNER_HEADER, require_owner

router = APIRouter(
    prefix="/certificates", tags=["certificates"], route_class=DishkaRoute
)


class CreateCertificateAPIRequest(BaseModel):
    """API request for creating a certificate."""

    title: str = Field(min_length=1, max_length=500)
    year: int = 0
    note: str = ""


class UpdateCertificateAPIRequest(BaseModel):
    """API request for replacing a certificate.

    The complete desired state: omitted optional fields are reset.
    """

    id: str
    title: str = Field(min_length=1, max_length=500)
    created_at: datetime
    owner_id: str
    year: int = 0
    note: str = ""
    transfer: TransferInfo = TransferInfo(email="", status=TransferStatus.NONE)


class CreateTransferAPIRequest(BaseModel):
    """API request for offering a certificate to someone."""

    email: EmailStr


@router.post(
    "/", response_model=CertificateResponse, status_code=status.HTTP_201_CREATED
)
async def create_certificate(
    request: CreateCertificateAPIRequest,
    create_certificate_use_case: FromDishka[CreateCertificateUseCase],
    authenticate_owner_use_case: FromDishka[AuthenticateOwnerUseCase],
    x_owner_id: str | None = Header(default=None, alias=OWNER_HEADER),
) -> CertificateResponse:
    """Register a certificate owned by the caller.

    Args:
        request: Certificate details
        create_certificate_use_case: Create certificate use case from DI
        authenticate_owner_use_case: Authenticate owner use case from DI
        x_owner_id: Caller's user ID

    Returns:
        The created certificate; its id is derived from the title

    Raises:
        HTTPException: If not authenticated
    """
    owner_id = await require_owner(x_owner_id, authenticate_owner_use_case)

    return await create_certificate_use_case.execute(
        CreateCertificateRequest(
            owner_id=owner_id,
            title=request.title,
            year=request.year,
            note=request.note,
        )
    )


@router.put("/{certificate_id}/", response_model=CertificateResponse)
async def update_certificate(
    certificate_id: str,
    request: UpdateCertificateAPIRequest,
    update_certificate_use_case: FromDishka[UpdateCertificateUseCase],
    authenticate_owner_use_case: FromDishka[AuthenticateOwnerUseCase],
    x_owner_id: str | None = Header(default=None, alias=OWNER_HEADER),
) -> CertificateResponse:
    """Replace a certificate owned by the caller.

    Args:
        certificate_id: Certificate ID from the path
        request: Complete new state of the certificate
        update_certificate_use_case: Update certificate use case from DI
        authenticate_owner_use_case: Authenticate owner use case from DI
        x_owner_id: Caller's user ID

    Returns:
        The updated certificate

    Raises:
        HTTPException: If not authenticated
    """
    user_id = await require_owner(x_owner_id, authenticate_owner_use_case)

    return await update_certificate_use_case.execute(
        UpdateCertificateRequest(
            certificate_id=certificate_id,
            user_id=user_id,
            id=request.id,
            title=request.title,
            created_at=request.created_at,
            owner_id=request.owner_id,
            year=request.year,
            note=request.note,
            transfer=request.transfer,
        )
    )


@router.delete(
    "/{certificate_id}/",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
)
async def delete_certificate(
    certificate_id: str,
    delete_certificate_use_case: FromDishka[DeleteCertificateUseCase],
    authenticate_owner_use_case: FromDishka[AuthenticateOwnerUseCase],
    x_owner_id: str | None = Header(default=None, alias=OWNER_HEADER),
) -> Response:
    """Delete a certificate owned by the caller.

    Args:
        certificate_id: Certificate ID
        delete_certificate_use_case: Delete certificate use case from DI
        authenticate_owner_use_case: Authenticate owner use case from DI
        x_owner_id: Caller's user ID

    Raises:
        HTTPException: If not authenticated
    """
    user_id = await require_owner(x_owner_id, authenticate_owner_use_case)

    await delete_certificate_use_case.execute(
        DeleteCertificateRequest(certificate_id=certificate_id, user_id=user_id)
    )
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post(
    "/{certificate_id}/transfers/",
    response_model=CertificateResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_transfer(
    certificate_id: str,
    request: CreateTransferAPIRequest,
    create_transfer_use_case: FromDishka[CreateTransferUseCase],
    authenticate_owner_use_case: FromDishka[AuthenticateOwnerUseCase],
    x_owner_id: str | None = Header(default=None, alias=OWNER_HEADER),
) -> CertificateResponse:
    """Offer a certificate owned by the caller to another user.

    Args:
        certificate_id: Certificate ID
        request: Recipient email
        create_transfer_use_case: Create transfer use case from DI
        authenticate_owner_use_case: Authenticate owner use case from DI
        x_owner_id: Caller's user ID

    Returns:
        The certificate with its pending transfer

    Raises:
        HTTPException: If not authenticated
    """
    user_id = await require_owner(x_owner_id, authenticate_owner_use_case)

    return await create_transfer_use_case.execute(
        CreateTransferRequest(
            certificate_id=certificate_id, user_id=user_id, email=request.email
        )
    )


@router.put("/{certificate_id}/transfers/", response_model=CertificateResponse)
async def accept_transfer(
    certificate_id: str,
    accept_transfer_use_case: FromDishka[AcceptTransferUseCase],
    authenticate_owner_use_case: FromDishka[AuthenticateOwnerUseCase],
    x_owner_id: str | None = Header(default=None, alias=OWNER_HEADER),
) -> CertificateResponse:
    """Accept the pending transfer of a certificate.

    If the recipient email has no account yet, one is created for it.

    Args:
        certificate_id: Certificate ID
        accept_transfer_use_case: Accept transfer use case from DI
        authenticate_owner_use_case: Authenticate owner use case from DI
        x_owner_id: Caller's user ID

    Returns:
        The certificate under its new owner

    Raises:
        HTTPException: If not authenticated
    """
    user_id = await require_owner(x_owner_id, authenticate_owner_use_case)

    return await accept_transfer_use_case.execute(
        AcceptTransferRequest(certificate_id=certificate_id, user_id=user_id)
    )
