"""Certificate use cases."""

from verisart.application.usecase.certificate.create_certificate import (
    CreateCertificateRequest,
    CreateCertificateUseCase,
)
from verisart.application.usecase.certificate.delete_certificate import (
    DeleteCertificateRequest,
    DeleteCertificateResponse,
    DeleteCertificateUseCase,
)
from verisart.application.usecase.certificate.response import (
    CertificateResponse,
    TransferInfo,
)
from verisart.application.usecase.certificate.update_certificate import (
    UpdateCertificateRequest,
    UpdateCertificateUseCase,
)

__all__ = [
    "CertificateResponse",
    "CreateCertificateRequest",
    "CreateCertificateUseCase",
    "DeleteCertificateRequest",
    "DeleteCertificateResponse",
    "DeleteCertificateUseCase",
    "TransferInfo",
    "UpdateCertificateRequest",
    "UpdateCertificateUseCase",
]
