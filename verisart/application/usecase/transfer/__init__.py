"""Transfer use cases."""

from .accept_transfer import AcceptTransferRequest, AcceptTransferUseCase
from .create_transfer import CreateTransferRequest, CreateTransferUseCase

__all__ = [
    "AcceptTransferRequest",
    "AcceptTransferUseCase",
    "CreateTransferRequest",
    "CreateTransferUseCase",
]
