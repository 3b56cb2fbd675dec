from .accounts import (
    AccountResponse,
    DeleteAccountResponse,
    LoginRequest,
    RegisterAccount,
)
from .messages import CreateMessageRequest, MessageResponse, UpdateMessageRequest
from .serde_base import SerdeBase

__all__ = [
    "AccountResponse",
    "CreateMessageRequest",
    "DeleteAccountResponse",
    "LoginRequest",
    "MessageResponse",
    "RegisterAccount",
    "SerdeBase",
    "UpdateMessageRequest",
]
