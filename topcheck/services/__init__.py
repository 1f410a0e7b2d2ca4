"""Request payloads and response envelopes for the TopCheck API."""

from .dto import ConversionPayload, Payload, StatusPayload, encode_payload
from .envelopes import (
    ERROR_MESSAGES,
    INTERNAL_EMPTY_TCID,
    INTERNAL_UNABLE_TO_LOGIN,
    INTERNAL_UNABLE_TO_SEND,
    TOKEN_NOT_EXIST,
    ApiResponse,
    is_success_response,
)

__all__ = [
    "ApiResponse",
    "ConversionPayload",
    "ERROR_MESSAGES",
    "INTERNAL_EMPTY_TCID",
    "INTERNAL_UNABLE_TO_LOGIN",
    "INTERNAL_UNABLE_TO_SEND",
    "Payload",
    "StatusPayload",
    "TOKEN_NOT_EXIST",
    "encode_payload",
    "is_success_response",
]
