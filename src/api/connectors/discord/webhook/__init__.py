"""Webhook de interações Discord: assinatura e parsing seguro."""

from .receive import (
    SIGNATURE_HEADER,
    TIMESTAMP_HEADER,
    InteractionRequestError,
    InvalidJsonError,
    InvalidSignatureError,
    parse_interaction_request,
    verify_interaction_request,
)

__all__ = [
    "SIGNATURE_HEADER",
    "TIMESTAMP_HEADER",
    "InteractionRequestError",
    "InvalidJsonError",
    "InvalidSignatureError",
    "parse_interaction_request",
    "verify_interaction_request",
]
